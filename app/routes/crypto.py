from flask import Blueprint, request, jsonify, g
from app.version import API_PREFIX
from app.schemas.crypto import P2PMatchRequest, P2POrderCreateRequest
from app.services import crypto
from app.services.crypto import OrderNotFound, bybit
from app.utils import (
    auth_required,
    error,
    internal_error_response,
    parse_page_args,
    transactional,
    validate_schema,
)

crypto_bp = Blueprint("crypto", __name__, url_prefix=f"{API_PREFIX}/crypto")

DEFAULT_SYMBOLS = "bitcoin,ethereum"
CATEGORIES = {"spot", "linear", "inverse"}


def _bounded_int(name, default, upper):
    try:
        value = int(request.args.get(name, default))
    except (TypeError, ValueError):
        return default
    return min(max(value, 1), upper)


def _market_args():
    """Return (symbol, category, None) or (None, None, error response)."""
    symbol = (request.args.get("symbol") or "").strip().upper()
    if not symbol:
        return None, None, error("Symbol is required", status=400)
    category = request.args.get("category", "spot")
    if category not in CATEGORIES:
        return None, None, error("Unknown market category", status=400)
    return symbol, category, None


@crypto_bp.route("/prices", methods=["GET"])
def get_prices():
    """
    Aggregated spot prices
    ---
    tags: [Crypto]
    parameters:
      - {name: symbols, in: query, type: string, description: "comma separated coin ids"}
      - {name: vs_currency, in: query, type: string, default: usd}
    responses:
      200: {description: Map of coin id to price data}
    """
    symbols = request.args.get("symbols", DEFAULT_SYMBOLS).split(",")
    vs_currency = request.args.get("vs_currency", "usd")
    return jsonify(crypto.get_aggregated_prices(symbols, vs_currency)), 200


@crypto_bp.route("/health", methods=["GET"])
def provider_health():
    return jsonify(crypto.check_provider_health()), 200


@crypto_bp.route("/rate-limit-status", methods=["GET"])
def rate_limit_status():
    return jsonify(crypto.get_rate_limit_status()), 200


@crypto_bp.route("/orderbook", methods=["GET"])
def get_orderbook():
    """
    Bybit market depth
    ---
    tags: [Crypto]
    parameters:
      - {name: symbol, in: query, type: string, required: true}
      - {name: limit, in: query, type: integer, default: 25}
      - {name: category, in: query, type: string, enum: [spot, linear, inverse]}
    responses:
      200: {description: Bids and asks, best price first}
      404: {description: No order book for the symbol}
      502: {description: Bybit unavailable}
    """
    symbol, category, err = _market_args()
    if err:
        return err
    book = bybit.fetch_orderbook(symbol, _bounded_int("limit", 25, 200), category)
    if not book:
        return error(f"No orderbook data found for {symbol}", status=404)
    return jsonify(book), 200


@crypto_bp.route("/klines", methods=["GET"])
def get_klines():
    symbol, category, err = _market_args()
    if err:
        return err
    interval = request.args.get("interval", "1")
    candles = bybit.fetch_klines(symbol, interval, _bounded_int("limit", 200, 1000), category)
    if not candles:
        return error(f"No kline data found for {symbol}", status=404)
    return jsonify(candles), 200


@crypto_bp.route("/trades", methods=["GET"])
def get_recent_trades():
    symbol, category, err = _market_args()
    if err:
        return err
    return jsonify(bybit.fetch_recent_trades(symbol, _bounded_int("limit", 100, 1000), category)), 200


@crypto_bp.route("/instruments", methods=["GET"])
def get_instruments():
    category = request.args.get("category", "spot")
    if category not in CATEGORIES:
        return error("Unknown market category", status=400)
    instruments = bybit.fetch_instruments(category)
    return jsonify({"category": category, "count": len(instruments), "instruments": instruments}), 200


@crypto_bp.route("/trading-data/<symbol>", methods=["GET"])
def get_trading_data(symbol):
    data = crypto.get_trading_data(symbol.upper(), request.args.get("timeframe", "1"))
    if data is None:
        return error("Trading data unavailable: Bybit is not configured", status=503)
    return jsonify(data), 200


@crypto_bp.route("/p2p/orders", methods=["GET"])
def list_p2p_orders():
    paging = parse_page_args(request.args)
    filters = {
        "cryptocurrency": request.args.get("cryptocurrency"),
        "fiat_currency": request.args.get("fiat_currency"),
        "type": request.args.get("type"),
        "status": request.args.get("status"),
    }
    orders, meta = crypto.list_orders(filters, paging["page"], paging["page_size"])
    return jsonify({"orders": [o.to_dict() for o in orders], "meta": meta.to_dict()}), 200


@crypto_bp.route("/p2p/orders/<order_id>", methods=["GET"])
def get_p2p_order(order_id):
    try:
        order = crypto.get_order(order_id)
    except OrderNotFound as e:
        return error(str(e), status=404)
    return jsonify(order.to_dict()), 200


@crypto_bp.route("/p2p/matches", methods=["POST"])
@validate_schema(P2PMatchRequest)
def estimate_p2p_matches():
    body = request.validated_data
    return jsonify(crypto.estimate_matches(body.type, body.cryptocurrency, body.fiat_currency)), 200


@crypto_bp.route("/p2p/my-orders", methods=["GET"])
@auth_required
def my_p2p_orders():
    orders = crypto.user_orders(g.user_id, status=request.args.get("status"))
    return jsonify({"orders": [o.to_dict() for o in orders], "total": len(orders)}), 200


@crypto_bp.route("/p2p/orders", methods=["POST"])
@auth_required
@validate_schema(P2POrderCreateRequest)
def create_p2p_order():
    try:
        with transactional("Failed to create P2P order"):
            order = crypto.create_order(g.user_id, request.validated_data.model_dump())
    except Exception:
        return internal_error_response()
    return jsonify(order.to_dict()), 201
