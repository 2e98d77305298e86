"""Bybit v5 public market endpoints."""
import logging
import time
from flask import current_app
from .http import get_json, ProviderError

logger = logging.getLogger(__name__)

PLACEHOLDER_KEY = "your-bybit-public-api-key"

SYMBOL_TO_PAIR = {
    "bitcoin": "BTCUSDT",
    "ethereum": "ETHUSDT",
    "tether": "USDTUSDT",
    "binancecoin": "BNBUSDT",
    "solana": "SOLUSDT",
    "cardano": "ADAUSDT",
    "chainlink": "LINKUSDT",
    "polygon": "MATICUSDT",
    "avalanche": "AVAXUSDT",
    "polkadot": "DOTUSDT",
    "dogecoin": "DOGEUSDT",
    "ripple": "XRPUSDT",
    "litecoin": "LTCUSDT",
}

MAJOR_TRADING_PAIRS = [
    "BTCUSDT", "ETHUSDT", "SOLUSDT", "ADAUSDT", "LINKUSDT", "MATICUSDT",
    "AVAXUSDT", "DOTUSDT", "DOGEUSDT", "BNBUSDT", "XRPUSDT", "LTCUSDT",
    "XLMUSDT", "ATOMUSDT", "NEOUSDT", "UNIUSDT",
]


def is_configured() -> bool:
    key = current_app.config.get("BYBIT_PUBLIC_API") or ""
    return bool(key) and key != PLACEHOLDER_KEY


def _call_public(path, params=None):
    base = current_app.config["BYBIT_BASE_URL"].rstrip("/")
    data = get_json(f"{base}{path}", params=params, timeout=current_app.config["CRYPTO_HTTP_TIMEOUT"])
    if data.get("retCode") != 0:
        raise ProviderError(f"Bybit error: {data.get('retMsg')}")
    return data.get("result") or {}


def _float(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def fetch_ticker(pair, category="spot"):
    """Return a normalised ticker dict, or None when Bybit has no row."""
    result = _call_public("/market/tickers", {"category": category, "symbol": pair})
    rows = result.get("list") or []
    if not rows:
        logger.debug("No Bybit ticker for %s", pair)
        return None
    row = rows[0]
    return {
        "symbol": row.get("symbol", pair),
        "lastPrice": _float(row.get("lastPrice")),
        "highPrice24h": _float(row.get("highPrice24h")),
        "lowPrice24h": _float(row.get("lowPrice24h")),
        "volume24h": _float(row.get("volume24h")),
        # Bybit reports a fraction
        "price24hPcnt": _float(row.get("price24hPcnt")) * 100,
        "timestamp": int(time.time() * 1000),
    }


def server_time():
    result = _call_public("/market/time")
    seconds = result.get("timeSecond")
    return int(seconds) * 1000 if seconds else None


def verify_connection() -> bool:
    try:
        return bool(server_time())
    except ProviderError as e:
        logger.warning("Bybit connection check failed: %s", e)
        return False


def _levels(rows):
    levels = []
    for row in rows or []:
        price, quantity = _float(row[0]), _float(row[1])
        levels.append({"price": price, "quantity": quantity, "total": price * quantity})
    return levels


def fetch_orderbook(pair, limit=25, category="spot"):
    """Market depth with bids best-first (highest) and asks best-first (lowest)."""
    result = _call_public("/market/orderbook", {"category": category, "symbol": pair, "limit": limit})
    bids, asks = _levels(result.get("b")), _levels(result.get("a"))
    if not bids and not asks:
        logger.debug("No Bybit orderbook for %s", pair)
        return None
    return {
        "symbol": pair,
        "bids": sorted(bids, key=lambda level: level["price"], reverse=True),
        "asks": sorted(asks, key=lambda level: level["price"]),
        "timestamp": int(time.time() * 1000),
    }


def fetch_klines(pair, interval="1", limit=200, category="spot"):
    """Candles oldest first; Bybit returns them newest first."""
    result = _call_public(
        "/market/kline",
        {"category": category, "symbol": pair, "interval": interval, "limit": limit},
    )
    rows = result.get("list")
    if not rows:
        logger.debug("No Bybit klines for %s", pair)
        return None
    candles = [
        {
            "timestamp": int(row[0]),
            "open": _float(row[1]),
            "high": _float(row[2]),
            "low": _float(row[3]),
            "close": _float(row[4]),
            "volume": _float(row[5]),
            "turnover": _float(row[6]) if len(row) > 6 else 0.0,
        }
        for row in rows
    ]
    candles.reverse()
    return candles


def fetch_recent_trades(pair, limit=100, category="spot"):
    result = _call_public("/market/recent-trade", {"category": category, "symbol": pair, "limit": limit})
    return [
        {
            "tradeId": row.get("execId"),
            "symbol": row.get("symbol", pair),
            "price": _float(row.get("price")),
            "quantity": _float(row.get("size")),
            "timestamp": int(row.get("time") or 0),
            "side": row.get("side"),
            "blockTrade": row.get("isBlockTrade") in (True, "1", "true"),
        }
        for row in result.get("list") or []
    ]


def fetch_instruments(category="spot"):
    result = _call_public("/market/instruments-info", {"category": category, "limit": 1000})
    instruments = []
    for row in result.get("list") or []:
        lot = row.get("lotSizeFilter") or {}
        price_filter = row.get("priceFilter") or {}
        instruments.append({
            "symbol": row.get("symbol"),
            "baseCoin": row.get("baseCoin"),
            "quoteCoin": row.get("quoteCoin"),
            "status": row.get("status"),
            "minOrderQty": lot.get("minOrderQty"),
            "maxOrderQty": lot.get("maxOrderQty"),
            "minPrice": _float(price_filter["minPrice"]) if price_filter.get("minPrice") else None,
            "maxPrice": _float(price_filter["maxPrice"]) if price_filter.get("maxPrice") else None,
        })
    return instruments
