"""Price lookup across the ticker cache, Bybit and CoinGecko."""
import logging
import time
from datetime import timezone
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from models import db
from . import bybit, coingecko
from .http import ProviderError
from .tickers import get_cached

logger = logging.getLogger(__name__)

ESTIMATED_REMAINING_CONFIGURED = 9999


def _entry(symbol, price, change, volume, high, low, timestamp, source):
    return {
        "symbol": symbol,
        "price": price,
        "change24h": change,
        "volume24h": volume,
        "highPrice24h": high,
        "lowPrice24h": low,
        "timestamp": timestamp,
        "source": source,
    }


def _from_cache(symbol, pair):
    try:
        row = get_cached(pair)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning("Ticker cache unavailable: %s", e)
        return None
    if not row:
        return None
    if row.updated_at:
        ts = int(row.updated_at.replace(tzinfo=timezone.utc).timestamp() * 1000)
    else:
        ts = int(time.time() * 1000)
    return _entry(
        symbol, row.last_price, row.price_24h_change or 0.0, row.volume_24h or 0.0,
        row.high_24h or 0.0, row.low_24h or 0.0, ts, row.source or "bybit",
    )


def _from_bybit(symbol, pair):
    try:
        ticker = bybit.fetch_ticker(pair, "spot")
    except ProviderError as e:
        logger.debug("Bybit fetch failed for %s: %s", symbol, e)
        return None
    if not ticker or ticker["lastPrice"] <= 0:
        return None
    return _entry(
        symbol, ticker["lastPrice"], ticker["price24hPcnt"], ticker["volume24h"],
        ticker["highPrice24h"], ticker["lowPrice24h"], ticker["timestamp"], "bybit",
    )


def get_aggregated_prices(symbols, vs_currency="usd"):
    """Map each known symbol to its freshest price; unknown symbols are dropped."""
    vs = (vs_currency or "usd").lower()
    wanted = [s.strip().lower() for s in symbols if s and s.strip()]
    result = {}

    live = bybit.is_configured()
    for symbol in wanted:
        pair = bybit.SYMBOL_TO_PAIR.get(symbol)
        if not pair or vs != "usd":
            continue
        entry = _from_cache(symbol, pair)
        if entry is None and live:
            entry = _from_bybit(symbol, pair)
        if entry is not None:
            result[symbol] = entry

    missing = [s for s in wanted if s not in result]
    if missing:
        logger.info("Using CoinGecko for %s", ",".join(missing))
        try:
            prices = coingecko.fetch_simple_prices(missing, vs)
        except ProviderError as e:
            logger.warning("CoinGecko fallback failed: %s", e)
            prices = {}
        now_ms = int(time.time() * 1000)
        for symbol, data in prices.items():
            if symbol in result or not isinstance(data, dict) or vs not in data:
                continue
            result[symbol] = _entry(
                symbol,
                data.get(vs) or 0,
                data.get(f"{vs}_24h_change") or 0,
                data.get(f"{vs}_24h_vol") or 0,
                0, 0, now_ms, "coingecko",
            )
    return result


def check_provider_health():
    return {
        "bybit": bybit.verify_connection(),
        "cryptoapis": bool(current_app.config.get("CRYPTOAPIS_API_KEY")),
    }


def _status(configured):
    return {
        "status": "configured" if configured else "unconfigured",
        "estimatedRemaining": ESTIMATED_REMAINING_CONFIGURED if configured else 0,
    }


def get_rate_limit_status():
    return {
        "bybit": _status(bybit.is_configured()),
        "cryptoapis": _status(bool(current_app.config.get("CRYPTOAPIS_API_KEY"))),
    }


def _part(name, call, default):
    try:
        return call()
    except ProviderError as e:
        logger.warning("Bybit %s unavailable: %s", name, e)
        return default


def get_trading_data(pair, timeframe="1"):
    """Recent trades, order book and candles for one pair, or None without Bybit.

    Each part degrades on its own, so one failing endpoint leaves the others.
    """
    if not bybit.is_configured():
        logger.warning("Bybit not configured, cannot fetch trading data")
        return None
    return {
        "symbol": pair,
        "recentTrades": _part("trades", lambda: bybit.fetch_recent_trades(pair, 50), []),
        "orderbook": _part("orderbook", lambda: bybit.fetch_orderbook(pair, 25), None),
        "klines": _part("klines", lambda: bybit.fetch_klines(pair, timeframe, 200), None) or [],
    }
