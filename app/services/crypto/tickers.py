import logging
from datetime import datetime, timedelta
from flask import current_app
from models import db
from models.crypto import MarketTicker
from . import bybit
from .http import ProviderError

logger = logging.getLogger(__name__)


def get_cached(pair, now=None):
    row = MarketTicker.query.filter_by(symbol=pair).first()
    if row and row.is_fresh(now):
        return row
    return None


def upsert_ticker(ticker: dict, ttl_seconds: int, source="bybit") -> MarketTicker:
    row = MarketTicker.query.filter_by(symbol=ticker["symbol"]).first()
    if not row:
        row = MarketTicker(symbol=ticker["symbol"])
        db.session.add(row)
    row.last_price = ticker["lastPrice"]
    row.volume_24h = ticker.get("volume24h")
    row.price_24h_change = ticker.get("price24hPcnt")
    row.high_24h = ticker.get("highPrice24h")
    row.low_24h = ticker.get("lowPrice24h")
    row.source = source
    row.expires_at = datetime.utcnow() + timedelta(seconds=ttl_seconds)
    return row


def sync_tickers(pairs=None) -> dict:
    """Refresh cached tickers from Bybit. Caller commits."""
    if not bybit.is_configured():
        logger.warning("Bybit API key not configured, skipping ticker sync")
        return {"skipped": True, "success": 0, "failed": 0}

    ttl = current_app.config["TICKER_CACHE_TTL_SECONDS"]
    success = failed = 0
    for pair in pairs or bybit.MAJOR_TRADING_PAIRS:
        try:
            ticker = bybit.fetch_ticker(pair, "spot")
        except ProviderError as e:
            logger.warning("Failed to sync ticker for %s: %s", pair, e)
            failed += 1
            continue
        if ticker and ticker["lastPrice"] > 0:
            upsert_ticker(ticker, ttl)
            success += 1
        else:
            failed += 1
    logger.info("Ticker sync finished: %s ok, %s failed", success, failed)
    return {"skipped": False, "success": success, "failed": failed}


def cleanup_expired_tickers(now=None) -> int:
    """Delete cache rows past their expiry. Caller commits."""
    deleted = MarketTicker.query.filter(
        MarketTicker.expires_at < (now or datetime.utcnow())
    ).delete(synchronize_session=False)
    logger.info("Removed %s expired ticker row(s)", deleted)
    return deleted
