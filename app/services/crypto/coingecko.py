import logging
from flask import current_app
from .http import get_json

logger = logging.getLogger(__name__)


def fetch_simple_prices(symbols, vs_currency="usd"):
    """CoinGecko ``/simple/price`` keyed by coin id."""
    if not symbols:
        return {}
    base = current_app.config["COINGECKO_BASE_URL"].rstrip("/")
    params = {
        "ids": ",".join(symbols),
        "vs_currencies": vs_currency,
        "include_24hr_change": "true",
        "include_24hr_vol": "true",
    }
    return get_json(f"{base}/simple/price", params=params, timeout=current_app.config["CRYPTO_HTTP_TIMEOUT"]) or {}
