from .http import ProviderError
from .aggregator import (
    get_aggregated_prices,
    get_trading_data,
    check_provider_health,
    get_rate_limit_status,
)
from .tickers import sync_tickers, cleanup_expired_tickers
from .p2p import OrderNotFound, list_orders, get_order, user_orders, create_order, estimate_matches

__all__ = [
    "ProviderError",
    "get_aggregated_prices",
    "get_trading_data",
    "check_provider_health",
    "get_rate_limit_status",
    "sync_tickers",
    "cleanup_expired_tickers",
    "OrderNotFound",
    "list_orders",
    "get_order",
    "user_orders",
    "create_order",
    "estimate_matches",
]
