import logging
from celery import shared_task
from flask import has_app_context
from sqlalchemy.exc import SQLAlchemyError
from app.services.crypto import cleanup_expired_tickers, sync_tickers
from app.utils import transactional

logger = logging.getLogger(__name__)


def _run_sync(pairs):
    with transactional("Ticker cache update failed"):
        return sync_tickers(pairs)


@shared_task(bind=True, max_retries=2, default_retry_delay=30)
def sync_market_tickers(self, pairs=None) -> dict:
    """Pull spot tickers from Bybit into the cache table."""
    try:
        if has_app_context():
            return _run_sync(pairs)
        from app import create_app
        app = create_app()
        with app.app_context():
            return _run_sync(pairs)
    except SQLAlchemyError as exc:
        logger.error("Ticker sync could not write cache: %s", exc)
        raise self.retry(exc=exc)


def _run_cleanup():
    with transactional("Ticker cache cleanup failed"):
        return cleanup_expired_tickers()


@shared_task(bind=True, max_retries=2, default_retry_delay=60)
def prune_expired_tickers(self) -> int:
    """Delete ticker cache rows whose expiry has passed."""
    try:
        if has_app_context():
            return _run_cleanup()
        from app import create_app
        app = create_app()
        with app.app_context():
            return _run_cleanup()
    except SQLAlchemyError as exc:
        logger.error("Ticker cleanup failed: %s", exc)
        raise self.retry(exc=exc)
