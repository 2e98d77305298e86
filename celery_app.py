import os
import logging
from celery import Celery
from celery.signals import task_failure, task_retry

broker_url = os.environ.get("CELERY_BROKER_URL", "memory://")
backend_url = os.environ.get("CELERY_RESULT_BACKEND", "cache+memory://")
sync_interval = int(os.environ.get("TICKER_SYNC_INTERVAL_SECONDS", 180))
cleanup_interval = int(os.environ.get("TICKER_CLEANUP_INTERVAL_SECONDS", 3600))

celery_app = Celery(
    "eloity",
    broker=broker_url,
    backend=backend_url,
    include=["app.tasks.crypto"],
)
celery_app.conf.task_always_eager = os.environ.get("CELERY_TASK_ALWAYS_EAGER", "0") == "1"
celery_app.conf.task_eager_propagates = True
celery_app.conf.task_store_eager_result = False
celery_app.conf.beat_schedule = {
    "sync-market-tickers": {
        "task": "app.tasks.crypto.sync_market_tickers",
        "schedule": float(sync_interval),
    },
    "cleanup-expired-tickers": {
        "task": "app.tasks.crypto.prune_expired_tickers",
        "schedule": float(cleanup_interval),
    },
}

logger = logging.getLogger(__name__)

@task_failure.connect
def _log_failure(sender=None, task_id=None, exception=None, **kwargs):
    logger.error("Task %s failed: %s", getattr(sender, 'name', task_id), exception)

@task_retry.connect
def _log_retry(sender=None, request=None, reason=None, **kwargs):
    logger.warning("Task %s retry due to: %s", getattr(sender, 'name', ''), reason)
