import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

RETRY_STATUSES = (429, 500, 502, 503, 504)

_session = None


class ProviderError(Exception):
    pass


def build_session(total=3, backoff_factor=0.3) -> requests.Session:
    """Session retrying idempotent calls on throttling and upstream errors."""
    retry = Retry(
        total=total,
        connect=total,
        read=total,
        status=total,
        backoff_factor=backoff_factor,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
        respect_retry_after_header=True,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


def get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = build_session()
    return _session


def get_json(url, params=None, timeout=10):
    try:
        resp = get_session().get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise ProviderError(f"Request to {url} failed: {e}") from e
    if resp.status_code != 200:
        raise ProviderError(f"{url} returned status {resp.status_code}")
    try:
        return resp.json()
    except ValueError as e:
        raise ProviderError(f"{url} returned invalid JSON") from e
