from contextlib import contextmanager
import logging
from sqlalchemy import text
from models import db


@contextmanager
def transactional(message="DB transaction failed"):
    """Context manager to wrap a database transaction."""
    try:
        yield
        db.session.commit()
    except Exception as e:
        logging.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise


def apply_statement_timeout(timeout_ms: int) -> None:
    """Bound the current transaction's queries on Postgres; a no-op elsewhere."""
    if not timeout_ms or db.engine.dialect.name != "postgresql":
        return
    db.session.execute(text(f"SET LOCAL statement_timeout = {int(timeout_ms)}"))
