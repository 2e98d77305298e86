"""Offset and cursor pagination helpers.

Offset pagination is used for admin listings where a total count is cheap;
cursor pagination (``id`` + creation timestamp, base64 encoded) is used for
feeds where rows are inserted while the client is paging.
"""
import base64
import binascii
import math
import time
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20


class InvalidCursor(ValueError):
    pass


@dataclass
class PaginationMeta:
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CursorPaginationMeta:
    has_more: bool
    count: int
    cursor: Optional[str] = None
    next_cursor: Optional[str] = None
    previous_cursor: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_pagination_meta(page: int, page_size: int, total: int) -> PaginationMeta:
    return PaginationMeta(
        page=page,
        page_size=page_size,
        total=total,
        total_pages=math.ceil(total / page_size),
        has_next_page=page * page_size < total,
        has_previous_page=page > 1,
    )


def get_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def get_page_number(offset: int, page_size: int) -> int:
    return offset // page_size + 1


def encode_cursor(id: str, timestamp: int) -> str:
    raw = f"{id}:{int(timestamp)}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def decode_cursor(cursor: str) -> Dict[str, Any]:
    """Inverse of :func:`encode_cursor`. Raises InvalidCursor on malformed input."""
    try:
        decoded = base64.b64decode(cursor, validate=True).decode("utf-8")
        id_part, ts_part = decoded.rsplit(":", 1)
        timestamp = int(ts_part)
    except (binascii.Error, UnicodeDecodeError, ValueError, TypeError):
        raise InvalidCursor("Invalid cursor")
    if not id_part:
        raise InvalidCursor("Invalid cursor")
    return {"id": id_part, "timestamp": timestamp}


def build_pagination_query(page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Dict[str, int]:
    return {"offset": get_offset(page, page_size), "limit": page_size}


def _to_epoch_ms(value) -> int:
    if value is None:
        return int(time.time() * 1000)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def _field(item, name):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


class DatabasePagination:
    @staticmethod
    def get_limit_offset(page: int, page_size: int) -> Dict[str, int]:
        valid_page_size = min(max(page_size, 1), MAX_PAGE_SIZE)
        return {"limit": valid_page_size, "offset": (page - 1) * valid_page_size}

    @staticmethod
    def validate(page=1, page_size=DEFAULT_PAGE_SIZE) -> Dict[str, int]:
        """Clamp page to >= 1 and page_size to [1, MAX_PAGE_SIZE]."""
        return {
            "page": max(1, math.floor(page)),
            "page_size": min(max(1, math.floor(page_size)), MAX_PAGE_SIZE),
        }

    @staticmethod
    def generate_cursor_query(cursor: Optional[str] = None, limit: int = DEFAULT_PAGE_SIZE) -> Dict[str, Any]:
        # One extra row tells us whether another page exists
        if not cursor:
            return {"limit": limit + 1}
        return {"limit": limit + 1, "cursor": decode_cursor(cursor)}

    @staticmethod
    def process_cursor_response(items: Sequence, limit: int, cursor: Optional[str] = None) -> Dict[str, Any]:
        has_more = len(items) > limit
        data = list(items[:limit]) if has_more else list(items)

        next_cursor = None
        if has_more and data:
            last = data[-1]
            next_cursor = encode_cursor(str(_field(last, "id")), _to_epoch_ms(_field(last, "created_at")))

        meta = CursorPaginationMeta(
            has_more=has_more,
            count=len(data),
            cursor=cursor,
            next_cursor=next_cursor,
        )
        return {"data": data, "meta": meta}


class MarketplacePagination:
    listing_page_size = 20
    grid_page_size = 24
    search_results_page_size = 20
    seller_products_page_size = 30
    reviews_page_size = 10

    @classmethod
    def get_product_listing_pagination(cls, page: int = 1):
        return DatabasePagination.validate(page, cls.listing_page_size)

    @classmethod
    def get_search_pagination(cls, page: int = 1):
        return DatabasePagination.validate(page, cls.search_results_page_size)

    @classmethod
    def get_reviews_pagination(cls, page: int = 1):
        return DatabasePagination.validate(page, cls.reviews_page_size)

    @classmethod
    def get_seller_products_pagination(cls, page: int = 1):
        return DatabasePagination.validate(page, cls.seller_products_page_size)

    @staticmethod
    def get_price_range_buckets() -> List[Dict[str, Any]]:
        return [
            {"min": 0, "max": 50, "label": "Under $50"},
            {"min": 50, "max": 100, "label": "$50 - $100"},
            {"min": 100, "max": 500, "label": "$100 - $500"},
            {"min": 500, "max": 1000, "label": "$500 - $1000"},
            {"min": 1000, "max": None, "label": "Over $1000"},
        ]


def parse_page_args(args, default_size: int = DEFAULT_PAGE_SIZE) -> Dict[str, int]:
    """Read ``page``/``page_size`` from a request args mapping, ignoring junk."""
    def _int(name, default):
        try:
            return int(args.get(name, default))
        except (TypeError, ValueError):
            return default

    return DatabasePagination.validate(_int("page", 1), _int("page_size", default_size))


def paginate_query(query, page: int, page_size: int) -> Tuple[list, PaginationMeta]:
    params = DatabasePagination.validate(page, page_size)
    total = query.order_by(None).count()
    window = DatabasePagination.get_limit_offset(params["page"], params["page_size"])
    items = query.limit(window["limit"]).offset(window["offset"]).all()
    return items, calculate_pagination_meta(params["page"], params["page_size"], total)
