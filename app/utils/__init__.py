from .responses import ok, error, internal_error_response, validation_error_response
from .auth import auth_required, role_required
from .validation import validate_schema
from .db import transactional, apply_statement_timeout
from .jwt import (
    create_access_token,
    decode_token,
    TokenError,
)
from .pagination import (
    InvalidCursor,
    calculate_pagination_meta,
    parse_page_args,
    paginate_query,
)

__all__ = [
    'ok',
    'error',
    'internal_error_response',
    'validation_error_response',
    'auth_required',
    'role_required',
    'create_access_token',
    'decode_token',
    'TokenError',
    'validate_schema',
    'transactional',
    'apply_statement_timeout',
    'InvalidCursor',
    'calculate_pagination_meta',
    'parse_page_args',
    'paginate_query',
]
