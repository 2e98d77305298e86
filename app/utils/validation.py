from functools import wraps
from flask import request
from pydantic import ValidationError
from .responses import validation_error_response


def _json_safe_errors(ve: ValidationError):
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in ve.errors()
    ]


def validate_schema(schema):
    """Decorator to validate request JSON against a Pydantic schema."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                obj = schema(**(request.get_json(silent=True) or {}))
            except ValidationError as ve:
                return validation_error_response(_json_safe_errors(ve))
            request.validated_data = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator
