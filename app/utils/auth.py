import logging
from functools import wraps
from flask import request, g
from .responses import error
from app.auth.permissions import role_has_scope
from .jwt import decode_token, TokenError
from models import db
from models.profile import Profile

logger = logging.getLogger(__name__)


def _bearer_token():
    auth = request.headers.get("Authorization", "")
    if not auth:
        return None
    return auth.split(" ", 1)[1] if auth.startswith("Bearer ") else auth


def auth_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        token = _bearer_token()
        if not token:
            return error("Access token required", status=401)
        try:
            payload = decode_token(token)
        except TokenError as e:
            logger.warning("Rejected bearer token: %s", e)
            return error(str(e), status=401)

        g.user_id = payload["user_id"]
        g.role = payload.get("app_role")
        profile = db.session.get(Profile, g.user_id)
        g.profile = profile
        if profile and profile.role:
            g.role = profile.role
        return func(*args, **kwargs)

    return wrapper


def _to_set(obj):
    return set(obj) if isinstance(obj, (list, tuple, set)) else {obj}


def role_required(required):
    """Authorize based on user role or scoped action.

    Entries are either a plain role (``"admin"``) or ``"role:action"``,
    which also requires the role to hold that scope.
    """
    required_set = _to_set(required)

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            role = getattr(g, "role", None)
            if not role:
                return error("Role missing", status=403)
            for entry in required_set:
                if ":" in entry:
                    r, action = entry.split(":", 1)
                    if role == r and role_has_scope(role, action):
                        break
                else:
                    if role == entry:
                        break
            else:
                return error("Forbidden", status=403)
            return fn(*args, **kwargs)

        return wrapper

    return decorator
