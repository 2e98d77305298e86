import datetime as dt
from typing import Dict, Optional
import jwt
from flask import current_app


def _secret() -> str:
    return current_app.config["JWT_SECRET"]


def _utcnow():
    return dt.datetime.now(dt.timezone.utc)


def create_access_token(user_id: str, role: Optional[str] = None) -> str:
    cfg = current_app.config
    payload: Dict = {
        "sub": user_id,
        "type": "access",
        "exp": _utcnow() + dt.timedelta(minutes=cfg["ACCESS_TOKEN_LIFETIME_MIN"]),
    }
    if role:
        payload["app_role"] = role
    return jwt.encode(payload, _secret(), algorithm="HS256")


class TokenError(Exception):
    pass


def decode_token(token: str) -> Dict:
    """Verify a bearer token and return its claims.

    Accepts hosted-auth tokens (user id in ``sub``, audience ``authenticated``)
    as well as legacy tokens carrying ``userId``. The resolved id is exposed
    as ``user_id`` on the returned claims.
    """
    try:
        data = jwt.decode(
            token,
            _secret(),
            algorithms=["HS256"],
            options={"verify_aud": False},
        )
    except jwt.ExpiredSignatureError:
        raise TokenError("token expired")
    except jwt.InvalidTokenError:
        raise TokenError("invalid token")

    if data.get("type") not in (None, "access"):
        raise TokenError("expected access token")
    user_id = data.get("sub") or data.get("userId")
    if not user_id:
        raise TokenError("invalid token structure")
    data["user_id"] = str(user_id)
    return data
