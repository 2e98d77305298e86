import datetime as dt
import jwt
from app.utils import decode_token, create_access_token, TokenError

import pytest


def _encode(app, claims):
    return jwt.encode(claims, app.config["JWT_SECRET"], algorithm="HS256")


def _future():
    return dt.datetime.now(dt.timezone.utc) + dt.timedelta(minutes=5)


def test_access_token_allows_request(client, login):
    hdr = login("auth-1")
    r = client.post("/api/delivery/register", headers=hdr)
    assert r.status_code == 201


def test_missing_token_rejected(client):
    r = client.get("/api/delivery/providers/profile")
    assert r.status_code == 401
    assert r.get_json()["message"] == "Access token required"


def test_expired_access_token_blocked(app, client):
    past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(seconds=1)
    expired = _encode(app, {"sub": "x", "type": "access", "exp": past})
    r = client.get("/api/delivery/providers/profile", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.get_json()["message"] == "token expired"


def test_wrong_signature_rejected(client):
    forged = jwt.encode({"sub": "x", "exp": _future()}, "not-the-secret", algorithm="HS256")
    r = client.get("/api/delivery/providers/profile", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401


def test_hosted_token_with_audience_accepted(app):
    token = _encode(app, {"sub": "sb-user", "aud": "authenticated", "role": "authenticated", "exp": _future()})
    assert decode_token(token)["user_id"] == "sb-user"


def test_legacy_user_id_claim_accepted(app):
    token = _encode(app, {"userId": 42, "exp": _future()})
    assert decode_token(token)["user_id"] == "42"


def test_token_without_subject_rejected(app):
    token = _encode(app, {"exp": _future()})
    with pytest.raises(TokenError):
        decode_token(token)


def test_refresh_type_rejected(app):
    token = _encode(app, {"sub": "x", "type": "refresh", "exp": _future()})
    with pytest.raises(TokenError):
        decode_token(token)


def test_created_token_carries_role(app):
    claims = decode_token(create_access_token("u-9", "admin"))
    assert claims["app_role"] == "admin"
    assert claims["sub"] == "u-9"
