import extensions
from app.version import API_PREFIX


def test_waitlist_signup_rate_limit(client):
    extensions.limiter.reset()
    for i in range(10):
        r = client.post(f"{API_PREFIX}/landing/waitlist", json={"email": f"rl{i}@example.com", "name": "RL"})
        assert r.status_code == 201
    r = client.post(f"{API_PREFIX}/landing/waitlist", json={"email": "rl-over@example.com", "name": "RL"})
    assert r.status_code == 429
    body = r.get_json()
    assert body["status"] == "error"
    assert body["code"] == 429
    assert "waitlist" in body["message"].lower()


def test_waitlist_status_not_limited_by_signup_limit(client):
    extensions.limiter.reset()
    for _ in range(12):
        r = client.get(f"{API_PREFIX}/landing/waitlist/status", query_string={"email": "x@example.com"})
    assert r.status_code == 200
