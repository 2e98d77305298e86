from decimal import Decimal

import pytest

BASE = "/api/admin/landing"


@pytest.fixture
def admin(login):
    return login("admin-1", role="admin")


def test_testimonial_crud(client, admin):
    r = client.post(f"{BASE}/testimonials", json={"name": "Nia", "title": "Designer", "quote": "Great"}, headers=admin)
    assert r.status_code == 201
    created = r.get_json()
    assert created["category"] == "general"
    assert created["rating"] == 5

    r = client.patch(f"{BASE}/testimonials/{created['id']}", json={"quote": "Even better", "id": "hijack"}, headers=admin)
    assert r.status_code == 200
    assert r.get_json()["quote"] == "Even better"
    assert r.get_json()["id"] == created["id"]

    listed = client.get(f"{BASE}/testimonials", headers=admin).get_json()
    assert [t["id"] for t in listed] == [created["id"]]

    r = client.delete(f"{BASE}/testimonials/{created['id']}", headers=admin)
    assert r.get_json() == {"success": True}
    assert client.get(f"{BASE}/testimonials", headers=admin).get_json() == []


def test_create_validation(client, admin):
    r = client.post(f"{BASE}/testimonials", json={"name": "No quote"}, headers=admin)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Validation failed"
    r = client.post(f"{BASE}/testimonials", json={"name": "n", "title": "t", "quote": "q", "rating": 9}, headers=admin)
    assert r.status_code == 400


def test_missing_items_return_404(client, admin):
    assert client.patch(f"{BASE}/faqs/nope", json={"answer": "x"}, headers=admin).status_code == 404
    assert client.delete(f"{BASE}/use-cases/nope", headers=admin).status_code == 404
    assert client.delete(f"{BASE}/comparison/nope", headers=admin).status_code == 404


def test_reorder_testimonials(client, admin):
    ids = []
    for i in range(3):
        r = client.post(f"{BASE}/testimonials", json={"name": f"T{i}", "title": "t", "quote": "q", "order": i}, headers=admin)
        ids.append(r.get_json()["id"])
    orders = [{"id": ids[0], "order": 3}, {"id": ids[1], "order": 2}, {"id": ids[2], "order": 1}]
    r = client.post(f"{BASE}/testimonials/reorder", json={"orders": orders}, headers=admin)
    assert r.status_code == 200
    public = client.get("/api/landing/testimonials").get_json()
    assert [t["id"] for t in public] == list(reversed(ids))


def test_reorder_rejects_bad_payload(client, admin):
    r = client.post(f"{BASE}/testimonials/reorder", json={"orders": "nope"}, headers=admin)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Orders must be an array"
    r = client.post(f"{BASE}/testimonials/reorder", json={"orders": [{"id": "x"}]}, headers=admin)
    assert r.status_code == 400
    r = client.post(f"{BASE}/testimonials/reorder", json={"orders": [{"id": "missing", "order": 1}]}, headers=admin)
    assert r.status_code == 404


def test_faq_listing_can_include_inactive(client, admin):
    client.post(f"{BASE}/faqs", json={"question": "Live?", "answer": "yes"}, headers=admin)
    client.post(f"{BASE}/faqs", json={"question": "Draft?", "answer": "no", "is_active": False}, headers=admin)
    assert len(client.get(f"{BASE}/faqs", headers=admin).get_json()) == 2
    inactive = client.get(f"{BASE}/faqs?active=false", headers=admin).get_json()
    assert [f["question"] for f in inactive] == ["Draft?"]
    assert [f["question"] for f in client.get("/api/landing/faqs").get_json()] == ["Live?"]


def test_stat_update(client, admin):
    r = client.post(f"{BASE}/stats", json={"metric_name": "active_users", "current_value": 10, "unit": "users", "label": "Users"}, headers=admin)
    assert r.status_code == 201

    r = client.patch(f"{BASE}/stats/active_users", json={"current_value": "12345"}, headers=admin)
    assert r.status_code == 200
    assert Decimal(r.get_json()["current_value"]) == 12345


@pytest.mark.parametrize("payload", [{}, {"current_value": ""}, {"current_value": "abc"}, {"current_value": "NaN"}])
def test_stat_update_rejects_bad_values(client, admin, payload):
    r = client.patch(f"{BASE}/stats/active_users", json=payload, headers=admin)
    assert r.status_code == 400


def test_stat_update_unknown_metric(client, admin):
    r = client.patch(f"{BASE}/stats/Unknown", json={"current_value": 5}, headers=admin)
    assert r.status_code == 404


def test_use_case_and_comparison_create(client, admin):
    r = client.post(f"{BASE}/use-cases", json={"user_type": "seller", "title": "Sell", "description": "d", "results": {"sales": "1K"}}, headers=admin)
    assert r.status_code == 201
    assert r.get_json()["results"] == {"sales": "1K"}
    r = client.post(f"{BASE}/comparison", json={"feature_name": "Escrow", "category": "payments", "competitors": {"A": True}}, headers=admin)
    assert r.status_code == 201
    cid = r.get_json()["id"]
    r = client.patch(f"{BASE}/comparison/{cid}", json={"is_active": False}, headers=admin)
    assert r.get_json()["is_active"] is False
    assert client.get("/api/landing/comparison-matrix").get_json() == []


@pytest.mark.parametrize("payload", [{"order": "first"}, {"is_active": "yes"}, {"question": None}, {"answer": ""}])
def test_patch_rejects_bad_types(client, admin, payload):
    r = client.post(f"{BASE}/faqs", json={"question": "Fees?", "answer": "None"}, headers=admin)
    faq_id = r.get_json()["id"]
    r = client.patch(f"{BASE}/faqs/{faq_id}", json=payload, headers=admin)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Validation failed"
    listed = client.get(f"{BASE}/faqs", headers=admin).get_json()
    assert (listed[0]["question"], listed[0]["answer"], listed[0]["is_active"]) == ("Fees?", "None", True)


def test_patch_rejects_out_of_range_rating(client, admin):
    r = client.post(f"{BASE}/testimonials", json={"name": "n", "title": "t", "quote": "q"}, headers=admin)
    r = client.patch(f"{BASE}/testimonials/{r.get_json()['id']}", json={"rating": 0}, headers=admin)
    assert r.status_code == 400


def test_duplicate_stat_conflicts(client, admin):
    payload = {"metric_name": "active_users", "current_value": 10, "unit": "users", "label": "Users"}
    assert client.post(f"{BASE}/stats", json=payload, headers=admin).status_code == 201
    r = client.post(f"{BASE}/stats", json=payload, headers=admin)
    assert r.status_code == 409
    assert r.get_json()["message"] == "Stat already exists"
    assert len(client.get("/api/landing/social-proof-stats").get_json()) == 1


def test_unexpected_create_failure_is_500(client, admin, monkeypatch):
    from app.services import landing_content

    def broken(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(landing_content, "create_item", broken)
    r = client.post(f"{BASE}/faqs", json={"question": "q", "answer": "a"}, headers=admin)
    assert r.status_code == 500
    assert r.get_json() == {
        "status": "error",
        "message": "An unexpected error occurred. Please try again later.",
        "code": 500,
    }
