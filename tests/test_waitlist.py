import csv
import io

import pytest

from app.services.waitlist import calculate_lead_score, CSV_HEADER

SIGNUP = "/api/landing/waitlist"
ADMIN = "/api/admin/landing/waitlist"


@pytest.mark.parametrize("kwargs,score", [
    ({}, 10),
    ({"user_type_interested": "not_sure"}, 10),
    ({"user_type_interested": "freelancer"}, 30),
    ({"country": "NG"}, 20),
    ({"message": "short"}, 10),
    ({"user_type_interested": "creator", "country": "KE", "message": "I would love to try this out soon"}, 55),
])
def test_lead_score(kwargs, score):
    assert calculate_lead_score(**kwargs) == score


def test_signup_creates_lead(client):
    r = client.post(SIGNUP, json={"email": "Ada@Example.com", "name": "Ada", "country": "NG", "user_type_interested": "freelancer"})
    assert r.status_code == 201
    lead = r.get_json()["lead"]
    assert lead["email"] == "ada@example.com"
    assert lead["lead_score"] == 40
    assert lead["source"] == "homepage"
    assert lead["conversion_status"] == "waitlist"


def test_signup_defaults_interest(client):
    lead = client.post(SIGNUP, json={"email": "b@example.com", "name": "B"}).get_json()["lead"]
    assert lead["user_type_interested"] == "not_sure"


def test_duplicate_email_conflicts_case_insensitively(client):
    client.post(SIGNUP, json={"email": "dup@example.com", "name": "One"})
    r = client.post(SIGNUP, json={"email": "DUP@example.com", "name": "Two"})
    assert r.status_code == 409
    assert r.get_json()["message"] == "Email already on waitlist"


@pytest.mark.parametrize("payload", [{"name": "x"}, {"email": "not-an-email", "name": "x"}, {"email": "a@b.co", "name": " "}])
def test_signup_validation(client, payload):
    r = client.post(SIGNUP, json=payload)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Validation failed"


def test_status(client):
    assert client.get(f"{SIGNUP}/status").status_code == 400
    assert client.get(f"{SIGNUP}/status?email=who@example.com").get_json() == {"onWaitlist": False}
    client.post(SIGNUP, json={"email": "who@example.com", "name": "Who"})
    assert client.get(f"{SIGNUP}/status?email=WHO@example.com").get_json() == {"onWaitlist": True}


@pytest.fixture
def leads(client):
    client.post(SIGNUP, json={"email": "low@example.com", "name": "Low"})
    client.post(SIGNUP, json={"email": "mid@example.com", "name": "Mid", "country": "GH"})
    client.post(SIGNUP, json={"email": "high@example.com", "name": "High", "country": "GH", "user_type_interested": "merchant"})


def test_admin_lists_with_filters(client, login, leads):
    admin = login("admin-1", role="admin")
    body = client.get(ADMIN, headers=admin).get_json()
    assert body["meta"]["total"] == 3
    assert len(body["leads"]) == 3
    body = client.get(f"{ADMIN}?minScore=20", headers=admin).get_json()
    assert {l["email"] for l in body["leads"]} == {"mid@example.com", "high@example.com"}
    body = client.get(f"{ADMIN}?page=2&page_size=2", headers=admin).get_json()
    assert len(body["leads"]) == 1
    assert body["meta"]["has_previous_page"] is True


def test_admin_updates_and_deletes_lead(client, login, leads):
    admin = login("admin-1", role="admin")
    lead_id = client.get(ADMIN, headers=admin).get_json()["leads"][0]["id"]
    r = client.patch(f"{ADMIN}/{lead_id}", json={"conversion_status": "contacted"}, headers=admin)
    assert r.get_json()["conversion_status"] == "contacted"
    assert client.get(f"{ADMIN}?status=contacted", headers=admin).get_json()["meta"]["total"] == 1
    r = client.patch(f"{ADMIN}/{lead_id}", json={"conversion_status": "bogus"}, headers=admin)
    assert r.status_code == 400
    assert client.delete(f"{ADMIN}/{lead_id}", headers=admin).get_json() == {"success": True}
    assert client.get(f"{ADMIN}/{lead_id}", headers=admin).status_code == 404


def test_export_csv(client, login, leads):
    admin = login("admin-1", role="admin")
    r = client.post(f"{ADMIN}/export", json={"format": "CSV"}, headers=admin)
    assert r.status_code == 200
    assert r.mimetype == "text/csv"
    assert "attachment" in r.headers["Content-Disposition"]
    rows = list(csv.reader(io.StringIO(r.get_data(as_text=True))))
    assert rows[0] == CSV_HEADER
    assert len(rows) == 4


def test_export_json_respects_limit(client, login, leads):
    admin = login("admin-1", role="admin")
    body = client.post(f"{ADMIN}/export", json={"limit": 2}, headers=admin).get_json()
    assert len(body) == 2


@pytest.mark.parametrize("payload", [{"conversion_status": "bogus"}, {"lead_score": -1}, {"lead_score": "90"}, {"is_verified": "yes"}])
def test_admin_lead_update_is_validated(client, login, leads, payload):
    admin = login("admin-1", role="admin")
    lead = client.get(ADMIN, headers=admin).get_json()["leads"][0]
    r = client.patch(f"{ADMIN}/{lead['id']}", json=payload, headers=admin)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Validation failed"
    assert client.get(f"{ADMIN}/{lead['id']}", headers=admin).get_json()["lead_score"] == lead["lead_score"]
