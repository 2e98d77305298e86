from app.auth.permissions import role_has_scope, roles_with_scope


def test_role_scopes():
    assert role_has_scope("admin", "manage_waitlist")
    assert role_has_scope("content_editor", "manage_landing")
    assert not role_has_scope("content_editor", "manage_waitlist")
    assert not role_has_scope("user", "manage_waitlist")
    assert not role_has_scope("user", "manage_landing")
    assert not role_has_scope("unknown", "manage_landing")


def test_roles_with_scope():
    assert roles_with_scope("manage_landing") == ["admin", "content_editor"]
    assert roles_with_scope("manage_waitlist") == ["admin"]


def test_content_editor_can_manage_landing(client, login):
    hdr = login("editor-1", role="content_editor")
    r = client.get("/api/admin/landing/faqs", headers=hdr)
    assert r.status_code == 200


def test_content_editor_cannot_read_waitlist(client, login):
    hdr = login("editor-2", role="content_editor")
    r = client.get("/api/admin/landing/waitlist", headers=hdr)
    assert r.status_code == 403


def test_plain_user_forbidden_from_admin(client, login):
    hdr = login("user-2", role="user")
    r = client.get("/api/admin/landing/testimonials", headers=hdr)
    assert r.status_code == 403
    assert r.get_json()["status"] == "error"


def test_admin_requires_token(client):
    r = client.get("/api/admin/landing/testimonials")
    assert r.status_code == 401


def test_profile_role_overrides_token_role(app, client):
    from models import db
    from models.profile import Profile
    from app.utils import create_access_token
    db.session.add(Profile(user_id="demoted", role="user"))
    db.session.commit()
    token = create_access_token("demoted", "admin")
    r = client.get("/api/admin/landing/faqs", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403
