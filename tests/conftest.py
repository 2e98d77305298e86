import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')
from models import db
import extensions


@pytest.fixture(scope='session')
def app_instance():
    os.environ.setdefault('APP_ENV', 'testing')
    os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')
    from app import create_app
    from app.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI='sqlite:///:memory:',
        SQLALCHEMY_TRACK_MODIFICATIONS=False
    )
    return app


@pytest.fixture(scope='function')
def app(app_instance):
    extensions.limiter.reset()
    app_instance.config.update(LANDING_BACKEND_ENABLED=True, BYBIT_PUBLIC_API="", CRYPTOAPIS_API_KEY="")
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Return a callable issuing bearer headers for a stub profile."""
    def _login(user_id="user-1", role="user", **profile):
        payload = {"user_id": user_id, "role": role, **profile}
        r = client.post("/__auth/login_stub", json=payload)
        assert r.status_code == 200
        return {"Authorization": f"Bearer {r.get_json()['data']['access']}"}
    return _login

