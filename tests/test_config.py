"""Tests for configuration loading via main.py entrypoint."""
import importlib
import sys

import pytest


def load_app(monkeypatch, env):
    for key, value in env.items():
        if value is None:
            monkeypatch.delenv(key, raising=False)
        else:
            monkeypatch.setenv(key, value)
    # Reload modules with updated environment
    for module in ['main', 'app.config']:
        if module in sys.modules:
            del sys.modules[module]
    main = importlib.import_module('main')
    return main.app


def test_testing_config_uses_memory_db(monkeypatch):
    app = load_app(monkeypatch, {'APP_ENV': 'testing'})
    assert app.config['TESTING'] is True
    assert app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite://')
    assert app.config['BYBIT_PUBLIC_API'] == ''


def test_development_defaults(monkeypatch):
    app = load_app(monkeypatch, {
        'APP_ENV': 'development',
        'DATABASE_URL': None,
    })
    assert app.config['DEBUG'] is True
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///dev.db'
    assert app.config['LANDING_QUERY_TIMEOUT_MS'] == 8000
    assert app.config['WAITLIST_SIGNUP_LIMIT'] == '10 per hour'


def test_env_overrides_ticker_settings(monkeypatch):
    app = load_app(monkeypatch, {
        'APP_ENV': 'testing',
        'TICKER_CACHE_TTL_SECONDS': '60',
        'LANDING_BACKEND_ENABLED': 'false',
    })
    assert app.config['TICKER_CACHE_TTL_SECONDS'] == 60
    # Testing pins the landing backend on regardless of the environment
    assert app.config['LANDING_BACKEND_ENABLED'] is True


def test_production_requires_secrets(monkeypatch):
    for key in ('SECRET_KEY', 'DATABASE_URL', 'JWT_SECRET'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv('APP_ENV', 'production')
    sys.modules.pop('app.config', None)
    config = importlib.import_module('app.config')
    with pytest.raises(RuntimeError) as exc:
        config.get_config_class()
    assert 'SECRET_KEY' in str(exc.value)
    assert 'JWT_SECRET' in str(exc.value)


def test_production_config_selected_when_complete(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'production')
    monkeypatch.setenv('SECRET_KEY', 's')
    monkeypatch.setenv('DATABASE_URL', 'postgresql://u:p@db/eloity')
    monkeypatch.setenv('JWT_SECRET', 'j')
    sys.modules.pop('app.config', None)
    config = importlib.import_module('app.config')
    assert config.get_config_class() is config.ProductionConfig
