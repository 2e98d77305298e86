import os


class BaseConfig:
    JSON_SORT_KEYS = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    RATELIMIT_STORAGE_URL = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    WAITLIST_SIGNUP_LIMIT = os.getenv("WAITLIST_SIGNUP_LIMIT", "10 per hour")
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-insecure-jwt-key")
    ACCESS_TOKEN_LIFETIME_MIN = int(os.getenv("ACCESS_TOKEN_LIFETIME_MIN", 60))

    # Landing content falls back to built-in mock data when disabled or failing
    LANDING_BACKEND_ENABLED = os.getenv("LANDING_BACKEND_ENABLED", "true").lower() in ("1", "true", "yes")
    LANDING_QUERY_TIMEOUT_MS = int(os.getenv("LANDING_QUERY_TIMEOUT_MS", 8000))
    WAITLIST_EXPORT_MAX = int(os.getenv("WAITLIST_EXPORT_MAX", 1000))

    BYBIT_BASE_URL = os.getenv("BYBIT_BASE_URL", "https://api.bybit.com/v5")
    BYBIT_PUBLIC_API = os.getenv("BYBIT_PUBLIC_API", "")
    BYBIT_SECRET_API = os.getenv("BYBIT_SECRET_API", "")
    COINGECKO_BASE_URL = os.getenv("COINGECKO_BASE_URL", "https://api.coingecko.com/api/v3")
    CRYPTOAPIS_API_KEY = os.getenv("CRYPTOAPIS_API_KEY", "")
    CRYPTO_HTTP_TIMEOUT = float(os.getenv("CRYPTO_HTTP_TIMEOUT", 10))
    TICKER_CACHE_TTL_SECONDS = int(os.getenv("TICKER_CACHE_TTL_SECONDS", 300))
    TICKER_SYNC_INTERVAL_SECONDS = int(os.getenv("TICKER_SYNC_INTERVAL_SECONDS", 180))
    TICKER_CLEANUP_INTERVAL_SECONDS = int(os.getenv("TICKER_CLEANUP_INTERVAL_SECONDS", 3600))

    PORT = int(os.getenv("PORT", 5000))
    TRACING_ENABLED = os.getenv("TRACING_ENABLED", "true").lower() in ("1", "true", "yes")
    OTEL_CONSOLE_EXPORT = os.getenv("OTEL_CONSOLE_EXPORT", "false").lower() in ("1", "true", "yes")
    OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "eloity-api")
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///dev.db")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-key"
    JWT_SECRET = "test-jwt-secret"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    BYBIT_PUBLIC_API = ""
    BYBIT_SECRET_API = ""
    CRYPTOAPIS_API_KEY = ""
    LANDING_BACKEND_ENABLED = True


class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL")

    @staticmethod
    def validate():
        missing = []
        for key in ("SECRET_KEY", "DATABASE_URL", "JWT_SECRET"):
            if not os.getenv(key):
                missing.append(key)
        if missing:
            raise RuntimeError(
                f"Missing required env vars in production: {', '.join(missing)}"
            )


def get_config_class():
    env = os.getenv("APP_ENV", "development").lower()
    if env == "production":
        ProductionConfig.validate()
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
