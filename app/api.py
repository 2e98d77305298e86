from app.routes import (
    landing_bp,
    admin_landing_bp,
    delivery_bp,
    crypto_bp,
)


def register_api(app):
    """Register blueprint routes under the API prefix."""
    app.register_blueprint(landing_bp)
    app.register_blueprint(admin_landing_bp)
    app.register_blueprint(delivery_bp)
    app.register_blueprint(crypto_bp)
