from .landing import landing_bp
from .admin import admin_landing_bp
from .delivery import delivery_bp
from .crypto import crypto_bp


__all__ = [
    'landing_bp',
    'admin_landing_bp',
    'delivery_bp',
    'crypto_bp',
]
