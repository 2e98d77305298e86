from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import BigInteger, Integer

# Use BigInteger in production but fall back to Integer for SQLite
BIGINT = BigInteger().with_variant(Integer, "sqlite")

db = SQLAlchemy()

# Re-export common models for convenience
from .landing import (  # noqa: F401,E402
    Testimonial,
    FAQ,
    UseCase,
    SocialProofStat,
    ComparisonFeature,
    WaitlistLead,
)
from .profile import Profile  # noqa: F401,E402
from .crypto import MarketTicker, P2POrder  # noqa: F401,E402
