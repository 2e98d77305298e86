import uuid
from datetime import datetime
from sqlalchemy import Column, String, Numeric, DateTime, Float
from models import db, BIGINT


class MarketTicker(db.Model):
    """Exchange ticker snapshot cached by the background sync task."""

    __tablename__ = "crypto_market_tickers"
    __table_args__ = (
        db.Index("ix_market_ticker_expires", "expires_at"),
    )
    id = Column(BIGINT, primary_key=True)
    symbol = Column(String(20), nullable=False, unique=True, index=True)  # exchange pair, e.g. BTCUSDT
    last_price = Column(Float, nullable=False)
    volume_24h = Column(Float, nullable=True)
    price_24h_change = Column(Float, nullable=True)  # percent
    high_24h = Column(Float, nullable=True)
    low_24h = Column(Float, nullable=True)
    source = Column(String(20), default="bybit")
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def is_fresh(self, now=None):
        return self.expires_at > (now or datetime.utcnow())


class P2POrder(db.Model):
    __tablename__ = "p2p_orders"
    __table_args__ = (
        db.Index("ix_p2p_pair_type_status", "cryptocurrency", "fiat_currency", "type", "status"),
    )
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    type = Column(String(4), nullable=False)  # buy, sell
    cryptocurrency = Column(String(10), nullable=False)
    fiat_currency = Column(String(10), nullable=False)
    price = Column(Numeric(18, 2), nullable=False)
    amount = Column(Numeric(28, 8), nullable=False)
    status = Column(String(20), default="active")  # active, matched, completed, cancelled
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "type": self.type,
            "cryptocurrency": self.cryptocurrency,
            "fiatCurrency": self.fiat_currency,
            "price": float(self.price),
            "amount": float(self.amount),
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
