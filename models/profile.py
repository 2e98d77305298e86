from models import db
from datetime import datetime


class Profile(db.Model):
    __tablename__ = "profiles"

    user_id = db.Column(db.String(36), primary_key=True)
    username = db.Column(db.String(50), nullable=True, unique=True)
    full_name = db.Column(db.String(100), nullable=True)
    avatar_url = db.Column(db.Text, nullable=True)
    location = db.Column(db.String(100), nullable=True)
    role = db.Column(db.String(20), default="user")  # user, content_editor, admin
    is_verified = db.Column(db.Boolean, default=False)
    is_delivery_provider = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Profile user_id={self.user_id} role={self.role}>"
