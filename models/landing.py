import uuid
from datetime import datetime
from models import db


def _uuid():
    return str(uuid.uuid4())


def _iso(value):
    return value.isoformat() if value else None


class Testimonial(db.Model):
    __tablename__ = "landing_testimonials"
    __table_args__ = (
        db.Index("landing_testimonials_category_idx", "category"),
        db.Index("landing_testimonials_featured_idx", "is_featured"),
        db.Index("landing_testimonials_order_idx", "order"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    user_id = db.Column(db.String(36), nullable=True)
    name = db.Column(db.Text, nullable=False)
    title = db.Column(db.Text, nullable=False)
    quote = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.Text, nullable=True)
    metrics = db.Column(db.JSON, nullable=True)
    category = db.Column(db.Text, nullable=False, default="general")
    rating = db.Column(db.Integer, default=5)
    is_verified = db.Column(db.Boolean, default=False)
    is_featured = db.Column(db.Boolean, default=True)
    order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "title": self.title,
            "quote": self.quote,
            "image_url": self.image_url,
            "metrics": self.metrics or {},
            "category": self.category,
            "rating": self.rating,
            "is_verified": self.is_verified,
            "is_featured": self.is_featured,
            "order": self.order,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


class FAQ(db.Model):
    __tablename__ = "landing_faqs"
    __table_args__ = (
        db.Index("landing_faqs_category_idx", "category"),
        db.Index("landing_faqs_active_idx", "is_active"),
        db.Index("landing_faqs_order_idx", "order"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False, default="general")
    order = db.Column(db.Integer, default=0)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "category": self.category,
            "order": self.order,
            "is_active": self.is_active,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


class UseCase(db.Model):
    __tablename__ = "landing_use_cases"
    __table_args__ = (
        db.Index("landing_use_cases_user_type_idx", "user_type"),
        db.Index("landing_use_cases_featured_idx", "is_featured"),
        db.Index("landing_use_cases_order_idx", "order"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    user_type = db.Column(db.Text, nullable=False)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    avatar_url = db.Column(db.Text, nullable=True)
    results = db.Column(db.JSON, nullable=True)
    timeline_weeks = db.Column(db.Integer, nullable=True)
    image_url = db.Column(db.Text, nullable=True)
    is_featured = db.Column(db.Boolean, default=True)
    order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "user_type": self.user_type,
            "title": self.title,
            "description": self.description,
            "avatar_url": self.avatar_url,
            "results": self.results or {},
            "timeline_weeks": self.timeline_weeks,
            "image_url": self.image_url,
            "is_featured": self.is_featured,
            "order": self.order,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


class SocialProofStat(db.Model):
    __tablename__ = "landing_social_proof_stats"
    __table_args__ = (
        db.Index("landing_stats_metric_name_idx", "metric_name"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    metric_name = db.Column(db.Text, nullable=False, unique=True)
    current_value = db.Column(db.Numeric(20, 0), nullable=False)
    unit = db.Column(db.Text, nullable=False)
    display_format = db.Column(db.Text, default="number")
    label = db.Column(db.Text, nullable=False)
    icon = db.Column(db.Text, nullable=True)
    order = db.Column(db.Integer, default=0)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "metric_name": self.metric_name,
            "current_value": str(self.current_value) if self.current_value is not None else None,
            "unit": self.unit,
            "display_format": self.display_format,
            "label": self.label,
            "icon": self.icon,
            "order": self.order,
            "updated_at": _iso(self.updated_at),
        }


class ComparisonFeature(db.Model):
    __tablename__ = "landing_comparison_matrix"
    __table_args__ = (
        db.Index("landing_comparison_category_idx", "category"),
        db.Index("landing_comparison_active_idx", "is_active"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    feature_name = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False)
    eloity_has = db.Column(db.Boolean, default=True)
    feature_description = db.Column(db.Text, nullable=True)
    competitors = db.Column(db.JSON, nullable=True)
    order = db.Column(db.Integer, default=0)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "feature_name": self.feature_name,
            "category": self.category,
            "eloity_has": self.eloity_has,
            "feature_description": self.feature_description,
            "competitors": self.competitors or {},
            "order": self.order,
            "is_active": self.is_active,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


class WaitlistLead(db.Model):
    __tablename__ = "landing_waitlist_leads"
    __table_args__ = (
        db.Index("landing_waitlist_email_idx", "email"),
        db.Index("landing_waitlist_status_idx", "conversion_status"),
        db.Index("landing_waitlist_score_idx", "lead_score"),
        db.Index("landing_waitlist_created_idx", "created_at"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    email = db.Column(db.String(320), nullable=False, unique=True)
    name = db.Column(db.Text, nullable=False)
    user_type_interested = db.Column(db.String(50), default="not_sure")
    country = db.Column(db.String(100), nullable=True)
    phone = db.Column(db.String(30), nullable=True)
    message = db.Column(db.Text, nullable=True)
    source = db.Column(db.String(50), default="homepage")
    lead_score = db.Column(db.Integer, default=0)
    is_verified = db.Column(db.Boolean, default=False)
    conversion_status = db.Column(db.String(30), default="waitlist")  # waitlist, contacted, converted, rejected
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "user_type_interested": self.user_type_interested,
            "country": self.country,
            "phone": self.phone,
            "message": self.message,
            "source": self.source,
            "lead_score": self.lead_score,
            "is_verified": self.is_verified,
            "conversion_status": self.conversion_status,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }
