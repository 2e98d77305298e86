from datetime import datetime
from decimal import Decimal
from models import db
from models.landing import Testimonial, FAQ, UseCase, SocialProofStat, ComparisonFeature
from app.services import landing_fallback


class LandingItemNotFound(Exception):
    pass


# Columns an admin may change through PATCH; ids and timestamps stay server-owned
EDITABLE_FIELDS = {
    Testimonial: {
        "user_id", "name", "title", "quote", "image_url", "metrics", "category",
        "rating", "is_verified", "is_featured", "order",
    },
    FAQ: {"question", "answer", "category", "order", "is_active"},
    UseCase: {
        "user_type", "title", "description", "avatar_url", "results",
        "timeline_weeks", "image_url", "is_featured", "order",
    },
    SocialProofStat: {"current_value", "unit", "display_format", "label", "icon", "order"},
    ComparisonFeature: {
        "feature_name", "category", "eloity_has", "feature_description",
        "competitors", "order", "is_active",
    },
}


def list_testimonials(category=None, featured_only=False):
    query = Testimonial.query
    if featured_only:
        query = query.filter(Testimonial.is_featured.is_(True))
    if category:
        query = query.filter(Testimonial.category == category)
    return query.order_by(Testimonial.order.asc()).all()


def list_faqs(category=None, active=True):
    query = FAQ.query
    if active is not None:
        query = query.filter(FAQ.is_active.is_(active))
    if category:
        query = query.filter(FAQ.category == category)
    return query.order_by(FAQ.order.asc()).all()


def list_use_cases(user_type=None, featured_only=False):
    query = UseCase.query
    if featured_only:
        query = query.filter(UseCase.is_featured.is_(True))
    if user_type:
        query = query.filter(UseCase.user_type == user_type)
    return query.order_by(UseCase.order.asc()).all()


def list_stats():
    return SocialProofStat.query.order_by(SocialProofStat.order.asc()).all()


def list_comparisons(category=None, active=True):
    query = ComparisonFeature.query
    if active is not None:
        query = query.filter(ComparisonFeature.is_active.is_(active))
    if category:
        query = query.filter(ComparisonFeature.category == category)
    return query.order_by(ComparisonFeature.order.asc()).all()


def overview():
    return {
        "stats": [s.to_dict() for s in list_stats()],
        "testimonials": [t.to_dict() for t in list_testimonials(featured_only=True)[:3]],
        "useCases": [u.to_dict() for u in list_use_cases(featured_only=True)[:2]],
    }


def get_item(model, item_id):
    item = db.session.get(model, item_id)
    if not item:
        raise LandingItemNotFound(f"{model.__name__} not found")
    return item


def create_item(model, data: dict):
    item = model(**data)
    db.session.add(item)
    db.session.flush()
    return item


def update_item(model, item_id, data: dict):
    item = get_item(model, item_id)
    for key, value in (data or {}).items():
        if key in EDITABLE_FIELDS[model]:
            setattr(item, key, value)
    item.updated_at = datetime.utcnow()
    return item


def delete_item(model, item_id):
    item = get_item(model, item_id)
    db.session.delete(item)


def reorder_testimonials(orders):
    """Apply ``[{id, order}]`` positions. Unknown ids abort the whole batch."""
    updated = []
    for entry in orders:
        item = get_item(Testimonial, entry["id"])
        item.order = entry["order"]
        updated.append(item)
    return updated


def update_stat(metric_name, current_value):
    stat = SocialProofStat.query.filter_by(metric_name=metric_name).first()
    if not stat:
        raise LandingItemNotFound("Stat not found")
    stat.current_value = Decimal(str(current_value))
    stat.updated_at = datetime.utcnow()
    return stat


SEED_SOURCES = (
    (Testimonial, landing_fallback.MOCK_TESTIMONIALS),
    (FAQ, landing_fallback.MOCK_FAQS),
    (UseCase, landing_fallback.MOCK_USE_CASES),
    (SocialProofStat, landing_fallback.MOCK_STATS),
    (ComparisonFeature, landing_fallback.MOCK_COMPARISONS),
)


def seed_landing():
    """Copy the built-in content into empty landing tables.

    Tables that already hold rows are left alone. Returns inserted counts
    keyed by table name.
    """
    counts = {}
    for model, rows in SEED_SOURCES:
        if db.session.query(model.id).first() is not None:
            counts[model.__tablename__] = 0
            continue
        for row in rows:
            values = {k: v for k, v in row.items() if k != "id" and k in EDITABLE_FIELDS[model] | {"metric_name"}}
            if "current_value" in values:
                values["current_value"] = Decimal(values["current_value"])
            db.session.add(model(**values))
        counts[model.__tablename__] = len(rows)
    db.session.flush()
    return counts
