import csv
import io
from datetime import datetime
from sqlalchemy import func
from models import db
from models.landing import WaitlistLead
from app.services.landing_content import LandingItemNotFound
from app.utils.pagination import paginate_query

CSV_HEADER = ["ID", "Email", "Name", "User Type", "Country", "Lead Score", "Status", "Created At"]
LEAD_STATUSES = {"waitlist", "contacted", "converted", "rejected"}


class DuplicateWaitlistEmail(Exception):
    pass


def calculate_lead_score(user_type_interested=None, country=None, message=None) -> int:
    score = 10
    if user_type_interested and user_type_interested != "not_sure":
        score += 20
    if country:
        score += 10
    if message and len(message) > 20:
        score += 15
    return score


def email_exists(email: str) -> bool:
    normalized = (email or "").strip().lower()
    return db.session.query(WaitlistLead.id).filter(
        func.lower(WaitlistLead.email) == normalized
    ).first() is not None


def add_to_waitlist(data: dict) -> WaitlistLead:
    email = data["email"].strip().lower()
    if email_exists(email):
        raise DuplicateWaitlistEmail("Email already on waitlist")
    lead = WaitlistLead(
        email=email,
        name=data["name"],
        user_type_interested=data.get("user_type_interested") or "not_sure",
        country=data.get("country"),
        phone=data.get("phone"),
        message=data.get("message"),
        source=data.get("source") or "homepage",
        lead_score=calculate_lead_score(
            data.get("user_type_interested"), data.get("country"), data.get("message")
        ),
    )
    db.session.add(lead)
    db.session.flush()
    return lead


def _filtered(status=None, min_score=None):
    query = WaitlistLead.query
    if status:
        query = query.filter(WaitlistLead.conversion_status == status)
    if min_score is not None:
        query = query.filter(WaitlistLead.lead_score >= min_score)
    return query.order_by(WaitlistLead.created_at.desc())


def list_leads(status=None, min_score=None, page=1, page_size=20):
    return paginate_query(_filtered(status, min_score), page, page_size)


def get_lead(lead_id) -> WaitlistLead:
    lead = db.session.get(WaitlistLead, lead_id)
    if not lead:
        raise LandingItemNotFound("Lead not found")
    return lead


def update_lead(lead_id, data: dict) -> WaitlistLead:
    lead = get_lead(lead_id)
    if "conversion_status" in data:
        if data["conversion_status"] not in LEAD_STATUSES:
            raise ValueError("Invalid conversion_status")
        lead.conversion_status = data["conversion_status"]
    for key in ("is_verified", "lead_score", "name", "country", "phone", "message"):
        if key in data:
            setattr(lead, key, data[key])
    lead.updated_at = datetime.utcnow()
    return lead


def delete_lead(lead_id):
    db.session.delete(get_lead(lead_id))


def export_leads(status=None, limit=1000):
    return _filtered(status).limit(limit).all()


def leads_to_csv(leads) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for lead in leads:
        writer.writerow([
            lead.id,
            lead.email,
            lead.name,
            lead.user_type_interested,
            lead.country or "",
            lead.lead_score,
            lead.conversion_status,
            lead.created_at.isoformat() if lead.created_at else "",
        ])
    return buf.getvalue()
