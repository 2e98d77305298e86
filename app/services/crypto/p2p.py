from sqlalchemy import func
from models import db
from models.crypto import P2POrder
from app.utils.pagination import paginate_query


class OrderNotFound(Exception):
    pass


def list_orders(filters: dict, page=1, page_size=20):
    query = P2POrder.query
    if filters.get("cryptocurrency"):
        query = query.filter(P2POrder.cryptocurrency == filters["cryptocurrency"].upper())
    if filters.get("fiat_currency"):
        query = query.filter(P2POrder.fiat_currency == filters["fiat_currency"].upper())
    if filters.get("type"):
        query = query.filter(P2POrder.type == filters["type"])
    if filters.get("status"):
        query = query.filter(P2POrder.status == filters["status"])
    return paginate_query(query.order_by(P2POrder.created_at.desc()), page, page_size)


def get_order(order_id) -> P2POrder:
    order = db.session.get(P2POrder, order_id)
    if not order:
        raise OrderNotFound("Order not found")
    return order


def user_orders(user_id, status=None):
    query = P2POrder.query.filter_by(user_id=user_id)
    if status:
        query = query.filter(P2POrder.status == status)
    return query.order_by(P2POrder.created_at.desc()).all()


def create_order(user_id, data: dict) -> P2POrder:
    order = P2POrder(user_id=user_id, status="active", **data)
    db.session.add(order)
    db.session.flush()
    return order


def estimate_matches(order_type, cryptocurrency, fiat_currency):
    """Count active opposite-side orders on the same pair and their mean price."""
    opposite = "sell" if order_type == "buy" else "buy"
    count, avg = (
        db.session.query(func.count(P2POrder.id), func.avg(P2POrder.price))
        .filter(
            P2POrder.type == opposite,
            P2POrder.cryptocurrency == cryptocurrency,
            P2POrder.fiat_currency == fiat_currency,
            P2POrder.status == "active",
        )
        .one()
    )
    return {
        "potentialMatches": count,
        "averagePrice": round(float(avg), 2) if count else None,
        "estimatedTime": None,
    }
