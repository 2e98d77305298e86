from decimal import Decimal, InvalidOperation
from flask import request, jsonify
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from app.schemas.landing import (
    TestimonialCreateRequest,
    FAQCreateRequest,
    UseCaseCreateRequest,
    SocialProofStatCreateRequest,
    ComparisonCreateRequest,
    ReorderRequest,
    TestimonialUpdateRequest,
    FAQUpdateRequest,
    UseCaseUpdateRequest,
    ComparisonUpdateRequest,
)
from app.services import landing_content
from app.services.landing_content import LandingItemNotFound
from app.utils import error, internal_error_response, transactional, validate_schema
from models.landing import Testimonial, FAQ, UseCase, SocialProofStat, ComparisonFeature
from . import admin_landing_bp


def _flag(name):
    value = request.args.get(name)
    if value is None:
        return None
    return value == "true"


def _create(model, message, conflict="Item already exists"):
    try:
        with transactional(message):
            item = landing_content.create_item(model, request.validated_data.model_dump())
    except IntegrityError:
        return error(conflict, status=409)
    except Exception:
        return internal_error_response()
    return jsonify(item.to_dict()), 201


def _update(model, item_id, message):
    data = request.validated_data.model_dump(exclude_unset=True)
    try:
        with transactional(message):
            item = landing_content.update_item(model, item_id, data)
    except LandingItemNotFound as e:
        return error(str(e), status=404)
    except Exception:
        return internal_error_response()
    return jsonify(item.to_dict()), 200


def _delete(model, item_id, message):
    try:
        with transactional(message):
            landing_content.delete_item(model, item_id)
    except LandingItemNotFound as e:
        return error(str(e), status=404)
    except Exception:
        return internal_error_response()
    return jsonify({"success": True}), 200


# ------------------------------ Testimonials ------------------------------
@admin_landing_bp.route("/testimonials", methods=["GET"])
def list_testimonials():
    items = landing_content.list_testimonials(
        request.args.get("category"), featured_only=_flag("featured") is True
    )
    return jsonify([t.to_dict() for t in items]), 200


@admin_landing_bp.route("/testimonials", methods=["POST"])
@validate_schema(TestimonialCreateRequest)
def create_testimonial():
    return _create(Testimonial, "Failed to create testimonial")


@admin_landing_bp.route("/testimonials/<item_id>", methods=["PATCH"])
@validate_schema(TestimonialUpdateRequest)
def update_testimonial(item_id):
    return _update(Testimonial, item_id, "Failed to update testimonial")


@admin_landing_bp.route("/testimonials/<item_id>", methods=["DELETE"])
def delete_testimonial(item_id):
    return _delete(Testimonial, item_id, "Failed to delete testimonial")


@admin_landing_bp.route("/testimonials/reorder", methods=["POST"])
def reorder_testimonials():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload.get("orders"), list):
        return error("Orders must be an array", status=400)
    try:
        entries = ReorderRequest(**payload).orders
    except ValidationError:
        return error("Each order entry needs an id and an integer order", status=400)
    try:
        with transactional("Failed to reorder testimonials"):
            landing_content.reorder_testimonials([e.model_dump() for e in entries])
    except LandingItemNotFound as e:
        return error(str(e), status=404)
    except Exception:
        return internal_error_response()
    return jsonify({"success": True}), 200


# ---------------------------------- FAQs ----------------------------------
@admin_landing_bp.route("/faqs", methods=["GET"])
def list_faqs():
    items = landing_content.list_faqs(request.args.get("category"), active=_flag("active"))
    return jsonify([f.to_dict() for f in items]), 200


@admin_landing_bp.route("/faqs", methods=["POST"])
@validate_schema(FAQCreateRequest)
def create_faq():
    return _create(FAQ, "Failed to create FAQ")


@admin_landing_bp.route("/faqs/<item_id>", methods=["PATCH"])
@validate_schema(FAQUpdateRequest)
def update_faq(item_id):
    return _update(FAQ, item_id, "Failed to update FAQ")


@admin_landing_bp.route("/faqs/<item_id>", methods=["DELETE"])
def delete_faq(item_id):
    return _delete(FAQ, item_id, "Failed to delete FAQ")


# -------------------------------- Use cases -------------------------------
@admin_landing_bp.route("/use-cases", methods=["GET"])
def list_use_cases():
    items = landing_content.list_use_cases(
        request.args.get("user_type"), featured_only=_flag("featured") is True
    )
    return jsonify([u.to_dict() for u in items]), 200


@admin_landing_bp.route("/use-cases", methods=["POST"])
@validate_schema(UseCaseCreateRequest)
def create_use_case():
    return _create(UseCase, "Failed to create use case")


@admin_landing_bp.route("/use-cases/<item_id>", methods=["PATCH"])
@validate_schema(UseCaseUpdateRequest)
def update_use_case(item_id):
    return _update(UseCase, item_id, "Failed to update use case")


@admin_landing_bp.route("/use-cases/<item_id>", methods=["DELETE"])
def delete_use_case(item_id):
    return _delete(UseCase, item_id, "Failed to delete use case")


# ---------------------------------- Stats ---------------------------------
@admin_landing_bp.route("/stats", methods=["GET"])
def list_stats():
    return jsonify([s.to_dict() for s in landing_content.list_stats()]), 200


@admin_landing_bp.route("/stats", methods=["POST"])
@validate_schema(SocialProofStatCreateRequest)
def create_stat():
    return _create(SocialProofStat, "Failed to create stat", conflict="Stat already exists")


@admin_landing_bp.route("/stats/<metric_name>", methods=["PATCH"])
def update_stat(metric_name):
    data = request.get_json(silent=True) or {}
    if data.get("current_value") in (None, ""):
        return error("Current value is required", status=400)
    try:
        value = Decimal(str(data["current_value"]))
    except InvalidOperation:
        return error("Current value must be numeric", status=400)
    if not value.is_finite():
        return error("Current value must be numeric", status=400)
    try:
        with transactional("Failed to update stat"):
            stat = landing_content.update_stat(metric_name, value)
    except LandingItemNotFound as e:
        return error(str(e), status=404)
    except Exception:
        return internal_error_response()
    return jsonify(stat.to_dict()), 200


# ------------------------------- Comparison -------------------------------
@admin_landing_bp.route("/comparison", methods=["GET"])
def list_comparisons():
    items = landing_content.list_comparisons(request.args.get("category"), active=_flag("active"))
    return jsonify([c.to_dict() for c in items]), 200


@admin_landing_bp.route("/comparison", methods=["POST"])
@validate_schema(ComparisonCreateRequest)
def create_comparison():
    return _create(ComparisonFeature, "Failed to create comparison")


@admin_landing_bp.route("/comparison/<item_id>", methods=["PATCH"])
@validate_schema(ComparisonUpdateRequest)
def update_comparison(item_id):
    return _update(ComparisonFeature, item_id, "Failed to update comparison")


@admin_landing_bp.route("/comparison/<item_id>", methods=["DELETE"])
def delete_comparison(item_id):
    return _delete(ComparisonFeature, item_id, "Failed to delete comparison")
