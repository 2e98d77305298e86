import logging
from flask import Blueprint, request, jsonify, current_app
from flask_limiter.util import get_remote_address
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from extensions import limiter
from models import db
from app.version import API_PREFIX
from app.metrics import LANDING_FALLBACK
from app.schemas.landing import WaitlistSignupRequest
from app.services import landing_content, landing_fallback, waitlist
from app.services.waitlist import DuplicateWaitlistEmail
from app.utils import (
    apply_statement_timeout,
    error,
    internal_error_response,
    transactional,
    validate_schema,
)

landing_bp = Blueprint("landing", __name__, url_prefix=f"{API_PREFIX}/landing")
logger = logging.getLogger(__name__)


def _serve(section, load, fallback):
    """Answer from the database, or from built-in content when it is unavailable."""
    if not current_app.config.get("LANDING_BACKEND_ENABLED", True):
        LANDING_FALLBACK.labels(section).inc()
        return jsonify(fallback())
    try:
        apply_statement_timeout(current_app.config.get("LANDING_QUERY_TIMEOUT_MS"))
        data = load()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Landing %s query failed, serving built-in content: %s", section, e)
        LANDING_FALLBACK.labels(section).inc()
        return jsonify(fallback())
    except Exception:
        # The public landing page must always render
        db.session.rollback()
        logger.exception("Landing %s failed unexpectedly, serving built-in content", section)
        LANDING_FALLBACK.labels(section).inc()
        return jsonify(fallback())
    return jsonify(data)


def _arg(name):
    value = (request.args.get(name) or "").strip()
    return value or None


def _featured():
    return request.args.get("featured") == "true"


@landing_bp.route("/testimonials", methods=["GET"])
def get_testimonials():
    """
    Landing testimonials
    ---
    tags: [Landing]
    parameters:
      - {name: category, in: query, type: string}
      - {name: featured, in: query, type: string, enum: ["true", "false"]}
    responses:
      200: {description: Testimonials ordered by position}
    """
    category = _arg("category")
    featured = _featured()
    return _serve(
        "testimonials",
        lambda: [t.to_dict() for t in landing_content.list_testimonials(category, featured)],
        lambda: landing_fallback.mock_testimonials(category, featured),
    )


@landing_bp.route("/faqs", methods=["GET"])
def get_faqs():
    category = _arg("category")
    return _serve(
        "faqs",
        lambda: [f.to_dict() for f in landing_content.list_faqs(category)],
        lambda: landing_fallback.mock_faqs(category),
    )


@landing_bp.route("/use-cases", methods=["GET"])
def get_use_cases():
    user_type = _arg("user_type")
    featured = _featured()
    return _serve(
        "use_cases",
        lambda: [u.to_dict() for u in landing_content.list_use_cases(user_type, featured)],
        lambda: landing_fallback.mock_use_cases(user_type, featured),
    )


@landing_bp.route("/social-proof-stats", methods=["GET"])
def get_social_proof_stats():
    return _serve(
        "stats",
        lambda: [s.to_dict() for s in landing_content.list_stats()],
        landing_fallback.mock_stats,
    )


@landing_bp.route("/comparison-matrix", methods=["GET"])
def get_comparison_matrix():
    category = _arg("category")
    return _serve(
        "comparison",
        lambda: [c.to_dict() for c in landing_content.list_comparisons(category)],
        lambda: landing_fallback.mock_comparisons(category),
    )


@landing_bp.route("/stats/overview", methods=["GET"])
def get_stats_overview():
    return _serve("overview", landing_content.overview, landing_fallback.mock_overview)


@landing_bp.route("/waitlist", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["WAITLIST_SIGNUP_LIMIT"],
    key_func=get_remote_address,
    error_message="Too many waitlist signups, please try again later",
)
@validate_schema(WaitlistSignupRequest)
def join_waitlist():
    """
    Join the waitlist
    ---
    tags: [Landing]
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [email, name]
          properties:
            email: {type: string}
            name: {type: string}
            user_type_interested: {type: string}
            country: {type: string}
            phone: {type: string}
            message: {type: string}
            source: {type: string}
    responses:
      201: {description: Lead created}
      400: {description: Validation failed}
      409: {description: Email already on waitlist}
      429: {description: Too many signups from this IP}
    """
    data = request.validated_data.model_dump()
    try:
        with transactional("Waitlist signup failed"):
            lead = waitlist.add_to_waitlist(data)
    except (DuplicateWaitlistEmail, IntegrityError):
        return error("Email already on waitlist", status=409)
    except Exception:
        return internal_error_response()
    return jsonify({"message": "Successfully added to waitlist", "lead": lead.to_dict()}), 201


@landing_bp.route("/waitlist/status", methods=["GET"])
def waitlist_status():
    email = request.args.get("email", "").strip()
    if not email:
        return error("Email is required", status=400)
    return jsonify({"onWaitlist": waitlist.email_exists(email)})
