from flask import Blueprint, jsonify, g
from app.version import API_PREFIX
from app.services import delivery
from app.services.delivery import ProviderNotFound
from app.utils import auth_required, error, internal_error_response, transactional

delivery_bp = Blueprint("delivery", __name__, url_prefix=f"{API_PREFIX}/delivery")


@delivery_bp.route("/providers/profile", methods=["GET"])
@auth_required
def get_own_provider_profile():
    try:
        profile = delivery.get_provider(g.user_id)
    except ProviderNotFound as e:
        return error(str(e), status=404)
    return jsonify(delivery.provider_payload(profile)), 200


@delivery_bp.route("/providers/<provider_id>", methods=["GET"])
def get_provider_profile(provider_id):
    try:
        profile = delivery.get_provider(provider_id)
    except ProviderNotFound:
        return error("Delivery provider not found", status=404)
    return jsonify(delivery.provider_payload(profile, include_location=True)), 200


@delivery_bp.route("/register", methods=["POST"])
@auth_required
def register_provider():
    try:
        with transactional("Delivery provider registration failed"):
            profile, created = delivery.register_provider(g.user_id)
            status = delivery.verification_status(profile)
    except Exception:
        return internal_error_response()
    if not created:
        return jsonify({
            "id": profile.user_id,
            "isDeliveryProvider": True,
            "verificationStatus": status,
        }), 200
    return jsonify({
        "message": "Delivery provider registration initiated",
        "userId": g.user_id,
        "verificationStatus": status,
    }), 201
