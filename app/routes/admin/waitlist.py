from flask import request, jsonify, Response, current_app
from app.auth.permissions import roles_with_scope
from app.schemas.landing import WaitlistExportRequest, WaitlistLeadUpdateRequest
from app.services import waitlist
from app.services.landing_content import LandingItemNotFound
from app.utils import (
    error,
    internal_error_response,
    parse_page_args,
    role_required,
    transactional,
    validate_schema,
)
from . import admin_landing_bp


def _min_score():
    raw = request.args.get("minScore")
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@admin_landing_bp.route("/waitlist", methods=["GET"])
@role_required(roles_with_scope("manage_waitlist"))
def list_waitlist():
    paging = parse_page_args(request.args)
    leads, meta = waitlist.list_leads(
        status=request.args.get("status"),
        min_score=_min_score(),
        page=paging["page"],
        page_size=paging["page_size"],
    )
    return jsonify({"leads": [l.to_dict() for l in leads], "meta": meta.to_dict()}), 200


@admin_landing_bp.route("/waitlist/<lead_id>", methods=["GET"])
@role_required(roles_with_scope("manage_waitlist"))
def get_waitlist_lead(lead_id):
    try:
        lead = waitlist.get_lead(lead_id)
    except LandingItemNotFound as e:
        return error(str(e), status=404)
    return jsonify(lead.to_dict()), 200


@admin_landing_bp.route("/waitlist/<lead_id>", methods=["PATCH"])
@role_required(roles_with_scope("manage_waitlist"))
@validate_schema(WaitlistLeadUpdateRequest)
def update_waitlist_lead(lead_id):
    data = request.validated_data.model_dump(exclude_unset=True)
    try:
        with transactional("Failed to update lead"):
            lead = waitlist.update_lead(lead_id, data)
    except LandingItemNotFound as e:
        return error(str(e), status=404)
    except ValueError as e:
        return error(str(e), status=400)
    except Exception:
        return internal_error_response()
    return jsonify(lead.to_dict()), 200


@admin_landing_bp.route("/waitlist/<lead_id>", methods=["DELETE"])
@role_required(roles_with_scope("manage_waitlist"))
def delete_waitlist_lead(lead_id):
    try:
        with transactional("Failed to delete lead"):
            waitlist.delete_lead(lead_id)
    except LandingItemNotFound as e:
        return error(str(e), status=404)
    except Exception:
        return internal_error_response()
    return jsonify({"success": True}), 200


@admin_landing_bp.route("/waitlist/export", methods=["POST"])
@role_required(roles_with_scope("manage_waitlist"))
@validate_schema(WaitlistExportRequest)
def export_waitlist():
    params = request.validated_data
    limit = min(params.limit, current_app.config.get("WAITLIST_EXPORT_MAX", 1000))
    leads = waitlist.export_leads(status=params.status, limit=limit)
    if params.format == "csv":
        return Response(
            waitlist.leads_to_csv(leads),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=waitlist.csv"},
        )
    return jsonify([l.to_dict() for l in leads]), 200
