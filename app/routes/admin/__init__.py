from flask import Blueprint
from app.version import API_PREFIX
from app.auth.permissions import roles_with_scope
from app.utils import auth_required, role_required

admin_landing_bp = Blueprint("admin_landing", __name__, url_prefix=f"{API_PREFIX}/admin/landing")


@admin_landing_bp.before_request
@auth_required
@role_required(roles_with_scope("manage_landing"))
def _enforce_landing_editor():
    """Only admins and content editors may touch landing content."""
    return None

from . import landing  # noqa: E402
from . import waitlist  # noqa: E402
