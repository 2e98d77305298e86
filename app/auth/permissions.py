"""
Central registry of allowed actions per role.
"""
ROLE_SCOPES = {
    "user": set(),
    "content_editor": {"manage_landing"},
    "admin": {"*"},
}

def role_has_scope(role: str, action: str) -> bool:
    scopes = ROLE_SCOPES.get(role, set())
    return "*" in scopes or action in scopes


def roles_with_scope(action: str) -> list:
    """Roles allowed to perform ``action``, for use with ``role_required``."""
    return sorted(role for role in ROLE_SCOPES if role_has_scope(role, action))
