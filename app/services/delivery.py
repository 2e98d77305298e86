from datetime import datetime
from models import db
from models.profile import Profile


class ProviderNotFound(Exception):
    pass


def _iso(value):
    return value.isoformat() if value else None


def verification_status(profile: Profile) -> str:
    return "verified" if profile.is_verified else "pending"


def provider_payload(profile: Profile, include_location=False) -> dict:
    payload = {
        "id": profile.user_id,
        "userId": profile.user_id,
        "username": profile.username,
        "displayName": profile.full_name,
        "avatar": profile.avatar_url,
        "verificationStatus": verification_status(profile),
        "isDeliveryProvider": bool(profile.is_delivery_provider),
        "createdAt": _iso(profile.created_at),
        "updatedAt": _iso(profile.updated_at),
    }
    if include_location:
        payload["location"] = profile.location
    return payload


def get_provider(user_id) -> Profile:
    profile = db.session.get(Profile, user_id)
    if not profile or not profile.is_delivery_provider:
        raise ProviderNotFound("Delivery provider profile not found")
    return profile


def register_provider(user_id):
    """Flag the caller as a delivery provider.

    Returns ``(profile, created)`` where ``created`` is False when the
    profile was already registered.
    """
    profile = db.session.get(Profile, user_id)
    if profile and profile.is_delivery_provider:
        return profile, False
    if not profile:
        profile = Profile(user_id=user_id)
        db.session.add(profile)
    profile.is_delivery_provider = True
    profile.updated_at = datetime.utcnow()
    db.session.flush()
    return profile, True
