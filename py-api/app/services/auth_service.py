"""Credential checks against the static user list."""

from __future__ import annotations

from typing import Any, Dict, Optional

from app.database import USERS_DOCUMENT, get_document_store
from app.utils.errors import AuthError, ValidationError


def authenticate(email: Any, password: Any, role: Any) -> Dict[str, Any]:
    """
    Match a user by email, plaintext password and role.

    Args:
        email: Email address as submitted
        password: Plaintext password as submitted
        role: Role the user is logging in as

    Returns:
        The matching user's email, role and name

    Raises:
        ValidationError: If any of the three fields is missing or empty
        AuthError: If no stored user matches all three fields
    """
    if not email or not password or not role:
        raise ValidationError("Email, password, and role required")

    user = find_user(email, password, role)
    if user is None:
        raise AuthError("Invalid credentials or role")

    return {
        "email": user.get("email"),
        "role": user.get("role"),
        "name": user.get("name"),
    }


def find_user(email: Any, password: Any, role: Any) -> Optional[Dict[str, Any]]:
    """Return the first stored user whose three fields equal the given values."""
    users = get_document_store().load(USERS_DOCUMENT)["users"]
    return next(
        (
            user
            for user in users
            if isinstance(user, dict)
            and user.get("email") == email
            and user.get("password") == password
            and user.get("role") == role
        ),
        None,
    )
