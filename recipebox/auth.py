"""
Identity Provider Authentication

Extracts user identity from the headers injected by the identity provider
that fronts the API (Azure Container Apps Easy Auth or compatible).

Headers injected after successful authentication:
- X-MS-CLIENT-PRINCIPAL: Base64-encoded JSON with full user claims
- X-MS-CLIENT-PRINCIPAL-ID: Stable subject identifier of the user
- X-MS-CLIENT-PRINCIPAL-NAME: User's principal name (email/UPN)
"""

import base64
import json
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from recipebox.config import Settings, get_settings
from recipebox.errors import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass
class UserContext:
    """Represents the authenticated user."""
    user_id: str  # Subject identifier from the identity provider
    name: str  # Display name or email
    email: Optional[str] = None  # Email address if available


def _email_from_principal(principal_b64: str) -> Optional[str]:
    """Pull the email claim out of the encoded client principal."""
    try:
        principal_json = base64.b64decode(principal_b64).decode("utf-8")
        principal = json.loads(principal_json)
    except (ValueError, UnicodeDecodeError):
        logger.warning("Could not decode client principal header")
        return None

    claims = principal.get("claims") if isinstance(principal, dict) else None
    if not isinstance(claims, list):
        logger.warning("Client principal header has no claims list")
        return None

    for claim in claims:
        if isinstance(claim, dict) and claim.get("typ") in ["email", "preferred_username"]:
            return claim.get("val")
    return None


def resolve_user(headers, settings: Settings) -> Optional[UserContext]:
    """
    Resolve the caller from request headers.

    Falls back to the configured development identity when the identity
    provider headers are missing.

    Returns:
        UserContext if authenticated, None otherwise
    """
    # Method 1: identity provider headers
    user_id = headers.get("x-ms-client-principal-id")
    if user_id:
        name = headers.get("x-ms-client-principal-name")
        email = None
        principal_b64 = headers.get("x-ms-client-principal")
        if principal_b64:
            email = _email_from_principal(principal_b64)

        return UserContext(
            user_id=user_id,
            name=name or email or "User",
            email=email or name  # UPN is often the email
        )

    # Method 2: development identity from settings
    if settings.dev_user_id:
        return UserContext(
            user_id=settings.dev_user_id,
            name=settings.dev_user_name,
            email=settings.dev_user_email or None
        )

    return None


def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings)
) -> UserContext:
    """
    FastAPI dependency requiring an authenticated caller.

    Raises:
        AuthenticationError: if no identity is present
    """
    user = resolve_user(request.headers, settings)
    if user is None:
        raise AuthenticationError()
    return user
