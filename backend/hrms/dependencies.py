"""
Acting-user dependencies.

Supports signed bearer tokens (production) with demo-header fallback when
AUTH_MODE=demo (X-User-Id / X-User-Role).
"""

import os
from fastapi import HTTPException, Header
from typing import Optional

from hrms.models.employee import MANAGER_ROLES, ADMIN_ROLES
from hrms.services.auth import decode_access_token

AUTH_MODE = os.getenv("AUTH_MODE", "demo")  # "demo" or "token"

# Demo placeholders, used only when AUTH_MODE=demo and no token is provided
DEMO_USER_ID = 1
DEMO_ROLE = "employee"


def _token_claims(authorization: Optional[str]) -> Optional[dict]:
    """Decode the bearer token. Returns None if no token was sent."""
    if not authorization:
        return None

    token = authorization.removeprefix("Bearer ").strip()
    if not token:
        return None

    claims = decode_access_token(token)
    if not claims:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return claims


def get_current_user_id(
    authorization: Optional[str] = Header(default=None),
    x_user_id: Optional[str] = Header(default=None),
) -> int:
    """Extract the acting employee id from the token, or fall back to demo header."""
    claims = _token_claims(authorization)
    if claims:
        return claims["employee_id"]

    if AUTH_MODE == "demo":
        try:
            return int(x_user_id) if x_user_id else DEMO_USER_ID
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid X-User-Id (must be an integer)")

    raise HTTPException(status_code=401, detail="Not authenticated")


def get_current_role(
    authorization: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> str:
    """Extract role from the token, or fall back to demo header."""
    claims = _token_claims(authorization)
    if claims:
        return claims["role"]

    if AUTH_MODE == "demo":
        return x_user_role or DEMO_ROLE

    raise HTTPException(status_code=401, detail="Not authenticated")


def require_manager(
    authorization: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> str:
    """Require manager or admin role. Returns the role."""
    role = get_current_role(authorization, x_user_role)
    if role not in MANAGER_ROLES:
        raise HTTPException(status_code=403, detail="Manager access required")
    return role


def require_admin(
    authorization: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> str:
    """Require HR admin or super admin role."""
    role = get_current_role(authorization, x_user_role)
    if role not in ADMIN_ROLES:
        raise HTTPException(status_code=403, detail="Admin access required")
    return role
