"""
Signed bearer tokens for the acting employee.

Format: employee_id.role.exp.signature where signature is a truncated
HMAC-SHA256 of the payload keyed with JWT_SECRET.
"""

import os
import hmac
from datetime import datetime, timedelta, timezone
from typing import Optional

JWT_SECRET = os.getenv("JWT_SECRET", "hrms-dev-secret-change-in-prod")
JWT_EXPIRY_HOURS = int(os.getenv("JWT_EXPIRY_HOURS", "24"))


def _sign(payload: str) -> str:
    return hmac.new(JWT_SECRET.encode(), payload.encode(), "sha256").hexdigest()[:32]


def create_access_token(employee_id: int, role: str, expires_delta: Optional[timedelta] = None) -> str:
    expires_delta = expires_delta or timedelta(hours=JWT_EXPIRY_HOURS)
    exp = int((datetime.now(timezone.utc) + expires_delta).timestamp())
    payload = f"{employee_id}.{role}.{exp}"
    return f"{payload}.{_sign(payload)}"


def decode_access_token(token: str) -> Optional[dict]:
    """Returns {employee_id, role} or None when the token is invalid or expired."""
    parts = token.rsplit(".", 1)
    if len(parts) != 2:
        return None
    payload, sig = parts
    if not hmac.compare_digest(sig, _sign(payload)):
        return None
    try:
        employee_id_s, role, exp_s = payload.split(".")
        employee_id, exp = int(employee_id_s), int(exp_s)
    except ValueError:
        return None
    if exp < int(datetime.now(timezone.utc).timestamp()):
        return None
    return {"employee_id": employee_id, "role": role}
