import logging
from typing import Any, Optional
from sqlalchemy.orm import Session

from hrms.models.audit_log import AuditLog

logger = logging.getLogger(__name__)


def log_action(
    db: Session,
    user_id: int,
    action: str,
    resource_type: str,
    resource_id: Any = None,
    details: dict | None = None,
    ip_address: Optional[str] = None,
) -> AuditLog:
    """Stage an audit entry on the caller's session.

    The entry is committed together with the mutation it describes.
    """
    entry = AuditLog(
        user_id=user_id,
        action=action,
        resource_type=resource_type,
        resource_id=str(resource_id) if resource_id is not None else None,
        details=details.copy() if isinstance(details, dict) else None,
        ip_address=ip_address,
    )
    db.add(entry)
    logger.info("audit user=%s action=%s %s#%s", user_id, action, resource_type, resource_id)
    return entry
