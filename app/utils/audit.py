from sqlalchemy.orm import Session

from app.models.audit_log import AuditLog


def log_action(
    db: Session,
    user_id: int | None,
    action: str,
    entity_type: str,
    entity_id: int | None = None,
    description: str | None = None,
) -> AuditLog:
    """
    Stage an audit row in the caller's session. It is committed (or rolled
    back) together with the change it describes.

    user_id is None for public booking requests and system jobs such as
    pending-hold expiry. Actions in use: CREATE, UPDATE, UPDATE_STATUS,
    DELETE, EXPIRE, LOGIN.
    """
    entry = AuditLog(
        userId=user_id,
        action=action,
        entityType=entity_type,
        entityId=entity_id,
        description=description,
    )
    db.add(entry)
    return entry
