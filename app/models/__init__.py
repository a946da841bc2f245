"""
Import all models here so that:
1. Alembic can auto-detect them when generating migrations
2. Relationships between models resolve correctly

Order matters: import parent tables before child tables.
"""

from app.models.user import User, RoleName
from app.models.motorcycle import Motorcycle, MotorcycleStatus
from app.models.booking import Booking, BookingStatus
from app.models.audit_log import AuditLog
from app.models.revoked_token import RevokedToken

__all__ = [
    "User",
    "RoleName",
    "Motorcycle",
    "MotorcycleStatus",
    "Booking",
    "BookingStatus",
    "AuditLog",
    "RevokedToken",
]
