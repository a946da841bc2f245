from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_admin_user
from app.models.user import User
from app.schemas.common import success_response
from app.services.dashboard_service import dashboard_service

router = APIRouter(prefix="/dashboard")


@router.get("", summary="Revenue, active bookings and most rented motorcycle (Admin)")
def get_dashboard(
    db: Session = Depends(get_db),
    _:  User    = Depends(get_admin_user),
):
    return success_response("Dashboard statistics retrieved", dashboard_service.summary(db))
