from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.dependencies import get_admin_user
from app.models.user import User
from app.schemas.motorcycle import MotorcycleCreateRequest, MotorcycleUpdateRequest
from app.schemas.common import PaginatedResponse, success_response, paginated_response
from app.services.booking_service import booking_service
from app.services.motorcycle_service import motorcycle_service

router = APIRouter(prefix="/motorcycles")


@router.get("", summary="[PUBLIC] List motorcycles (paginated)", response_model=PaginatedResponse)
def list_motorcycles(
    page:   int           = Query(1, ge=1),
    limit:  int           = Query(20, ge=1, le=100),
    search: Optional[str] = Query(None, description="Matches name, brand or type"),
    type:   Optional[str] = Query(None),
    status: Optional[str] = Query(None, description="available | unavailable"),
    db:     Session       = Depends(get_db),
):
    data, total = motorcycle_service.list_motorcycles(db, page, limit, search, type, status)
    return paginated_response("Motorcycles retrieved successfully", data, total, page, limit)


@router.get("/{motorcycle_id}", summary="[PUBLIC] Get motorcycle by ID")
def get_motorcycle(motorcycle_id: int, db: Session = Depends(get_db)):
    return success_response("Motorcycle retrieved", motorcycle_service.get_motorcycle(db, motorcycle_id))


@router.get("/{motorcycle_id}/booked-dates", summary="[PUBLIC] Date ranges already held by bookings")
def get_booked_dates(motorcycle_id: int, db: Session = Depends(get_db)):
    return success_response("Booked dates retrieved", booking_service.list_booked_dates(db, motorcycle_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create motorcycle (Admin)")
def create_motorcycle(
    body: MotorcycleCreateRequest,
    db:   Session = Depends(get_db),
    current_user: User = Depends(get_admin_user),
):
    data = motorcycle_service.create_motorcycle(db, body, current_user.id)
    return success_response("Motorcycle created successfully", data)


@router.put("/{motorcycle_id}", summary="Update motorcycle (Admin)")
def update_motorcycle(
    motorcycle_id: int,
    body:          MotorcycleUpdateRequest,
    db:            Session = Depends(get_db),
    current_user:  User    = Depends(get_admin_user),
):
    data = motorcycle_service.update_motorcycle(db, motorcycle_id, body, current_user.id)
    return success_response("Motorcycle updated successfully", data)


@router.delete("/{motorcycle_id}", summary="Delete motorcycle and its bookings (Admin)")
def delete_motorcycle(
    motorcycle_id: int,
    db:            Session = Depends(get_db),
    current_user:  User    = Depends(get_admin_user),
):
    motorcycle_service.delete_motorcycle(db, motorcycle_id, current_user.id)
    return success_response("Motorcycle deleted successfully", None)
