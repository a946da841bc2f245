from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.dependencies import get_admin_user
from app.models.user import User
from app.schemas.booking import BookingCreateRequest, BookingStatusRequest
from app.schemas.common import ErrorResponse, PaginatedResponse, success_response, paginated_response
from app.services.booking_service import booking_service

router = APIRouter(prefix="/bookings")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="[PUBLIC] Create booking request",
    responses={
        400: {"model": ErrorResponse, "description": "Motorcycle unavailable"},
        404: {"model": ErrorResponse, "description": "Motorcycle not found"},
        409: {"model": ErrorResponse, "description": "Dates already booked"},
    },
)
def create_booking(
    body: BookingCreateRequest,
    db:   Session = Depends(get_db),
):
    data = booking_service.create_booking(db, body)
    return success_response("Booking request submitted successfully", data)


@router.get("", summary="List bookings (Admin)", response_model=PaginatedResponse)
def list_bookings(
    page:         int           = Query(1, ge=1),
    limit:        int           = Query(20, ge=1, le=100),
    status:       Optional[str] = Query(None, description="Pending | Approved | Rejected | Completed | Expired"),
    motorcycleId: Optional[int] = Query(None),
    db:           Session       = Depends(get_db),
    _:            User          = Depends(get_admin_user),
):
    data, total = booking_service.list_bookings(db, page, limit, status, motorcycleId)
    return paginated_response("Bookings retrieved successfully", data, total, page, limit)


@router.post("/expire-stale", summary="Expire pending bookings past their hold (Admin)")
def expire_stale(
    db: Session = Depends(get_db),
    _:  User    = Depends(get_admin_user),
):
    count = booking_service.expire_stale_bookings(db)
    return success_response("Stale pending bookings expired", {"expired": count})


@router.get("/{booking_id}", summary="Get booking detail (Admin)")
def get_booking(
    booking_id: int,
    db:         Session = Depends(get_db),
    _:          User    = Depends(get_admin_user),
):
    return success_response("Booking retrieved", booking_service.get_booking(db, booking_id))


@router.put("/{booking_id}", summary="Update booking status (Admin)")
@router.patch("/{booking_id}/status", summary="Update booking status (Admin)")
def update_booking_status(
    booking_id: int,
    body:       BookingStatusRequest,
    db:         Session = Depends(get_db),
    current_user: User  = Depends(get_admin_user),
):
    data = booking_service.update_status(db, booking_id, body.status, current_user.id)
    return success_response("Booking status updated successfully", data)


@router.delete("/{booking_id}", summary="Delete booking (Admin)")
def delete_booking(
    booking_id: int,
    db:         Session = Depends(get_db),
    current_user: User  = Depends(get_admin_user),
):
    booking_service.delete_booking(db, booking_id, current_user.id)
    return success_response("Booking deleted successfully", None)
