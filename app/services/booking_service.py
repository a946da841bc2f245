import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session, joinedload

from app.models.booking import Booking, BookingStatus
from app.models.motorcycle import Motorcycle, MotorcycleStatus
from app.schemas.booking import BookingCreateRequest
from app.services import booking_lifecycle as lifecycle
from app.services.availability import has_conflict
from app.services.pricing import compute_total
from app.utils.audit import log_action
from app.utils.exceptions import (
    NotFoundException, BookingConflictException, VehicleUnavailableException,
)
from app.utils.whatsapp import build_booking_link

logger = logging.getLogger(__name__)


def _serialize_motorcycle(m: Motorcycle) -> dict:
    return {
        "id":          m.id,
        "name":        m.name,
        "brand":       m.brand,
        "type":        m.type,
        "pricePerDay": float(m.pricePerDay),
        "imageUrl":    m.imageUrl,
        "status":      m.status.value,
    }


def _serialize(b: Booking) -> dict:
    return {
        "id":              b.id,
        "motorcycleId":    b.motorcycleId,
        "customerName":    b.customerName,
        "customerPhone":   b.customerPhone,
        "customerAddress": b.customerAddress,
        "startDate":       b.startDate.isoformat(),
        "endDate":         b.endDate.isoformat(),
        "totalPrice":      float(b.totalPrice),
        "status":          lifecycle.effective_status(b).value,
        "motorcycle":      _serialize_motorcycle(b.motorcycle) if b.motorcycle else None,
        "createdAt":       b.createdAt.isoformat() if b.createdAt else None,
        "updatedAt":       b.updatedAt.isoformat() if b.updatedAt else None,
    }


class BookingService:

    def get_active_bookings(self, db: Session, motorcycle_id: int) -> list[Booking]:
        return db.query(Booking).filter(
            Booking.motorcycleId == motorcycle_id,
            lifecycle.active_condition(),
        ).order_by(Booking.startDate).all()

    def list_booked_dates(self, db: Session, motorcycle_id: int) -> list[dict]:
        """Occupied date ranges for a motorcycle, without customer data."""
        if not db.query(Motorcycle.id).filter(Motorcycle.id == motorcycle_id).first():
            raise NotFoundException("Motorcycle")
        return [
            {"startDate": b.startDate.isoformat(), "endDate": b.endDate.isoformat()}
            for b in self.get_active_bookings(db, motorcycle_id)
        ]

    def list_bookings(
        self, db: Session, page: int, limit: int,
        status: str | None, motorcycle_id: int | None,
    ) -> tuple[list[dict], int]:
        q = db.query(Booking).options(joinedload(Booking.motorcycle))
        if status:        q = q.filter(lifecycle.status_condition(lifecycle.coerce_status(status)))
        if motorcycle_id: q = q.filter(Booking.motorcycleId == motorcycle_id)

        total = q.count()
        items = q.order_by(Booking.createdAt.desc(), Booking.id.desc())\
                 .offset((page - 1) * limit).limit(limit).all()
        return [_serialize(b) for b in items], total

    def get_booking(self, db: Session, booking_id: int) -> dict:
        b = db.query(Booking).filter(Booking.id == booking_id).first()
        if not b:
            raise NotFoundException("Booking")
        return _serialize(b)

    def create_booking(self, db: Session, data: BookingCreateRequest) -> dict:
        # Lock the motorcycle row so concurrent admissions for it run one at a time
        m = db.query(Motorcycle).filter(Motorcycle.id == data.motorcycleId)\
              .with_for_update().first()
        if not m:
            raise NotFoundException("Motorcycle")
        if m.status != MotorcycleStatus.AVAILABLE:
            raise VehicleUnavailableException()

        active = self.get_active_bookings(db, m.id)
        if has_conflict(m.id, data.startDate, data.endDate, active):
            logger.warning(
                f"Booking rejected: motorcycle #{m.id} already booked "
                f"within {data.startDate}..{data.endDate}"
            )
            raise BookingConflictException()

        total_price = compute_total(data.startDate, data.endDate, m.pricePerDay)

        b = Booking(
            motorcycleId=m.id,
            customerName=data.customerName,
            customerPhone=data.customerPhone,
            customerAddress=data.customerAddress,
            startDate=data.startDate,
            endDate=data.endDate,
            totalPrice=total_price,
            status=BookingStatus.PENDING,
        )
        db.add(b)
        db.flush()
        log_action(db, None, "CREATE", "Booking", b.id,
                   f"{data.customerName} booked {m.brand} {m.name} "
                   f"{data.startDate.isoformat()}..{data.endDate.isoformat()}")
        db.commit()
        db.refresh(b)
        logger.info(f"Booking #{b.id} created for motorcycle #{m.id} (total {total_price})")

        result = _serialize(b)
        result["whatsappUrl"] = build_booking_link(b)
        return result

    def update_status(self, db: Session, booking_id: int, new_status, actor_id: int | None) -> dict:
        b = db.query(Booking).filter(Booking.id == booking_id).first()
        if not b:
            raise NotFoundException("Booking")

        target  = lifecycle.parse_status(new_status)
        current = lifecycle.effective_status(b)
        lifecycle.validate_transition(current, target)

        b.status = target
        log_action(db, actor_id, "UPDATE_STATUS", "Booking", b.id,
                   f"Booking #{b.id} {current.value} -> {target.value}")
        db.commit()
        db.refresh(b)
        logger.info(f"Booking #{b.id} status {current.value} -> {target.value}")
        return _serialize(b)

    def delete_booking(self, db: Session, booking_id: int, actor_id: int | None) -> None:
        b = db.query(Booking).filter(Booking.id == booking_id).first()
        if not b:
            raise NotFoundException("Booking")
        log_action(db, actor_id, "DELETE", "Booking", b.id,
                   f"Deleted booking #{b.id} ({b.status.value})")
        db.delete(b)
        db.commit()
        logger.info(f"Booking #{booking_id} deleted")

    # ─── Scheduler helper (called by admin endpoint / cron) ──────────────────
    def expire_stale_bookings(self, db: Session, now: datetime | None = None) -> int:
        """Mark Pending bookings whose hold has run out as Expired. Returns count updated."""
        cutoff = lifecycle.hold_cutoff(now or datetime.now(timezone.utc))
        if cutoff is None:
            return 0
        stale = db.query(Booking).filter(
            Booking.status == BookingStatus.PENDING,
            Booking.createdAt < cutoff,
        ).all()
        for b in stale:
            b.status = BookingStatus.EXPIRED
            log_action(db, None, "EXPIRE", "Booking", b.id,
                       f"Booking #{b.id} pending hold expired")
        if stale:
            db.commit()
            logger.info(f"Expired {len(stale)} stale pending booking(s)")
        return len(stale)


booking_service = BookingService()
