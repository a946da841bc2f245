from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.config import settings
from app.models.booking import Booking, BookingStatus
from app.models.motorcycle import Motorcycle
from app.services.booking_lifecycle import active_condition

# Bookings that count as earned revenue
REVENUE_STATUSES = [BookingStatus.APPROVED, BookingStatus.COMPLETED]


def _period_starts(now: datetime) -> tuple[datetime, datetime]:
    """Start of today and of the current month in APP_TIMEZONE, as UTC instants."""
    local = now.astimezone(ZoneInfo(settings.APP_TIMEZONE))
    day   = local.replace(hour=0, minute=0, second=0, microsecond=0)
    month = day.replace(day=1)
    return day.astimezone(timezone.utc), month.astimezone(timezone.utc)


class DashboardService:

    def _revenue_since(self, db: Session, since: datetime) -> Decimal:
        total = db.query(func.coalesce(func.sum(Booking.totalPrice), 0)).filter(
            Booking.status.in_(REVENUE_STATUSES),
            Booking.createdAt >= since,
        ).scalar()
        return Decimal(total or 0)

    def most_rented(self, db: Session) -> Motorcycle | None:
        """Motorcycle with the most bookings of any status; ties go to the lowest id."""
        booking_count = func.count(Booking.id)
        row = db.query(Booking.motorcycleId, booking_count)\
                .group_by(Booking.motorcycleId)\
                .order_by(booking_count.desc(), Booking.motorcycleId.asc())\
                .first()
        if not row:
            return None
        return db.query(Motorcycle).filter(Motorcycle.id == row[0]).first()

    def summary(self, db: Session, now: datetime | None = None) -> dict:
        now = now or datetime.now(timezone.utc)
        day_start, month_start = _period_starts(now)

        # Stale Pending holds (PENDING_HOLD_HOURS) are not active
        active = db.query(func.count(Booking.id)).filter(active_condition(now)).scalar()
        top = self.most_rented(db)

        return {
            "dailyRevenue":   float(self._revenue_since(db, day_start)),
            "monthlyRevenue": float(self._revenue_since(db, month_start)),
            "activeBookings": active,
            "mostRentedMotorcycle": {
                "id":          top.id,
                "name":        top.name,
                "brand":       top.brand,
                "type":        top.type,
                "pricePerDay": float(top.pricePerDay),
                "imageUrl":    top.imageUrl,
                "status":      top.status.value,
            } if top else None,
        }


dashboard_service = DashboardService()
