"""
Booking status lifecycle.

    Pending ──► Approved ──► Completed
       │
       └──────► Rejected

Pending and Approved bookings hold their dates; every other status is
terminal. Expired is set by the system only (see expire_stale_bookings in
BookingService) and can never be requested by an admin.
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy import and_, or_

from app.config import settings
from app.models.booking import Booking, BookingStatus
from app.utils.exceptions import InvalidStatusException, InvalidTransitionException

ACTIVE_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.APPROVED})

TERMINAL_STATUSES = frozenset({
    BookingStatus.REJECTED,
    BookingStatus.COMPLETED,
    BookingStatus.EXPIRED,
})

# Values accepted by the admin status update, as literal strings
ADMIN_STATUSES = (
    BookingStatus.PENDING,
    BookingStatus.APPROVED,
    BookingStatus.REJECTED,
    BookingStatus.COMPLETED,
)

_ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING:   frozenset({BookingStatus.APPROVED, BookingStatus.REJECTED}),
    BookingStatus.APPROVED:  frozenset({BookingStatus.COMPLETED}),
    BookingStatus.REJECTED:  frozenset(),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.EXPIRED:   frozenset(),
}


def is_active(status: BookingStatus) -> bool:
    return status in ACTIVE_STATUSES


def allowed_targets(current: BookingStatus) -> list[str]:
    return sorted(s.value for s in _ALLOWED_TRANSITIONS.get(current, frozenset()))


def parse_status(value) -> BookingStatus:
    """
    Map a requested status onto an admin-settable BookingStatus.
    Only the exact string literals match; numbers, null and other JSON
    values are reported as an invalid status too.
    """
    if isinstance(value, str):
        for s in ADMIN_STATUSES:
            if value == s.value:
                return s
    raise InvalidStatusException(str(value), [s.value for s in ADMIN_STATUSES])


def coerce_status(value: str) -> BookingStatus:
    """Any stored status, Expired included. Used for list filters."""
    try:
        return BookingStatus(value)
    except ValueError:
        raise InvalidStatusException(value, [s.value for s in BookingStatus])


def validate_transition(current: BookingStatus, target: BookingStatus) -> None:
    """Raise InvalidTransitionException unless current -> target is an edge of the table."""
    if target not in _ALLOWED_TRANSITIONS.get(current, frozenset()):
        raise InvalidTransitionException(current.value, target.value, allowed_targets(current))


# ─── Pending hold expiry ──────────────────────────────────────────────────────
def hold_cutoff(now: datetime | None = None) -> datetime | None:
    """Pending bookings created before this instant no longer hold their dates."""
    if settings.PENDING_HOLD_HOURS is None:
        return None
    now = now or datetime.now(timezone.utc)
    return now - timedelta(hours=settings.PENDING_HOLD_HOURS)


def is_hold_expired(booking: Booking, now: datetime | None = None) -> bool:
    if booking.status != BookingStatus.PENDING:
        return False
    cutoff = hold_cutoff(now)
    if cutoff is None or booking.createdAt is None:
        return False
    created = booking.createdAt
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created < cutoff


def effective_status(booking: Booking, now: datetime | None = None) -> BookingStatus:
    """Stored status, or Expired for a Pending booking whose hold has run out."""
    if is_hold_expired(booking, now):
        return BookingStatus.EXPIRED
    return BookingStatus(booking.status)


# ─── SQL conditions ───────────────────────────────────────────────────────────
def active_condition(now: datetime | None = None):
    """Bookings that currently hold their dates: Approved, or Pending within the hold."""
    cutoff = hold_cutoff(now)
    if cutoff is None:
        return Booking.status.in_(list(ACTIVE_STATUSES))
    return or_(
        Booking.status == BookingStatus.APPROVED,
        and_(Booking.status == BookingStatus.PENDING, Booking.createdAt >= cutoff),
    )


def status_condition(status: BookingStatus, now: datetime | None = None):
    """Filter on the status a booking reads as, so stale Pending rows count as Expired."""
    cutoff = hold_cutoff(now)
    if cutoff is None or status not in (BookingStatus.PENDING, BookingStatus.EXPIRED):
        return Booking.status == status
    if status == BookingStatus.PENDING:
        return and_(Booking.status == BookingStatus.PENDING, Booking.createdAt >= cutoff)
    return or_(
        Booking.status == BookingStatus.EXPIRED,
        and_(Booking.status == BookingStatus.PENDING, Booking.createdAt < cutoff),
    )
