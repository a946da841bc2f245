"""
All test-data builders in one place.
Import from here in every test file; never define dummy data inline.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from app.models.booking import Booking, BookingStatus
from app.models.motorcycle import Motorcycle, MotorcycleStatus
from app.models.user import RoleName, User

ADMIN_EMAIL = "admin@rental.com"
ADMIN_PASSWORD = "password"

JUNE_10 = date(2025, 6, 10)
JUNE_12 = date(2025, 6, 12)


# ---------------------------------------------------------------------------
# Persisted rows
# ---------------------------------------------------------------------------


def make_admin(db: Session, password_hash: str = "not-a-real-hash", **overrides) -> User:
    fields = dict(
        name="Admin Rental",
        email=ADMIN_EMAIL,
        password=password_hash,
        role=RoleName.ADMIN,
        isActive=True,
    )
    fields.update(overrides)
    user = User(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_motorcycle(db: Session, **overrides) -> Motorcycle:
    fields = dict(
        name="Vario 160",
        brand="Honda",
        type="Matic",
        pricePerDay=Decimal("100000"),
        status=MotorcycleStatus.AVAILABLE,
        description="Motor matic responsif",
    )
    fields.update(overrides)
    m = Motorcycle(**fields)
    db.add(m)
    db.commit()
    db.refresh(m)
    return m


def make_booking(
    db: Session,
    motorcycle: Motorcycle,
    start: date = JUNE_10,
    end: date = JUNE_12,
    status: BookingStatus = BookingStatus.PENDING,
    created_at: datetime | None = None,
    **overrides,
) -> Booking:
    days = (end - start).days + 1
    fields = dict(
        motorcycleId=motorcycle.id,
        customerName="Budi Santoso",
        customerPhone="08123456789",
        customerAddress="Jl. Malioboro 1, Yogyakarta",
        startDate=start,
        endDate=end,
        totalPrice=motorcycle.pricePerDay * days,
        status=status,
    )
    if created_at is not None:
        fields["createdAt"] = created_at
    fields.update(overrides)
    b = Booking(**fields)
    db.add(b)
    db.commit()
    db.refresh(b)
    return b


# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


def booking_payload(motorcycle_id: int, **overrides) -> dict:
    base = dict(
        motorcycleId=motorcycle_id,
        customerName="Siti Aminah",
        customerPhone="08129876543",
        customerAddress="Jl. Kaliurang KM 5, Sleman",
        startDate="2025-06-13",
        endDate="2025-06-15",
    )
    return {**base, **overrides}


def motorcycle_payload(**overrides) -> dict:
    base = dict(
        name="NMAX 155",
        brand="Yamaha",
        type="Maxi Scooter",
        pricePerDay=150000,
        imageUrl="https://images.example.com/nmax.jpg",
        status="available",
        description="Skuter maxi premium",
    )
    return {**base, **overrides}
