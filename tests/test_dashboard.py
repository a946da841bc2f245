from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from app.config import settings
from app.models.booking import BookingStatus
from app.services.dashboard_service import dashboard_service

from .factories import make_booking, make_motorcycle

NOW = datetime(2025, 6, 15, 10, 0, tzinfo=timezone.utc)


def test_empty_dashboard(db):
    summary = dashboard_service.summary(db, now=NOW)
    assert summary == {
        "dailyRevenue": 0.0,
        "monthlyRevenue": 0.0,
        "activeBookings": 0,
        "mostRentedMotorcycle": None,
    }


def test_revenue_counts_approved_and_completed_only(db):
    m = make_motorcycle(db, pricePerDay=Decimal("100000"))
    today = NOW.replace(hour=8)
    earlier_this_month = datetime(2025, 6, 2, 9, 0, tzinfo=timezone.utc)
    last_month = datetime(2025, 5, 30, 9, 0, tzinfo=timezone.utc)

    # 1 day each -> 100000
    make_booking(db, m, date(2025, 7, 1), date(2025, 7, 1), BookingStatus.APPROVED, created_at=today)
    make_booking(db, m, date(2025, 7, 2), date(2025, 7, 2), BookingStatus.COMPLETED, created_at=earlier_this_month)
    make_booking(db, m, date(2025, 7, 3), date(2025, 7, 3), BookingStatus.PENDING, created_at=today)
    make_booking(db, m, date(2025, 7, 4), date(2025, 7, 4), BookingStatus.REJECTED, created_at=today)
    make_booking(db, m, date(2025, 7, 5), date(2025, 7, 5), BookingStatus.APPROVED, created_at=last_month)

    summary = dashboard_service.summary(db, now=NOW)

    assert summary["dailyRevenue"] == 100000.0
    assert summary["monthlyRevenue"] == 200000.0
    assert summary["activeBookings"] == 3


def test_most_rented_counts_every_status(db):
    m1 = make_motorcycle(db, name="Vario")
    m2 = make_motorcycle(db, name="Beat")
    make_booking(db, m1, status=BookingStatus.APPROVED)
    make_booking(db, m2, status=BookingStatus.REJECTED)
    make_booking(db, m2, date(2025, 8, 1), date(2025, 8, 1), BookingStatus.COMPLETED)

    top = dashboard_service.summary(db, now=NOW)["mostRentedMotorcycle"]
    assert top["id"] == m2.id
    assert top["name"] == "Beat"


def test_most_rented_tie_goes_to_lowest_id(db):
    m1 = make_motorcycle(db, name="Vario")
    m2 = make_motorcycle(db, name="Beat")
    make_booking(db, m2)
    make_booking(db, m1)

    assert dashboard_service.most_rented(db).id == m1.id


def test_dashboard_route_requires_admin(public_client):
    assert public_client.get("/api/v1/dashboard").status_code == 401


def test_dashboard_route(admin_client, db):
    m = make_motorcycle(db)
    make_booking(db, m)
    resp = admin_client.get("/api/v1/dashboard")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["activeBookings"] == 1
    assert data["mostRentedMotorcycle"]["id"] == m.id


def test_stale_pending_holds_are_not_active(db, monkeypatch):
    monkeypatch.setattr(settings, "PENDING_HOLD_HOURS", 24)
    m = make_motorcycle(db)
    make_booking(db, m, created_at=NOW - timedelta(days=3))
    make_booking(db, m, date(2025, 7, 1), date(2025, 7, 2), created_at=NOW - timedelta(hours=2))
    make_booking(db, m, date(2025, 8, 1), date(2025, 8, 2), BookingStatus.APPROVED,
                 created_at=NOW - timedelta(days=10))

    assert dashboard_service.summary(db, now=NOW)["activeBookings"] == 2
