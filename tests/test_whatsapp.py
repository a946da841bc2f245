from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from urllib.parse import unquote

from app.config import settings
from app.utils.whatsapp import build_booking_link, format_rupiah


def _booking():
    motorcycle = SimpleNamespace(brand="Honda", name="Vario 160")
    return SimpleNamespace(
        id=7,
        motorcycle=motorcycle,
        customerName="Siti Aminah",
        customerPhone="08129876543",
        customerAddress="Jl. Kaliurang KM 5",
        startDate=date(2025, 6, 13),
        endDate=date(2025, 6, 15),
        totalPrice=Decimal("300000"),
    )


def test_format_rupiah():
    assert format_rupiah(Decimal("1250000")) == "Rp 1.250.000"
    assert format_rupiah(0) == "Rp 0"


def test_link_uses_configured_number():
    url = build_booking_link(_booking())
    assert url.startswith("https://wa.me/6281234567890?text=")


def test_message_is_url_encoded():
    url = build_booking_link(_booking())
    text = url.split("?text=", 1)[1]
    assert " " not in text and "\n" not in text
    decoded = unquote(text)
    assert "No. Booking: #7" in decoded
    assert "Honda Vario 160" in decoded
    assert "*Durasi*: 3 hari" in decoded
    assert "Rp 300.000" in decoded


def test_explicit_number_is_normalised():
    url = build_booking_link(_booking(), phone="+62 812-0000-1111")
    assert url.startswith("https://wa.me/6281200001111?text=")


def test_no_number_configured(monkeypatch):
    monkeypatch.setattr(settings, "WHATSAPP_NUMBER", None)
    assert build_booking_link(_booking()) is None
