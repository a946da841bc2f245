import logging
from decimal import Decimal
from urllib.parse import quote

from app.config import settings
from app.models.booking import Booking
from app.services.pricing import rental_days

logger = logging.getLogger(__name__)

WA_BASE_URL = "https://wa.me"


def format_rupiah(amount: Decimal | float | int) -> str:
    """120000 -> 'Rp 120.000'"""
    return "Rp " + f"{int(round(amount)):,}".replace(",", ".")


def booking_message(b: Booking) -> str:
    m = b.motorcycle
    days = rental_days(b.startDate, b.endDate)
    return (
        "Halo Jogja Rentalan!\n\n"
        "Saya ingin konfirmasi reservasi:\n\n"
        "*Detail Booking*\n"
        f"No. Booking: #{b.id}\n"
        f"Nama: {b.customerName}\n"
        f"No. HP: {b.customerPhone}\n"
        f"Alamat: {b.customerAddress}\n\n"
        f"*Motor*: {m.brand} {m.name}\n"
        f"*Tanggal*: {b.startDate.isoformat()} s/d {b.endDate.isoformat()}\n"
        f"*Durasi*: {days} hari\n"
        f"*Total*: {format_rupiah(b.totalPrice)}\n\n"
        "Mohon konfirmasi ketersediaan. Terima kasih!"
    )


def build_booking_link(b: Booking, phone: str | None = None) -> str | None:
    """
    Pre-filled WhatsApp chat link the customer opens to confirm a booking
    with the rental admin. Returns None when no admin number is configured.
    """
    number = phone or settings.WHATSAPP_NUMBER
    if not number:
        return None
    digits = "".join(ch for ch in number if ch.isdigit())
    url = f"{WA_BASE_URL}/{digits}?text={quote(booking_message(b), safe='')}"
    logger.info(f"[WHATSAPP] Booking#{b.id} confirmation link built for {digits}")
    return url
