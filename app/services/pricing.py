from datetime import date
from decimal import Decimal

from app.utils.exceptions import InvalidDateRangeException


def rental_days(start_date: date, end_date: date) -> int:
    """Billable days: pickup and return day both count, so same-day is 1."""
    if end_date < start_date:
        raise InvalidDateRangeException()
    return (end_date - start_date).days + 1


def compute_total(start_date: date, end_date: date, price_per_day: Decimal) -> Decimal:
    # price_per_day is validated upstream; a negative rate is passed through as-is
    return rental_days(start_date, end_date) * price_per_day
