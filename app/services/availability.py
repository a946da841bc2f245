"""
Date-range overlap rules for motorcycle bookings.

Booking intervals are inclusive on both ends: a booking for 10–12 June
occupies the 10th, 11th and 12th. Two intervals overlap iff each one
starts no later than the other ends.
"""

import logging
from datetime import date
from typing import Iterable

from app.models.booking import Booking

logger = logging.getLogger(__name__)


def overlaps(candidate_start: date, candidate_end: date, existing_start: date, existing_end: date) -> bool:
    return candidate_start <= existing_end and existing_start <= candidate_end


def has_conflict(
    vehicle_id: int,
    candidate_start: date,
    candidate_end: date,
    active_bookings: Iterable[Booking],
) -> bool:
    """
    True if any booking in ``active_bookings`` overlaps the candidate range.

    The caller passes only the active bookings of ``vehicle_id``; no status
    or vehicle filtering happens here.
    """
    for b in active_bookings:
        if overlaps(candidate_start, candidate_end, b.startDate, b.endDate):
            logger.debug(
                f"Motorcycle #{vehicle_id}: {candidate_start}..{candidate_end} "
                f"overlaps booking #{b.id} ({b.startDate}..{b.endDate})"
            )
            return True
    return False
