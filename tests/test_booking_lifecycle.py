from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from app.config import settings
from app.models.booking import BookingStatus
from app.services import booking_lifecycle as lifecycle
from app.utils.exceptions import InvalidStatusException, InvalidTransitionException

P, A, R, C, E = (
    BookingStatus.PENDING,
    BookingStatus.APPROVED,
    BookingStatus.REJECTED,
    BookingStatus.COMPLETED,
    BookingStatus.EXPIRED,
)

ALLOWED = {(P, A), (P, R), (A, C)}


class TestTransitions:
    @pytest.mark.parametrize("current", list(BookingStatus))
    @pytest.mark.parametrize("target", list(lifecycle.ADMIN_STATUSES))
    def test_only_table_edges_are_allowed(self, current, target):
        if (current, target) in ALLOWED:
            lifecycle.validate_transition(current, target)
        else:
            with pytest.raises(InvalidTransitionException):
                lifecycle.validate_transition(current, target)

    @pytest.mark.parametrize("status", [P, A, R, C])
    def test_no_self_loops(self, status):
        with pytest.raises(InvalidTransitionException):
            lifecycle.validate_transition(status, status)

    def test_error_lists_allowed_targets(self):
        with pytest.raises(InvalidTransitionException) as exc:
            lifecycle.validate_transition(P, C)
        assert exc.value.detail["message"] == (
            "Cannot change status from 'Pending' to 'Completed'. Allowed: Approved, Rejected"
        )

    def test_terminal_error_mentions_none(self):
        with pytest.raises(InvalidTransitionException) as exc:
            lifecycle.validate_transition(C, A)
        assert exc.value.detail["message"].endswith("Allowed: none")


class TestParseStatus:
    @pytest.mark.parametrize("value", ["Pending", "Approved", "Rejected", "Completed"])
    def test_literal_values_accepted(self, value):
        assert lifecycle.parse_status(value).value == value

    @pytest.mark.parametrize("value", ["pending", "APPROVED", "Expired", "Cancelled", ""])
    def test_anything_else_is_invalid_status(self, value):
        with pytest.raises(InvalidStatusException) as exc:
            lifecycle.parse_status(value)
        assert exc.value.error_code == "INVALID_STATUS"

    @pytest.mark.parametrize("value", [5, None, 1.5, ["Pending"]])
    def test_non_string_values_are_invalid_status(self, value):
        with pytest.raises(InvalidStatusException):
            lifecycle.parse_status(value)

    def test_coerce_status_accepts_expired_for_filters(self):
        assert lifecycle.coerce_status("Expired") is E


class TestActiveSet:
    def test_pending_and_approved_are_active(self):
        assert lifecycle.ACTIVE_STATUSES == {P, A}

    @pytest.mark.parametrize("status", [R, C, E])
    def test_terminal_statuses_do_not_block(self, status):
        assert lifecycle.is_active(status) is False


class TestHoldExpiry:
    NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)

    def _booking(self, status, hours_old, naive=False):
        created = self.NOW - timedelta(hours=hours_old)
        if naive:
            created = created.replace(tzinfo=None)
        return SimpleNamespace(status=status, createdAt=created)

    def test_disabled_by_default(self):
        assert settings.PENDING_HOLD_HOURS is None
        assert lifecycle.hold_cutoff(self.NOW) is None
        assert lifecycle.effective_status(self._booking(P, 10_000), self.NOW) is P

    def test_stale_pending_reads_as_expired(self, monkeypatch):
        monkeypatch.setattr(settings, "PENDING_HOLD_HOURS", 24)
        assert lifecycle.effective_status(self._booking(P, 25), self.NOW) is E
        assert lifecycle.effective_status(self._booking(P, 23), self.NOW) is P

    def test_naive_timestamps_are_treated_as_utc(self, monkeypatch):
        monkeypatch.setattr(settings, "PENDING_HOLD_HOURS", 24)
        assert lifecycle.is_hold_expired(self._booking(P, 30, naive=True), self.NOW) is True

    def test_only_pending_expires(self, monkeypatch):
        monkeypatch.setattr(settings, "PENDING_HOLD_HOURS", 24)
        assert lifecycle.effective_status(self._booking(A, 500), self.NOW) is A
