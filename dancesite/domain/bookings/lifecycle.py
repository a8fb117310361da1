"""
Booking lifecycle rules.

Status flow::

    Pending -> Confirmed -> Completed
       |           |
       +-----------+--> Cancelled

Cancelled and Completed are final: once reached, every change request is
refused, including one to the same status. Pending and Confirmed may be
"changed" to themselves, which is a no-op.

Everything here is pure so it can be checked without a database.
"""

from datetime import datetime
from typing import Optional

from ...errors import BusinessRuleError, ValidationError
from ...models import BookingStatus, utcnow

MAX_LOCATION_DETAILS_LENGTH = 200
MAX_MESSAGE_LENGTH = 500

LOCKED_STATUSES = frozenset({BookingStatus.CANCELLED, BookingStatus.COMPLETED})

ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.COMPLETED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.COMPLETED: frozenset(),
}


def can_transition(current: BookingStatus, requested: BookingStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS[current]


def validate_status_change(current: BookingStatus, requested: BookingStatus) -> None:
    """Raise BusinessRuleError unless ``current`` may move to ``requested``"""
    if current in LOCKED_STATUSES:
        raise BusinessRuleError(f"Cannot change status once the booking is '{current.value}'.")

    if not can_transition(current, requested):
        raise BusinessRuleError(
            f"Booking status change from '{current.value}' to '{requested.value}' is not allowed."
        )


def validate_preferred_date_time(value: datetime, now: Optional[datetime] = None) -> None:
    """The preferred time must lie strictly after ``now`` (naive UTC)"""
    now = now or utcnow()
    if value <= now:
        raise ValidationError("PreferredDateTime must be in the future.")


def validate_location_details(value: Optional[str]) -> None:
    if value is not None and len(value) > MAX_LOCATION_DETAILS_LENGTH:
        raise ValidationError(
            f"LocationDetails cannot exceed {MAX_LOCATION_DETAILS_LENGTH} characters."
        )


def validate_message(value: Optional[str]) -> None:
    if value is not None and len(value) > MAX_MESSAGE_LENGTH:
        raise ValidationError(f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters.")
