"""Shared validation utilities"""

import re
from datetime import datetime, timezone
from typing import Optional

PHONE_ALLOWED_PATTERN = re.compile(r"^\+?[0-9\s\-()]+$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate a phone number and collapse its whitespace.

    Clients are mostly Swedish but organizers book from abroad, so any
    international format is accepted as long as it carries 6-15 digits.

    Args:
        phone: Phone number string in various formats

    Returns:
        Phone number with surrounding whitespace stripped, or None when empty

    Raises:
        ValueError: If phone number is invalid
    """
    if phone is None:
        return None

    phone = " ".join(phone.split())
    if not phone:
        return None

    if not PHONE_ALLOWED_PATTERN.match(phone):
        raise ValueError("Phone number may only contain digits, spaces, '+', '-' and parentheses")

    digits = re.sub(r"\D", "", phone)
    if not 6 <= len(digits) <= 15:
        raise ValueError("Phone number must contain between 6 and 15 digits")

    return phone


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    if not EMAIL_PATTERN.match(email):
        raise ValueError("Invalid email format")

    return email


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive input is assumed to be UTC already"""
    if value is None or value.tzinfo is None:
        return value
    try:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    except OverflowError:
        # e.g. 9999-12-31T23:00:00-05:00 lies past datetime.max in UTC
        raise ValueError(f"Date {value.isoformat()} is out of range")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Mark a stored (naive UTC) datetime as UTC for serialization"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
