"""Validation of passenger input and ticket identifier generation."""

from __future__ import annotations

import random
import string
import time

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 50
PHONE_LENGTH = 9
PHONE_PREFIX = "9"

_NAME_CHARS = frozenset(string.ascii_letters + " ")
_DIGITS = frozenset(string.digits)


def age_validate(age: int) -> bool:
    """Return True for ages strictly between 10 and 90."""
    return 10 < age < 90


def name_validate(name: str) -> bool:
    """Return True for 2-50 characters made of ASCII letters and spaces."""
    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        return False
    return all(c in _NAME_CHARS for c in name)


def phone_no_validate(phone_no: str) -> bool:
    """Return True for a 9-digit local number that starts with 9."""
    if len(phone_no) != PHONE_LENGTH or not phone_no.startswith(PHONE_PREFIX):
        return False
    return all(c in _DIGITS for c in phone_no)


def gender_validate(gender: str) -> bool:
    """Return True for 'm' or 'f', in either case."""
    return gender.lower() in ("m", "f")


def generate_ticket_id(now: float | None = None) -> str:
    """Build a ticket id from a timestamp followed by a random 0-9999 suffix.

    The random part is seeded from the timestamp, so the same second always
    yields the same identifier.
    """
    stamp = int(time.time() if now is None else now)
    suffix = random.Random(stamp).randrange(10000)
    return f"{stamp}{suffix}"