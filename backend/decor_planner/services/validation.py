"""Field rules for decor and event submissions.

Each rule is a pure predicate returning a FieldError or None. The
``clean_*`` helpers run every rule for a record type, raise one
ValidationError listing all violations, and otherwise return the
submission coerced to the record's field types.
"""
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

import pytz

from decor_planner.errors import FieldError, ValidationError
from decor_planner.models.timing import Timing

logger = logging.getLogger(__name__)

DECOR_AMOUNT_FIELDS = ("decor_amount", "spotlight_amount", "cool_fire_amount", "ice_pots_amount")
DECOR_COUNT_FIELDS = ("cool_fire_count", "ice_pots_count")
DECOR_FIELDS = ("id", "date", "hall", "timing", *DECOR_AMOUNT_FIELDS, *DECOR_COUNT_FIELDS, "comment")
EVENT_FIELDS = ("id", "date", "client_name", "hall_name", "event_type", "time_slot")


def today_in(tz_name: str) -> date:
    """Current calendar date in the given pytz timezone."""
    return datetime.now(pytz.timezone(tz_name)).date()


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------
def to_amount(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("booleans are not amounts")
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        raise ValueError("amount must be finite")
    return amount


def to_count(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not counts")
    if isinstance(value, int):
        return value
    number = Decimal(str(value))
    if not number.is_finite() or number != number.to_integral_value():
        raise ValueError("count must be a whole number")
    return int(number)


def to_timing(value: Any) -> Timing:
    if isinstance(value, Timing):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value not in (0, 1):
            raise ValueError("slot must be 0 or 1")
        return Timing.from_slot(value)
    if isinstance(value, str):
        wanted = value.strip().lower()
        for timing in Timing:
            if wanted in (timing.value.lower(), timing.name):
                return timing
    raise ValueError(f"unknown timing {value!r}")


def to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError("not a date")


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------
def require_text(field: str, value: Any) -> Optional[FieldError]:
    if not isinstance(value, str) or not value.strip():
        return FieldError(field, "Required")
    return None


def optional_text(field: str, value: Any) -> Optional[FieldError]:
    if value is not None and not isinstance(value, str):
        return FieldError(field, "Must be text")
    return None


def require_date(field: str, value: Any) -> Optional[FieldError]:
    if value is None:
        return FieldError(field, "Required")
    try:
        to_date(value)
    except TypeError:
        return FieldError(field, "Must be a calendar date")
    return None


def not_before(field: str, value: Any, earliest: date) -> Optional[FieldError]:
    """Only meaningful once require_date has passed for the same value."""
    try:
        day = to_date(value)
    except TypeError:
        return None
    if day < earliest:
        return FieldError(field, "Date cannot be in the past")
    return None


def require_timing(field: str, value: Any) -> Optional[FieldError]:
    if value is None:
        return FieldError(field, "Required")
    try:
        to_timing(value)
    except (IndexError, ValueError):
        return FieldError(field, "Must be Lunch or Dinner")
    return None


def non_negative_amount(field: str, value: Any) -> Optional[FieldError]:
    if value is None:
        return FieldError(field, "Required")
    try:
        amount = to_amount(value)
    except (TypeError, ValueError, ArithmeticError):
        return FieldError(field, "Must be a number")
    if amount < 0:
        return FieldError(field, "Must be zero or more")
    return None


def non_negative_count(field: str, value: Any) -> Optional[FieldError]:
    if value is None:
        return FieldError(field, "Required")
    try:
        count = to_count(value)
    except (TypeError, ValueError, ArithmeticError):
        return FieldError(field, "Must be a whole number")
    if count < 0:
        return FieldError(field, "Must be zero or more")
    return None


def unknown_fields(fields: Mapping[str, Any], allowed: Iterable[str]) -> list[FieldError]:
    errors = []
    for name in fields:
        if name == "total_amount":
            errors.append(FieldError(name, "Calculated from the amounts and counts; cannot be set"))
        elif name not in allowed:
            errors.append(FieldError(name, "Unknown field"))
    return errors


def _raise_if_any(errors: list[Optional[FieldError]]) -> None:
    found = [e for e in errors if e is not None]
    if found:
        logger.debug("Rejected submission: %s", found)
        raise ValidationError(found)


# ---------------------------------------------------------------------------
# Record-level cleaning
# ---------------------------------------------------------------------------
def clean_decor_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a full decor submission and return it with typed values."""
    errors: list[Optional[FieldError]] = [
        *unknown_fields(fields, DECOR_FIELDS),
        require_text("id", fields.get("id")),
        require_date("date", fields.get("date")),
        require_text("hall", fields.get("hall")),
        require_timing("timing", fields.get("timing")),
    ]
    errors += [non_negative_amount(name, fields.get(name)) for name in DECOR_AMOUNT_FIELDS]
    errors += [non_negative_count(name, fields.get(name)) for name in DECOR_COUNT_FIELDS]
    errors.append(optional_text("comment", fields.get("comment")))
    _raise_if_any(errors)

    cleaned: dict[str, Any] = {
        "id": fields["id"].strip(),
        "date": to_date(fields["date"]),
        "hall": fields["hall"].strip(),
        "timing": to_timing(fields["timing"]),
        "comment": fields.get("comment") or None,
    }
    for name in DECOR_AMOUNT_FIELDS:
        cleaned[name] = to_amount(fields[name])
    for name in DECOR_COUNT_FIELDS:
        cleaned[name] = to_count(fields[name])
    return cleaned


def clean_event_fields(fields: Mapping[str, Any], earliest: Optional[date] = None) -> dict[str, Any]:
    """Validate a full event booking; ``earliest`` rejects dates before it."""
    errors: list[Optional[FieldError]] = [
        *unknown_fields(fields, EVENT_FIELDS),
        require_text("id", fields.get("id")),
        require_date("date", fields.get("date")),
        require_text("client_name", fields.get("client_name")),
        require_text("hall_name", fields.get("hall_name")),
        require_text("event_type", fields.get("event_type")),
        require_timing("time_slot", fields.get("time_slot")),
    ]
    if earliest is not None and fields.get("date") is not None:
        errors.append(not_before("date", fields["date"], earliest))
    _raise_if_any(errors)

    return {
        "id": fields["id"].strip(),
        "date": to_date(fields["date"]),
        "client_name": fields["client_name"].strip(),
        "hall_name": fields["hall_name"].strip(),
        "event_type": fields["event_type"].strip(),
        "time_slot": to_timing(fields["time_slot"]),
    }
