"""Input normalisation shared by the form schemas."""
from typing import Any

from decor_planner.services.validation import to_timing


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def coerce_timing(value: Any) -> Any:
    """Accept "Lunch"/"dinner" or the slider positions "0"/"1"; leave anything else for pydantic to reject."""
    if isinstance(value, str) and value.strip() in ("0", "1"):
        value = int(value.strip())
    try:
        return to_timing(value)
    except ValueError:
        return value
