"""Event bookings: client, hall, type, and slot for one date."""
from datetime import date
from typing import Any, Mapping, Optional

from decor_planner.config import Settings, settings as default_settings
from decor_planner.models.event_record import EventRecord
from decor_planner.services.record_store import RecordStore
from decor_planner.services.validation import clean_event_fields, to_date, today_in


def _same_day(value: Any, day: date) -> bool:
    try:
        return to_date(value) == day
    except TypeError:
        return False


class EventRecordStore(RecordStore[EventRecord]):
    """Session-scoped event bookings, kept in the order they were made."""

    kind = "event"

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self._settings = settings or default_settings

    def _clean(self, fields: Mapping[str, Any], existing: Optional[EventRecord] = None) -> dict[str, Any]:
        earliest = None
        if not self._settings.ALLOW_PAST_EVENT_DATES:
            earliest = today_in(self._settings.PLANNER_TIMEZONE)
            # A booking whose date has passed stays editable while its date is unchanged.
            if existing is not None and _same_day(fields.get("date"), existing.date):
                earliest = None
        return clean_event_fields(fields, earliest=earliest)

    def _build(self, cleaned: dict[str, Any]) -> EventRecord:
        return EventRecord(**cleaned)
