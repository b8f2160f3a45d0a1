"""Planner session — the event bookings and decor records of one sitting.

The session is the single owner of both stores. Decor records share
their id with the event they decorate; cancelling an event removes its
decor line as well.
"""
import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

from decor_planner.config import Settings, settings as default_settings
from decor_planner.errors import UnknownEventError
from decor_planner.models.decor_record import DecorRecord
from decor_planner.models.event_record import EventRecord
from decor_planner.models.timing import Timing
from decor_planner.services.decor_store import DecorRecordStore
from decor_planner.services.event_store import EventRecordStore

logger = logging.getLogger(__name__)


class PlannerSession:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings
        self.events = EventRecordStore(self.settings)
        self.decor = DecorRecordStore()

    # -- events --------------------------------------------------------------
    def book_event(self, fields: Mapping[str, Any]) -> EventRecord:
        return self.events.create(fields)

    def reschedule_event(self, event_id: str, fields: Mapping[str, Any]) -> EventRecord:
        return self.events.update(event_id, fields)

    def cancel_event(self, event_id: str) -> bool:
        """Drop the booking and any decor recorded against it."""
        removed = self.events.delete(event_id)
        if self.decor.delete(event_id):
            logger.info("Removed decor for cancelled event %s", event_id)
        return removed

    # -- decor ---------------------------------------------------------------
    def add_decor(self, fields: Mapping[str, Any]) -> DecorRecord:
        if self.settings.REQUIRE_EVENT_FOR_DECOR:
            record_id = fields.get("id")
            key = record_id.strip() if isinstance(record_id, str) else record_id
            # Blank ids fall through to the store's own "Required" error.
            if key and key not in self.events:
                exc = UnknownEventError(key)
                logger.warning("Rejected decor create: %s", exc)
                raise exc
        return self.decor.create(fields)

    def revise_decor(self, record_id: str, fields: Mapping[str, Any]) -> DecorRecord:
        return self.decor.update(record_id, fields)

    def remove_decor(self, record_id: str) -> bool:
        return self.decor.delete(record_id)

    def decor_for_event(self, event_id: str) -> Optional[DecorRecord]:
        if event_id not in self.decor:
            return None
        return self.decor.get(event_id)

    # -- lookups -------------------------------------------------------------
    def search(self, query: str) -> dict[str, list]:
        return {
            "events": self.events.search(query),
            "decor": self.decor.search(query),
        }

    def hall_options(self) -> list[str]:
        return self.settings.hall_list()

    def event_type_options(self) -> list[str]:
        return self.settings.event_type_list()

    def timing_options(self) -> list[str]:
        return [t.value for t in Timing]

    def summary(self) -> dict[str, Any]:
        grand_total: Decimal = self.decor.grand_total()
        return {
            "event_count": len(self.events),
            "decor_count": len(self.decor),
            "grand_total": grand_total,
        }
