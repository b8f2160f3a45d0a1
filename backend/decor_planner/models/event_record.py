"""Event booking — a client's reservation of a hall for one date and slot."""
from dataclasses import dataclass
from datetime import date

from decor_planner.models.timing import Timing


@dataclass(frozen=True)
class EventRecord:
    id: str
    date: date
    client_name: str
    hall_name: str
    event_type: str
    time_slot: Timing
