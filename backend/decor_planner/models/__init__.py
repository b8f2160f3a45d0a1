from decor_planner.models.decor_record import DecorRecord
from decor_planner.models.event_record import EventRecord
from decor_planner.models.timing import Timing

__all__ = ["DecorRecord", "EventRecord", "Timing"]
