from decor_planner.schemas.decor import DecorForm, DecorOut
from decor_planner.schemas.event import EventForm, EventOut

__all__ = ["DecorForm", "DecorOut", "EventForm", "EventOut"]
