"""Event booking and decoration cost tracking for a planner session."""
from decor_planner.errors import (
    DuplicateIdError,
    ErrorCode,
    FieldError,
    NotFoundError,
    PlannerError,
    UnknownEventError,
    ValidationError,
)
from decor_planner.models import DecorRecord, EventRecord, Timing
from decor_planner.services.decor_store import DecorRecordStore, compute_total
from decor_planner.services.event_store import EventRecordStore
from decor_planner.services.planner_session import PlannerSession

__all__ = [
    "DecorRecord",
    "DecorRecordStore",
    "DuplicateIdError",
    "ErrorCode",
    "EventRecord",
    "EventRecordStore",
    "FieldError",
    "NotFoundError",
    "PlannerError",
    "PlannerSession",
    "Timing",
    "UnknownEventError",
    "ValidationError",
    "compute_total",
]
