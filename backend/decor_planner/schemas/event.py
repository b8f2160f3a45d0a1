"""Pydantic schemas for event booking forms."""
from datetime import date
from typing import Any

from pydantic import BaseModel, field_validator

from decor_planner.models.timing import Timing
from decor_planner.schemas.common import coerce_timing


class EventForm(BaseModel):
    model_config = {"str_strip_whitespace": True}

    id: str
    date: date
    client_name: str
    hall_name: str
    event_type: str
    time_slot: Timing = Timing.lunch

    @field_validator("time_slot", mode="before")
    @classmethod
    def _slot(cls, value: Any) -> Any:
        return coerce_timing(value)


class EventOut(BaseModel):
    id: str
    date: date
    client_name: str
    hall_name: str
    event_type: str
    time_slot: Timing

    model_config = {"from_attributes": True}
