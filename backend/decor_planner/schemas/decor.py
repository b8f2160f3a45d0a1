"""Pydantic schemas for decor form submissions and snapshots."""
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from decor_planner.models.timing import Timing
from decor_planner.schemas.common import blank_to_none, coerce_timing


class DecorForm(BaseModel):
    """Raw decor form input; blank amount and count boxes mean zero."""

    model_config = {"str_strip_whitespace": True}

    id: str
    date: date
    hall: str
    timing: Timing
    decor_amount: Decimal = Decimal("0")
    spotlight_amount: Decimal = Decimal("0")
    cool_fire_amount: Decimal = Decimal("0")
    cool_fire_count: int = 0
    ice_pots_amount: Decimal = Decimal("0")
    ice_pots_count: int = 0
    comment: Optional[str] = None

    @field_validator(
        "decor_amount", "spotlight_amount", "cool_fire_amount",
        "cool_fire_count", "ice_pots_amount", "ice_pots_count",
        mode="before",
    )
    @classmethod
    def _blank_is_zero(cls, value: Any) -> Any:
        return 0 if blank_to_none(value) is None else value

    @field_validator("timing", mode="before")
    @classmethod
    def _timing(cls, value: Any) -> Any:
        return coerce_timing(value)

    @field_validator("comment", mode="before")
    @classmethod
    def _comment(cls, value: Any) -> Any:
        return blank_to_none(value)


class DecorOut(BaseModel):
    id: str
    date: date
    hall: str
    timing: Timing
    decor_amount: Decimal
    spotlight_amount: Decimal
    cool_fire_amount: Decimal
    cool_fire_count: int
    ice_pots_amount: Decimal
    ice_pots_count: int
    total_amount: Decimal
    comment: Optional[str] = None

    model_config = {"from_attributes": True}
