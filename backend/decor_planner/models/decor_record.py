"""Decor record — one decoration line-item for an event/hall/date/timing."""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from decor_planner.models.timing import Timing


@dataclass(frozen=True)
class DecorRecord:
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
