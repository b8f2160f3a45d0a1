"""Decoration cost records and their totals."""
import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

from decor_planner.models.decor_record import DecorRecord
from decor_planner.services.record_store import RecordStore
from decor_planner.services.validation import clean_decor_fields, to_amount, to_count

logger = logging.getLogger(__name__)


def compute_total(
    decor_amount: Any,
    spotlight_amount: Any,
    cool_fire_amount: Any,
    cool_fire_count: Any,
    ice_pots_amount: Any,
    ice_pots_count: Any,
) -> Decimal:
    """Flat decor and spotlight charges plus per-unit cool fire and ice pot lines.

    A zero count zeroes its line regardless of the unit amount.
    """
    return (
        to_amount(decor_amount)
        + to_amount(spotlight_amount)
        + to_amount(cool_fire_amount) * to_count(cool_fire_count)
        + to_amount(ice_pots_amount) * to_count(ice_pots_count)
    )


class DecorRecordStore(RecordStore[DecorRecord]):
    """Session-scoped decor records, kept in the order they were added."""

    kind = "decor"
    compute_total = staticmethod(compute_total)

    def _clean(self, fields: Mapping[str, Any], existing: Optional[DecorRecord] = None) -> dict[str, Any]:
        return clean_decor_fields(fields)

    def _build(self, cleaned: dict[str, Any]) -> DecorRecord:
        total = compute_total(
            cleaned["decor_amount"],
            cleaned["spotlight_amount"],
            cleaned["cool_fire_amount"],
            cleaned["cool_fire_count"],
            cleaned["ice_pots_amount"],
            cleaned["ice_pots_count"],
        )
        return DecorRecord(total_amount=total, **cleaned)

    def _describe(self, record: DecorRecord) -> str:
        return f"{record.id} (total {record.total_amount})"

    def grand_total(self) -> Decimal:
        """Sum of total_amount over every record currently held."""
        with self._lock:
            return sum((r.total_amount for r in self._records.values()), Decimal("0"))
