"""Ordered in-memory record collection shared by the decor and event stores.

Records live in an insertion-ordered dict keyed by id. Every public
operation runs under one re-entrant lock, so a store may be handed to
more than one caller without interleaving mutations.
"""
import logging
import threading
from typing import Any, Generic, Mapping, Optional, TypeVar

from decor_planner.errors import DuplicateIdError, FieldError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

R = TypeVar("R")


class RecordStore(Generic[R]):
    """Base store: subclasses supply ``_clean`` and ``_build``."""

    kind = "record"

    def __init__(self) -> None:
        self._records: dict[str, R] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    # -- hooks ---------------------------------------------------------------
    def _clean(self, fields: Mapping[str, Any], existing: Optional[R] = None) -> dict[str, Any]:
        """Validate a submission; ``existing`` is the stored record on update."""
        raise NotImplementedError

    def _build(self, cleaned: dict[str, Any]) -> R:
        raise NotImplementedError

    def _describe(self, record: R) -> str:
        return record.id

    # -- reads ---------------------------------------------------------------
    def get(self, record_id: str) -> R:
        with self._lock:
            record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(record_id)
        return record

    def records(self) -> tuple[R, ...]:
        """Snapshot of every record in insertion order."""
        with self._lock:
            return tuple(self._records.values())

    def search(self, query: str) -> list[R]:
        """Records whose id contains ``query`` (any case) or whose YYYY-MM-DD date contains it.

        An empty or whitespace-only query matches nothing.
        """
        if not query or not query.strip():
            return []
        needle = query.lower()
        with self._lock:
            matches = [
                r for r in self._records.values()
                if needle in r.id.lower() or query in r.date.isoformat()
            ]
            logger.debug("Search %r over %d %s records matched %d", query, len(self._records), self.kind, len(matches))
        return matches

    # -- writes --------------------------------------------------------------
    def create(self, fields: Mapping[str, Any]) -> R:
        """Validate and append a new record; the id must not be in use."""
        with self._lock:
            try:
                record = self._build(self._clean(fields))
            except ValidationError as exc:
                logger.warning("Rejected %s create: %s", self.kind, exc)
                raise
            if record.id in self._records:
                exc = DuplicateIdError(record.id)
                logger.warning("Rejected %s create: %s", self.kind, exc)
                raise exc
            self._records[record.id] = record
        logger.info("Created %s %s", self.kind, self._describe(record))
        return record

    def update(self, record_id: str, fields: Mapping[str, Any]) -> R:
        """Replace every field of an existing record, keeping its id and position."""
        with self._lock:
            if record_id not in self._records:
                exc = NotFoundError(record_id)
                logger.warning("Rejected %s update: %s", self.kind, exc)
                raise exc
            supplied = fields.get("id", record_id)
            if not isinstance(supplied, str) or supplied.strip() != record_id:
                exc = ValidationError([FieldError("id", "ID cannot be changed")])
                logger.warning("Rejected %s update of %s: %s", self.kind, record_id, exc)
                raise exc
            existing = self._records[record_id]
            try:
                record = self._build(self._clean({**fields, "id": record_id}, existing))
            except ValidationError as exc:
                logger.warning("Rejected %s update of %s: %s", self.kind, record_id, exc)
                raise
            # Reassigning an existing key keeps its insertion position.
            self._records[record_id] = record
        logger.info("Updated %s %s", self.kind, self._describe(record))
        return record

    def delete(self, record_id: str) -> bool:
        """Remove a record; returns False when the id was not present."""
        with self._lock:
            removed = self._records.pop(record_id, None) is not None
        if removed:
            logger.info("Deleted %s %s", self.kind, record_id)
        return removed
