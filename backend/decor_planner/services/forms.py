"""Turn raw form submissions (strings from input boxes) into typed fields.

Parsing only converts types. The stores still apply every field rule, so
a parsed form can still be rejected on create or update.
"""
import logging
from typing import Any, Mapping

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from decor_planner.errors import FieldError, ValidationError
from decor_planner.schemas.decor import DecorForm
from decor_planner.schemas.event import EventForm

logger = logging.getLogger(__name__)


def _parse(schema: type[BaseModel], raw: Mapping[str, Any]) -> dict[str, Any]:
    try:
        form = schema.model_validate(dict(raw))
    except PydanticValidationError as exc:
        errors = [
            FieldError(str(err["loc"][0]) if err["loc"] else "__root__", err["msg"])
            for err in exc.errors()
        ]
        logger.debug("Form %s failed to parse: %s", schema.__name__, errors)
        raise ValidationError(errors) from exc
    return form.model_dump()


def parse_decor_form(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Parse a decor form into fields accepted by DecorRecordStore."""
    return _parse(DecorForm, raw)


def parse_event_form(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Parse an event booking form into fields accepted by EventRecordStore."""
    return _parse(EventForm, raw)
