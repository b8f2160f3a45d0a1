"""Tests for the planner session tying bookings to their decor lines."""
from decimal import Decimal

import pytest

from decor_planner.config import Settings
from decor_planner.errors import ErrorCode, UnknownEventError, ValidationError
from decor_planner.services.planner_session import PlannerSession


class TestPlannerSession:
    def test_cancel_event_removes_decor(self, session, booking_fields, e1_fields):
        session.book_event(booking_fields)
        session.add_decor(e1_fields)
        assert session.cancel_event("E1") is True
        assert len(session.events) == 0
        assert session.decor_for_event("E1") is None

    def test_cancel_unknown_event(self, session):
        assert session.cancel_event("missing") is False

    def test_reschedule(self, session, booking_fields):
        session.book_event(booking_fields)
        record = session.reschedule_event("E1", {**booking_fields, "event_type": "Anniversary"})
        assert record.event_type == "Anniversary"

    def test_revise_and_remove_decor(self, session, e1_fields):
        session.add_decor(e1_fields)
        revised = session.revise_decor("E1", {**e1_fields, "ice_pots_count": 0})
        assert revised.total_amount == Decimal("6600")
        assert session.decor_for_event("E1") == revised
        assert session.remove_decor("E1") is True
        assert session.remove_decor("E1") is False

    def test_search_both_stores(self, session, booking_fields, e1_fields, e2_fields):
        session.book_event(booking_fields)
        session.add_decor(e1_fields)
        session.add_decor(e2_fields)
        results = session.search("e1")
        assert [r.id for r in results["events"]] == ["E1"]
        assert [r.id for r in results["decor"]] == ["E1"]
        assert session.search("") == {"events": [], "decor": []}

    def test_summary(self, session, booking_fields, e1_fields, e2_fields):
        session.book_event(booking_fields)
        session.add_decor(e1_fields)
        session.add_decor(e2_fields)
        assert session.summary() == {
            "event_count": 1,
            "decor_count": 2,
            "grand_total": Decimal("9900"),
        }

    def test_form_options(self, session):
        assert session.hall_options() == ["Grand Ballroom", "Garden Pavilion", "Rooftop Terrace"]
        assert "Wedding" in session.event_type_options()
        assert session.timing_options() == ["Lunch", "Dinner"]


class TestDecorRequiresBooking:
    """REQUIRE_EVENT_FOR_DECOR links decor ids to booked events."""

    @pytest.fixture
    def linked(self):
        return PlannerSession(Settings(_env_file=None, ALLOW_PAST_EVENT_DATES=True, REQUIRE_EVENT_FOR_DECOR=True))

    def test_unbooked_id_rejected(self, linked, e1_fields):
        with pytest.raises(UnknownEventError) as exc:
            linked.add_decor(e1_fields)
        assert exc.value.code is ErrorCode.EVENT_NOT_BOOKED
        assert isinstance(exc.value, ValidationError)
        assert len(linked.decor) == 0

    def test_booked_id_accepted(self, linked, booking_fields, e1_fields):
        linked.book_event(booking_fields)
        assert linked.add_decor(e1_fields).id == "E1"

    def test_blank_id_is_plain_validation_error(self, linked, e1_fields):
        with pytest.raises(ValidationError) as exc:
            linked.add_decor({**e1_fields, "id": ""})
        assert exc.value.code is ErrorCode.VALIDATION_FAILED
