"""Pytest fixtures — fresh stores and a planner session per test."""
from datetime import date, timedelta

import pytest

from decor_planner.config import Settings
from decor_planner.services.decor_store import DecorRecordStore
from decor_planner.services.event_store import EventRecordStore
from decor_planner.services.planner_session import PlannerSession
from decor_planner.services.validation import today_in


@pytest.fixture
def settings():
    """Settings isolated from any local .env file; past event dates allowed."""
    return Settings(_env_file=None, ALLOW_PAST_EVENT_DATES=True)


@pytest.fixture
def strict_settings():
    """Settings that reject event bookings dated before today."""
    return Settings(_env_file=None, ALLOW_PAST_EVENT_DATES=False, PLANNER_TIMEZONE="UTC")


@pytest.fixture
def decor_store():
    return DecorRecordStore()


@pytest.fixture
def event_store(settings):
    return EventRecordStore(settings)


@pytest.fixture
def session(settings):
    return PlannerSession(settings)


@pytest.fixture
def future_day():
    return today_in("UTC") + timedelta(days=30)


@pytest.fixture
def e1_fields():
    """The ballroom dinner decor line used throughout the tests (total 6900)."""
    return {
        "id": "E1",
        "date": date(2024, 6, 1),
        "hall": "Grand Ballroom",
        "timing": "Dinner",
        "decor_amount": 5000,
        "spotlight_amount": 1000,
        "cool_fire_amount": 200,
        "cool_fire_count": 3,
        "ice_pots_amount": 150,
        "ice_pots_count": 2,
    }


@pytest.fixture
def e2_fields():
    """A lunch decor line with flat charges only (total 3000)."""
    return {
        "id": "E2",
        "date": date(2024, 7, 15),
        "hall": "Garden Pavilion",
        "timing": "Lunch",
        "decor_amount": 2000,
        "spotlight_amount": 1000,
        "cool_fire_amount": 0,
        "cool_fire_count": 0,
        "ice_pots_amount": 0,
        "ice_pots_count": 0,
        "comment": "Pastel florals",
    }


@pytest.fixture
def booking_fields(future_day):
    return {
        "id": "E1",
        "date": future_day,
        "client_name": "Asha Verma",
        "hall_name": "Grand Ballroom",
        "event_type": "Wedding",
        "time_slot": 1,
    }
