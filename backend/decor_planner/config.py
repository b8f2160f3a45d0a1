"""Planner configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Planner settings loaded from .env or environment."""

    PLANNER_TIMEZONE: str = "UTC"
    ALLOW_PAST_EVENT_DATES: bool = False
    HALLS: str = "Grand Ballroom,Garden Pavilion,Rooftop Terrace"
    EVENT_TYPES: str = "Wedding,Birthday,Corporate,Anniversary,Graduation"
    REQUIRE_EVENT_FOR_DECOR: bool = False

    class Config:
        env_file = ".env"

    def hall_list(self) -> list[str]:
        return [x.strip() for x in self.HALLS.split(",") if x.strip()]

    def event_type_list(self) -> list[str]:
        return [x.strip() for x in self.EVENT_TYPES.split(",") if x.strip()]


settings = Settings()
