"""Meal-time slot shared by event bookings and decor records."""
import enum


class Timing(str, enum.Enum):
    lunch = "Lunch"
    dinner = "Dinner"

    @classmethod
    def from_slot(cls, slot: int) -> "Timing":
        """Map the booking form's slider position (0 = Lunch, 1 = Dinner)."""
        if isinstance(slot, bool) or slot not in (0, 1):
            raise ValueError(f"slot must be 0 or 1, got {slot!r}")
        return (cls.lunch, cls.dinner)[slot]
