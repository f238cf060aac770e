"""
Appointment booking schemas and enums.

Appointments are stored by calendar date and slot label ("10:30"); the
status field is a permissive state machine (any status may follow any other).
"""
import datetime as dt
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppointmentStatus(str, Enum):
    PENDING = "pending"        # initial state, always set on creation
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"    # kept in storage, frees its slot


class AppointmentPurpose(str, Enum):
    GENERAL_VIEWING = "general-viewing"
    SPECIFIC_ITEM = "specific-item"
    CUSTOM_ORDER = "custom-order"


SLOT_LABEL_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def to_calendar_date(value: dt.date) -> dt.date:
    """Reduce a date or datetime to its calendar date (aware datetimes in UTC)."""
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt.timezone.utc)
        return value.date()
    return value


class AppointmentCreate(BaseModel):
    """Booking request submitted by a customer. Any status field is ignored."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    date: dt.date
    time: str = Field(..., pattern=SLOT_LABEL_PATTERN)
    purpose: AppointmentPurpose
    message: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        # Full timestamps ("2025-06-01T00:00:00.000Z") are accepted and truncated
        if isinstance(value, dt.datetime):
            return to_calendar_date(value)
        if isinstance(value, str) and "T" in value:
            return to_calendar_date(dt.datetime.fromisoformat(value.replace("Z", "+00:00")))
        return value


class Appointment(AppointmentCreate):
    model_config = ConfigDict(frozen=True)

    id: str
    status: AppointmentStatus = AppointmentStatus.PENDING
    created_at: dt.datetime


class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


class AvailableSlotsResponse(BaseModel):
    date: dt.date
    slots: List[str]
