"""Appointment slot availability.

The boutique takes appointments on a fixed half-hour grid. A slot is taken
by any appointment on the same calendar date with the same label unless that
appointment was cancelled.
"""
import datetime as dt
from typing import Iterable, List, Tuple

from lingam.app.schemas.appointments import Appointment, AppointmentStatus, to_calendar_date


def build_slot_template(
    open_time: str = "10:00",
    close_time: str = "18:00",
    slot_minutes: int = 30,
) -> Tuple[str, ...]:
    """
    Slot labels from open_time up to (not including) close_time.

    Args:
        open_time: First slot, "HH:MM"
        close_time: End of business, "HH:MM"
        slot_minutes: Grid step

    Returns:
        Ordered tuple of "HH:MM" labels
    """
    if slot_minutes <= 0:
        raise ValueError("slot_minutes must be positive")

    start = dt.datetime.strptime(open_time, "%H:%M")
    end = dt.datetime.strptime(close_time, "%H:%M")
    step = dt.timedelta(minutes=slot_minutes)

    labels = []
    current = start
    while current < end:
        labels.append(current.strftime("%H:%M"))
        current += step
    return tuple(labels)


# 10:00 .. 17:30
DEFAULT_SLOT_TEMPLATE = build_slot_template()


def booked_slots(appointments: Iterable[Appointment], day: dt.date) -> set[str]:
    """Labels held by non-cancelled appointments on day."""
    target = to_calendar_date(day)
    return {
        appt.time
        for appt in appointments
        if appt.date == target and appt.status != AppointmentStatus.CANCELLED
    }


def available_slots(
    appointments: Iterable[Appointment],
    day: dt.date,
    template: Tuple[str, ...] = DEFAULT_SLOT_TEMPLATE,
) -> List[str]:
    """Template slots still free on day, in template order."""
    taken = booked_slots(appointments, day)
    return [slot for slot in template if slot not in taken]
