"""
Appointment Lifecycle Service.

Customers book appointments (always created as pending); the back office
changes their status or deletes them. Status changes are unrestricted: any
status may follow any other, and cancelled appointments stay in storage until
deleted. Unknown ids are reported as None/False rather than raised.
"""
import datetime as dt
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from lingam.app.schemas.appointments import (
    Appointment,
    AppointmentCreate,
    AppointmentStatus,
)
from lingam.app.services.availability import DEFAULT_SLOT_TEMPLATE, available_slots
from lingam.app.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


class AppointmentService:
    """Appointment operations over an injected EntityStore."""

    def __init__(
        self,
        store: EntityStore[Appointment],
        slot_template: Tuple[str, ...] = DEFAULT_SLOT_TEMPLATE,
    ):
        self.store = store
        self.slot_template = slot_template

    async def create(self, payload: AppointmentCreate) -> Appointment:
        """Book a slot. Raises ValueError if the time is not on the slot grid."""
        if payload.time not in self.slot_template:
            raise ValueError(f"{payload.time} is not a bookable slot")
        appointment = Appointment(
            **payload.model_dump(),
            id=self.store.next_id(),
            status=AppointmentStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
        await self.store.add(appointment)
        logger.info(
            f"Appointment booked: {appointment.id} on {appointment.date} at {appointment.time}",
            extra={"extra_data": {"appointment_id": appointment.id, "purpose": appointment.purpose.value}},
        )
        return appointment

    async def get_all(self) -> List[Appointment]:
        return self.store.all()

    async def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        return self.store.find(appointment_id)

    async def update_status(
        self,
        appointment_id: str,
        status: AppointmentStatus,
    ) -> Optional[Appointment]:
        """Set a new status. Returns None if the appointment does not exist."""
        updated = await self.store.update(
            appointment_id,
            lambda appt: appt.model_copy(update={"status": status}),
        )
        if updated is None:
            logger.warning(f"Status update for unknown appointment {appointment_id}")
        else:
            logger.info(f"Appointment {appointment_id} -> {status.value}")
        return updated

    async def delete(self, appointment_id: str) -> bool:
        removed = await self.store.remove(appointment_id)
        if removed:
            logger.info(f"Appointment deleted: {appointment_id}")
        return removed

    async def available_time_slots(self, day: dt.date) -> List[str]:
        return available_slots(self.store.all(), day, self.slot_template)
