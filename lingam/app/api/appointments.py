"""
Appointment booking API.

Booking and slot lookup are public (storefront); listing, status changes and
deletion belong to the back office.
"""
import datetime as dt
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, Security, status

from lingam.app.api.deps import get_appointment_service
from lingam.app.core.security import APPOINTMENT_READ, APPOINTMENT_WRITE, User, get_current_user
from lingam.app.schemas.appointments import (
    Appointment,
    AppointmentCreate,
    AppointmentStatusUpdate,
    AvailableSlotsResponse,
)
from lingam.app.services.appointment_service import AppointmentService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=Appointment, status_code=201)
async def book_appointment(
    payload: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Book an appointment. It always starts as pending."""
    try:
        return await service.create(payload)
    except ValueError as e:
        logger.warning(f"Invalid booking request: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.get("/available-slots", response_model=AvailableSlotsResponse)
async def get_available_slots(
    date: dt.date = Query(..., description="Calendar date, YYYY-MM-DD"),
    service: AppointmentService = Depends(get_appointment_service),
):
    slots = await service.available_time_slots(date)
    return AvailableSlotsResponse(date=date, slots=slots)


@router.get("/", response_model=List[Appointment])
async def list_appointments(
    service: AppointmentService = Depends(get_appointment_service),
    current_user: User = Security(get_current_user, scopes=[APPOINTMENT_READ]),
):
    return await service.get_all()


@router.get("/{appointment_id}", response_model=Appointment)
async def get_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
    current_user: User = Security(get_current_user, scopes=[APPOINTMENT_READ]),
):
    appointment = await service.get_by_id(appointment_id)
    if appointment is None:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


@router.patch("/{appointment_id}/status", response_model=Appointment)
async def update_appointment_status(
    appointment_id: str,
    payload: AppointmentStatusUpdate,
    service: AppointmentService = Depends(get_appointment_service),
    current_user: User = Security(get_current_user, scopes=[APPOINTMENT_WRITE]),
):
    appointment = await service.update_status(appointment_id, payload.status)
    if appointment is None:
        raise HTTPException(status_code=404, detail="Appointment not found")
    logger.info(f"{current_user.username} set appointment {appointment_id} to {payload.status.value}")
    return appointment


@router.delete("/{appointment_id}", status_code=204)
async def delete_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
    current_user: User = Security(get_current_user, scopes=[APPOINTMENT_WRITE]),
):
    if not await service.delete(appointment_id):
        raise HTTPException(status_code=404, detail="Appointment not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
