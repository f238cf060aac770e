"""Construction of the back-office services for one storage backend."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lingam.app.core.config import Settings
from lingam.app.schemas.appointments import Appointment
from lingam.app.schemas.customers import Customer
from lingam.app.schemas.testimonials import Testimonial
from lingam.app.services.appointment_service import AppointmentService
from lingam.app.services.availability import build_slot_template
from lingam.app.services.customer_service import CustomerService
from lingam.app.services.entity_store import EntityStore
from lingam.app.services.storage import KeyValueStorage
from lingam.app.services.store_info_service import StoreInfoService
from lingam.app.services.testimonial_service import TestimonialService


@dataclass
class ServiceRegistry:
    appointments: AppointmentService
    customers: CustomerService
    testimonials: TestimonialService
    store_info: StoreInfoService
    storage: KeyValueStorage


async def build_services(
    session_maker: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> ServiceRegistry:
    """Create the stores, load every collection and wire the services."""
    storage = KeyValueStorage(session_maker)
    prefix = settings.storage_key_prefix

    appointment_store = EntityStore(storage, f"{prefix}-appointments", Appointment)
    customer_store = EntityStore(storage, f"{prefix}-customers", Customer)
    testimonial_store = EntityStore(storage, f"{prefix}-testimonials", Testimonial)
    for store in (appointment_store, customer_store, testimonial_store):
        await store.load()

    template = build_slot_template(
        settings.business_open_time,
        settings.business_close_time,
        settings.slot_duration_minutes,
    )

    return ServiceRegistry(
        appointments=AppointmentService(appointment_store, slot_template=template),
        customers=CustomerService(customer_store),
        testimonials=TestimonialService(testimonial_store),
        store_info=StoreInfoService(storage, f"{prefix}-store-settings"),
        storage=storage,
    )
