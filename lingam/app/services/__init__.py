"""Services package."""

from lingam.app.services.appointment_service import AppointmentService
from lingam.app.services.customer_service import CustomerService
from lingam.app.services.entity_store import EntityStore
from lingam.app.services.registry import ServiceRegistry, build_services
from lingam.app.services.storage import KeyValueStorage
from lingam.app.services.store_info_service import StoreInfoService
from lingam.app.services.testimonial_service import TestimonialService

__all__ = [
    "AppointmentService",
    "CustomerService",
    "EntityStore",
    "KeyValueStorage",
    "ServiceRegistry",
    "StoreInfoService",
    "TestimonialService",
    "build_services",
]
