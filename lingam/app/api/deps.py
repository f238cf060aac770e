"""FastAPI dependencies resolving the services built at startup."""

from fastapi import Depends, Request

from lingam.app.services import (
    AppointmentService,
    CustomerService,
    ServiceRegistry,
    StoreInfoService,
    TestimonialService,
)


def get_services(request: Request) -> ServiceRegistry:
    return request.app.state.services


def get_appointment_service(services: ServiceRegistry = Depends(get_services)) -> AppointmentService:
    return services.appointments


def get_customer_service(services: ServiceRegistry = Depends(get_services)) -> CustomerService:
    return services.customers


def get_testimonial_service(services: ServiceRegistry = Depends(get_services)) -> TestimonialService:
    return services.testimonials


def get_store_info_service(services: ServiceRegistry = Depends(get_services)) -> StoreInfoService:
    return services.store_info
