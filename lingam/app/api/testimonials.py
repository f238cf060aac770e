"""
Testimonial API.

Customers submit testimonials and the storefront reads the approved and
homepage lists; moderation is a back-office action.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, Security, status

from lingam.app.api.deps import get_testimonial_service
from lingam.app.core.security import TESTIMONIAL_MODERATE, User, get_current_user
from lingam.app.schemas.testimonials import Testimonial, TestimonialCreate
from lingam.app.services.testimonial_service import TestimonialService

router = APIRouter()


@router.post("/", response_model=Testimonial, status_code=201)
async def submit_testimonial(
    payload: TestimonialCreate,
    service: TestimonialService = Depends(get_testimonial_service),
):
    """Submit a testimonial. It stays hidden until approved."""
    return await service.add(payload)


@router.get("/approved", response_model=List[Testimonial])
async def list_approved_testimonials(service: TestimonialService = Depends(get_testimonial_service)):
    return await service.get_approved()


@router.get("/homepage", response_model=List[Testimonial])
async def list_homepage_testimonials(service: TestimonialService = Depends(get_testimonial_service)):
    return await service.get_homepage()


@router.get("/", response_model=List[Testimonial])
async def list_all_testimonials(
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: User = Security(get_current_user, scopes=[TESTIMONIAL_MODERATE]),
):
    return await service.get_all()


@router.post("/{testimonial_id}/toggle-approval", response_model=Testimonial)
async def toggle_testimonial_approval(
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: User = Security(get_current_user, scopes=[TESTIMONIAL_MODERATE]),
):
    testimonial = await service.toggle_approval(testimonial_id)
    if testimonial is None:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return testimonial


@router.post("/{testimonial_id}/toggle-homepage", response_model=Testimonial)
async def toggle_testimonial_homepage(
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: User = Security(get_current_user, scopes=[TESTIMONIAL_MODERATE]),
):
    testimonial = await service.toggle_homepage_display(testimonial_id)
    if testimonial is None:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return testimonial


@router.delete("/{testimonial_id}", status_code=204)
async def delete_testimonial(
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: User = Security(get_current_user, scopes=[TESTIMONIAL_MODERATE]),
):
    if not await service.delete(testimonial_id):
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/")
async def clear_testimonials(
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: User = Security(get_current_user, scopes=[TESTIMONIAL_MODERATE]),
):
    return {"cleared": await service.clear_all()}
