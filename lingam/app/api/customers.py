"""Customer ledger API (back office only)."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, Security, status

from lingam.app.api.deps import get_customer_service
from lingam.app.core.security import CUSTOMER_READ, CUSTOMER_WRITE, User, get_current_user
from lingam.app.schemas.customers import Customer, CustomerCreate, CustomerUpdate
from lingam.app.services.customer_service import CustomerService

router = APIRouter()


def _found(customer):
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/", response_model=List[Customer])
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_READ]),
):
    return await service.get_all()


@router.get("/lookup", response_model=Customer)
async def lookup_customer_by_email(
    email: str = Query(..., min_length=3),
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_READ]),
):
    return _found(await service.get_by_email(email))


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_READ]),
):
    return _found(await service.get_by_id(customer_id))


@router.post("/", response_model=Customer, status_code=201)
async def create_customer(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_WRITE]),
):
    return await service.add(payload)


@router.patch("/{customer_id}", response_model=Customer)
async def update_customer(
    customer_id: str,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_WRITE]),
):
    return _found(await service.update(customer_id, payload))


@router.delete("/{customer_id}", status_code=204)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_WRITE]),
):
    if not await service.delete(customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{customer_id}/visits", response_model=Customer)
async def record_customer_visit(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_WRITE]),
):
    return _found(await service.record_visit(customer_id))


@router.post("/{customer_id}/purchases", response_model=Customer)
async def record_customer_purchase(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
    current_user: User = Security(get_current_user, scopes=[CUSTOMER_WRITE]),
):
    return _found(await service.record_purchase(customer_id))
