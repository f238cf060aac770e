"""Customer Ledger Service - customer records plus visit and purchase counters."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from lingam.app.schemas.customers import Customer, CustomerCreate, CustomerUpdate
from lingam.app.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


class CustomerService:

    def __init__(self, store: EntityStore[Customer]):
        self.store = store

    async def get_all(self) -> List[Customer]:
        return self.store.all()

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        return self.store.find(customer_id)

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Case-insensitive exact match; the first of any duplicates wins."""
        wanted = email.lower()
        matches = self.store.filter(lambda c: c.email.lower() == wanted)
        return matches[0] if matches else None

    async def add(self, payload: CustomerCreate) -> Customer:
        customer = Customer(
            **payload.model_dump(),
            id=self.store.next_id(),
            created_at=datetime.now(timezone.utc),
            total_purchases=0,
        )
        await self.store.add(customer)
        logger.info(f"Customer added: {customer.id}")
        return customer

    async def update(self, customer_id: str, changes: CustomerUpdate) -> Optional[Customer]:
        fields = changes.model_dump(exclude_unset=True, exclude_none=True)
        return await self.store.update(
            customer_id,
            lambda c: c.model_copy(update=fields),
        )

    async def delete(self, customer_id: str) -> bool:
        removed = await self.store.remove(customer_id)
        if removed:
            logger.info(f"Customer deleted: {customer_id}")
        return removed

    async def record_visit(self, customer_id: str) -> Optional[Customer]:
        return await self.store.update(
            customer_id,
            lambda c: c.model_copy(update={"last_visit": datetime.now(timezone.utc)}),
        )

    async def record_purchase(self, customer_id: str) -> Optional[Customer]:
        """Count one more purchase; a purchase is also a visit."""
        return await self.store.update(
            customer_id,
            lambda c: c.model_copy(update={
                "total_purchases": (c.total_purchases or 0) + 1,
                "last_visit": datetime.now(timezone.utc),
            }),
        )
