from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)  # lookup key, duplicates allowed
    phone: Optional[str] = None
    address: Optional[str] = None


class CustomerUpdate(BaseModel):
    """Partial update; only fields explicitly sent are applied."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    last_visit: Optional[datetime] = None
    total_purchases: Optional[int] = Field(None, ge=0)


class Customer(CustomerCreate):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
    last_visit: Optional[datetime] = None
    total_purchases: Optional[int] = None
