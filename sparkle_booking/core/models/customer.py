"""
Customer-related data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class CustomerUpsert(BaseModel):
    """Customer fields written by the idempotent upsert, keyed by phone."""

    model_config = ConfigDict(extra="forbid")

    name: str
    phone: str
    email: str
    address: Optional[str] = None


class Customer(BaseModel):
    """Stored customer identity."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    phone: str
    email: str
    address: Optional[str] = None
    created_at: str
    updated_at: str
