"""
Catalog service model.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, PositiveInt


class Service(BaseModel):
    """A bookable service from the catalog."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    description: Optional[str] = None
    price: PositiveInt
    duration_minutes: PositiveInt
