"""
Products module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models import Money, UUIDStr


class ProductStatus(str, Enum):
    """Catalog availability of a product."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


class Product(BaseModel):
    """A catalog product."""

    id: str
    category_id: str
    name: str
    description: str = ""
    price: Money
    stock_quantity: int
    sku: str
    status: ProductStatus = ProductStatus.ACTIVE
    created_at: datetime
    updated_at: datetime


class CreateProductRequest(BaseModel):
    """Request to add a product to the catalog."""

    category_id: UUIDStr
    name: str = Field(..., min_length=3, max_length=200)
    description: str = Field(default="", max_length=5000)
    price: Money = Field(..., gt=0)
    stock_quantity: int = Field(..., ge=0)
    sku: str = Field(..., min_length=3, max_length=50)


class UpdateProductRequest(BaseModel):
    """
    Partial product update.

    Only fields that are present are changed.
    """

    category_id: Optional[UUIDStr] = None
    name: Optional[str] = Field(default=None, min_length=3, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    price: Optional[Money] = Field(default=None, gt=0)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    status: Optional[ProductStatus] = None
