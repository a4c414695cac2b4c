"""Product Schemas — Pydantic models for API responses and OpenAPI documentation.

Invariants:
    - JSON keys are camelCase (productAdded, createdAt); Python attributes stay snake_case
    - ProductSummary is the list projection: id, name, price, availability only
    - Request bodies are NOT validated by these models: the rule gate owns input
      validation; ProductCreate/ProductUpdate only describe the body in /docs

Design Decisions:
    - from_attributes=True: ORM instances validate directly into response models
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class ProductSummary(CamelModel):
    """Product as listed by GET /api/products."""
    id: int = Field(examples=[1])
    name: str = Field(examples=["Curved monitor 49 inches"])
    price: float = Field(examples=[300])
    availability: bool = Field(examples=[True])


class ProductRead(ProductSummary):
    """Full product record."""
    created_at: datetime
    updated_at: datetime


class ProductCreate(BaseModel):
    name: str = Field(examples=["Curved monitor 49 inches"])
    price: float = Field(gt=0, examples=[300])


class ProductUpdate(ProductCreate):
    availability: bool = Field(examples=[True])


# --- Response envelopes -------------------------------------------------------

class MessageResponse(CamelModel):
    message: str


class ProductCreatedResponse(MessageResponse):
    product_added: ProductRead


class ProductResponse(CamelModel):
    product: ProductRead


class ProductUpdatedResponse(MessageResponse):
    product: ProductRead


class ProductListResponse(CamelModel):
    products: list[ProductSummary]


class FieldErrorDetail(BaseModel):
    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    errors: list[FieldErrorDetail]
