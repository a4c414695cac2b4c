"""Product Schemas — camelCase serialization and ORM validation."""

from datetime import datetime, timezone

from products_api.models.product import Product
from products_api.schemas.product import (
    ProductCreatedResponse,
    ProductListResponse,
    ProductRead,
    ProductSummary,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _product() -> Product:
    return Product(
        id=3, name="Monitor", price=300.0, availability=True,
        created_at=NOW, updated_at=NOW,
    )


def test_product_read_from_orm_uses_camel_case():
    data = ProductRead.model_validate(_product()).model_dump(by_alias=True)

    assert data["createdAt"] == NOW
    assert data["updatedAt"] == NOW
    assert "created_at" not in data


def test_created_response_key_is_product_added():
    response = ProductCreatedResponse(
        message="Product created successfully",
        product_added=ProductRead.model_validate(_product()),
    )

    data = response.model_dump(by_alias=True)

    assert set(data) == {"message", "productAdded"}


def test_summary_has_no_timestamps():
    data = ProductSummary.model_validate(_product()).model_dump(by_alias=True)

    assert set(data) == {"id", "name", "price", "availability"}


def test_list_response_accepts_empty():
    assert ProductListResponse(products=[]).model_dump() == {"products": []}
