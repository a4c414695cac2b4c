"""Product Routes — CRUD endpoints for the Product resource.

Invariants:
    - Chain per route: [field rules] -> [validation gate] -> [handler]
    - Handlers only run with CheckedRequest input; coercion happens after the gate
    - Missing product -> 404 {"message": "Product not found"} before any mutation
    - Storage fault -> 500 {"message": <fault>} (PersistenceError handler)

Design Decisions:
    - PATCH toggles availability and ignores its body (kept literal, see DESIGN.md)
    - Id path parameter documented through openapi_extra: it is validated by the
      rule gate, not by FastAPI
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.api.validation import CheckedRequest, validate_request
from products_api.core.field_rules import as_text, to_boolean, to_number
from products_api.core.product_rules import (
    CREATE_PRODUCT_RULES, PRODUCT_ID_RULES, UPDATE_PRODUCT_RULES,
)
from products_api.infrastructure.database import get_db
from products_api.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductCreatedResponse,
    ProductListResponse,
    ProductRead,
    ProductResponse,
    ProductSummary,
    ProductUpdate,
    ProductUpdatedResponse,
    ValidationErrorResponse,
)
from products_api.services.product_repository import ProductRepository

router = APIRouter(prefix="/api/products", tags=["Products"])

_ID_PARAMETER = {
    "in": "path",
    "name": "id",
    "required": True,
    "description": "The ID of the product",
    "schema": {"type": "integer"},
}

_INVALID_INPUT = {400: {"model": ValidationErrorResponse, "description": "Bad request - Invalid input data"}}
_NOT_FOUND = {404: {"model": MessageResponse, "description": "Product not found"}}
_SERVER_ERROR = {500: {"model": MessageResponse, "description": "Internal server error"}}


def _json_body(schema: type) -> dict:
    return {
        "required": True,
        "content": {"application/json": {"schema": schema.model_json_schema()}},
    }


@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get a list of products",
    description="Return up to 4 available products, most expensive first",
    responses={**_SERVER_ERROR},
)
async def list_products(db: AsyncSession = Depends(get_db)):
    rows = await ProductRepository(db).list_available()
    return ProductListResponse(
        products=[ProductSummary.model_validate(dict(row._mapping)) for row in rows],
    )


@router.get(
    "/{id}",
    response_model=ProductResponse,
    summary="Get a product by ID",
    description="Return a product based on its unique ID",
    responses={**_INVALID_INPUT, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra={"parameters": [_ID_PARAMETER]},
)
async def get_product(
    checked: CheckedRequest = Depends(validate_request(*PRODUCT_ID_RULES)),
    db: AsyncSession = Depends(get_db),
):
    product = await ProductRepository(db).get_or_raise(checked.product_id)
    return ProductResponse(product=ProductRead.model_validate(product))


@router.post(
    "",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new product",
    description="Returns the new record in the database",
    responses={**_INVALID_INPUT, **_SERVER_ERROR},
    openapi_extra={"requestBody": _json_body(ProductCreate)},
)
async def create_product(
    checked: CheckedRequest = Depends(validate_request(*CREATE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    product = await ProductRepository(db).create(
        name=as_text(checked.body["name"]),
        price=to_number(checked.body["price"]),
    )
    return ProductCreatedResponse(
        message="Product created successfully",
        product_added=ProductRead.model_validate(product),
    )


@router.put(
    "/{id}",
    response_model=ProductUpdatedResponse,
    summary="Updates a product with user input",
    description="Returns the updated product",
    responses={**_INVALID_INPUT, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra={
        "parameters": [_ID_PARAMETER],
        "requestBody": _json_body(ProductUpdate),
    },
)
async def update_product(
    checked: CheckedRequest = Depends(validate_request(*UPDATE_PRODUCT_RULES)),
    db: AsyncSession = Depends(get_db),
):
    repository = ProductRepository(db)
    product = await repository.get_or_raise(checked.product_id)
    product = await repository.replace(
        product,
        name=as_text(checked.body["name"]),
        price=to_number(checked.body["price"]),
        availability=to_boolean(checked.body["availability"]),
    )
    return ProductUpdatedResponse(
        message="Product updated successfully",
        product=ProductRead.model_validate(product),
    )


@router.patch(
    "/{id}",
    response_model=ProductUpdatedResponse,
    summary="Updates a product availability",
    description="Flips the product availability and returns the updated product",
    responses={**_INVALID_INPUT, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra={"parameters": [_ID_PARAMETER]},
)
async def toggle_availability(
    checked: CheckedRequest = Depends(validate_request(*PRODUCT_ID_RULES)),
    db: AsyncSession = Depends(get_db),
):
    repository = ProductRepository(db)
    product = await repository.get_or_raise(checked.product_id)
    product = await repository.toggle_availability(product)
    return ProductUpdatedResponse(
        message="Product updated successfully",
        product=ProductRead.model_validate(product),
    )


@router.delete(
    "/{id}",
    response_model=MessageResponse,
    summary="Deletes a product",
    description="Permanently removes the product",
    responses={**_INVALID_INPUT, **_NOT_FOUND, **_SERVER_ERROR},
    openapi_extra={"parameters": [_ID_PARAMETER]},
)
async def delete_product(
    checked: CheckedRequest = Depends(validate_request(*PRODUCT_ID_RULES)),
    db: AsyncSession = Depends(get_db),
):
    repository = ProductRepository(db)
    product = await repository.get_or_raise(checked.product_id)
    await repository.delete(product)
    return MessageResponse(message="Product deleted successfully")
