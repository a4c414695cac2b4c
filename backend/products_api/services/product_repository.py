"""Product Repository — pass-through persistence calls for the product routes.

Invariants:
    - Every storage fault leaves as PersistenceError carrying the driver's message
    - The session is rolled back before a PersistenceError propagates
    - Driver OverflowError (an id beyond the column range) counts as a storage fault
    - Each mutation commits exactly once; nothing is retried
    - get_or_raise is the only place a missing product becomes ProductNotFoundError

Design Decisions:
    - Thin class over the AsyncSession: routes stay free of SQLAlchemy imports
    - One fault translator (_translate_faults) wraps every call instead of a
      try/except per method
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import Row, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.errors import PersistenceError, ProductNotFoundError
from products_api.infrastructure.database import describe_fault
from products_api.models.product import Product

logger = logging.getLogger(__name__)

LIST_LIMIT = 4


class ProductRepository:
    """CRUD access to the products table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _translate_faults(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except (SQLAlchemyError, OverflowError) as e:
            await self._db.rollback()
            logger.error(
                f"Product {operation} failed: {e}",
                extra={"operation": operation},
            )
            raise PersistenceError(describe_fault(e), operation) from e

    async def create(self, name: str, price: float) -> Product:
        product = Product(name=name, price=price)
        async with self._translate_faults("create"):
            self._db.add(product)
            await self._db.commit()
            await self._db.refresh(product)
        logger.info(
            f"Product {product.id} created", extra={"product_id": product.id},
        )
        return product

    async def list_available(self, limit: int = LIST_LIMIT) -> Sequence[Row]:
        """Available products, most expensive first, projected to the summary columns."""
        query = (
            select(Product.id, Product.name, Product.price, Product.availability)
            .where(Product.availability.is_(True))
            .order_by(Product.price.desc())
            .limit(limit)
        )
        async with self._translate_faults("list"):
            result = await self._db.execute(query)
            return result.all()

    async def get(self, product_id: int) -> Product | None:
        async with self._translate_faults("get"):
            return await self._db.get(Product, product_id)

    async def get_or_raise(self, product_id: int) -> Product:
        product = await self.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def replace(
        self, product: Product, name: str, price: float, availability: bool,
    ) -> Product:
        """Overwrite every writable field."""
        product.name = name
        product.price = price
        product.availability = availability
        return await self._save(product, "replace")

    async def toggle_availability(self, product: Product) -> Product:
        product.availability = not product.availability
        return await self._save(product, "toggle_availability")

    async def delete(self, product: Product) -> None:
        product_id = product.id
        async with self._translate_faults("delete"):
            await self._db.delete(product)
            await self._db.commit()
        logger.info(
            f"Product {product_id} deleted", extra={"product_id": product_id},
        )

    async def _save(self, product: Product, operation: str) -> Product:
        async with self._translate_faults(operation):
            await self._db.commit()
            await self._db.refresh(product)
        return product
