"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
      (create_all and alembic autogenerate rely on it)
"""

from products_api.models.product import Product  # noqa: F401
