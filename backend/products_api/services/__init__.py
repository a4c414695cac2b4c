"""Services Layer — persistence access used by the routes.

Invariants:
    - Routes never touch the AsyncSession directly; repositories do
"""
