"""Database Metadata — the SQLAlchemy declarative Base shared by models and migrations.

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
