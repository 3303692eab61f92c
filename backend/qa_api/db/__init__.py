"""Database Infrastructure: SQLAlchemy declarative Base.

Invariants:
    - All sessions are async (AsyncSession, see infrastructure/database.py)
    - asyncpg driver for PostgreSQL; aiosqlite in tests
"""
