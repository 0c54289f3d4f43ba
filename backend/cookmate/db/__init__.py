"""Database Infrastructure — declarative base shared by models and migrations.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)

Design Decisions:
    - asyncpg driver for PostgreSQL (native async), aiosqlite in tests
"""
