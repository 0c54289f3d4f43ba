"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use real credentials or a real database
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("AUTH_JWT_SECRET", "test-jwt-secret-not-for-production")
os.environ.setdefault("CORS_ORIGINS", '["http://localhost:3000"]')
