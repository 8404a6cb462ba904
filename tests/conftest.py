"""Root conftest — shared test configuration."""

import os

# Keep tests off any real database configured in the environment or .env
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./median-test.db")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
