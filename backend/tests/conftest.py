"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch the developer's cars.db
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_DEMO_FLEET", "false")
os.environ.setdefault("LOG_FORMAT", "text")
