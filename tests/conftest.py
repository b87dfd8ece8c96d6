"""Points the database at in-memory SQLite before any backend module is imported."""

import os

os.environ.setdefault("DA_DATABASE_URL", "sqlite://")
os.environ.setdefault("DA_LOG_LEVEL", "WARNING")
