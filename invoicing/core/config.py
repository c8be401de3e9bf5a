# invoicing/core/config.py
"""
Application settings.

Environment variables override the defaults:
    DATABASE_URL   SQLAlchemy URL of the store (default: sqlite file in project root)
    LOG_LEVEL      logging level name (default: INFO)
"""

import os
from functools import lru_cache

# Fixed row cap for list endpoints (no pagination)
ROW_LIMIT = 200

# Default payment window for new invoices
DUE_DAYS = 14

DRAFT_STATUS = "Draft"


class Settings:
    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///db.sqlite")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
