# scripts/init_db.py
"""
Drop and recreate the invoicing tables (destroys existing data).

Usage:
    python -m scripts.init_db
"""

import logging

from invoicing.core.logging_config import configure_logging
from invoicing.db.engine import get_engine
from invoicing.db.schema import metadata

logger = logging.getLogger(__name__)


def main():
    configure_logging()
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created at %s", engine.url)


if __name__ == "__main__":
    main()
