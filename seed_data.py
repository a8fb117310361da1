#!/usr/bin/env python3
"""
Script to create the tables and insert sample clients, service offerings and testimonials
Usage: python seed_data.py
"""

import logging
import sys

from dancesite.database import Base, SessionLocal, engine
from dancesite import models  # noqa: F401
from dancesite.seed import seed_sample_data

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def main() -> int:
    Base.metadata.create_all(bind=engine, checkfirst=True)

    db = SessionLocal()
    try:
        summary = seed_sample_data(db)
    except Exception as e:
        db.rollback()
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        db.close()

    if not any(summary.values()):
        logger.info("Tables already contain data, nothing inserted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
