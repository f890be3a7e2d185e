"""Load example tasks into an empty database"""

import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from taskapi.db import models  # noqa: E402
from taskapi.db.base import Base  # noqa: E402
from taskapi.db.database import SessionLocal, engine  # noqa: E402
from taskapi.db.repository import TaskRepository  # noqa: E402

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

EXAMPLE_TASKS = [
    {"name": "Carlos", "surname": "Martinez", "email": "carlos@example.com", "phone": "3001234567"},
    {"name": "Maria", "surname": "Lopez", "email": "maria@example.com", "phone": "3007654321"},
    {"name": "Juan", "surname": "Garcia", "email": None, "phone": "3109876543"},
]


def load_example_data():
    """Insert the example tasks unless the table already has rows"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        existing = db.query(models.Task).count()
        if existing > 0:
            logger.warning(f"Database already has {existing} tasks. Skipping data load.")
            return

        repository = TaskRepository(db)
        for data in EXAMPLE_TASKS:
            task = repository.save(models.Task(**data))
            logger.info(f"Created {task!r}")

        logger.info(f"Loaded {len(EXAMPLE_TASKS)} example tasks")
    except Exception:
        logger.exception("Failed to load example data")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    load_example_data()
