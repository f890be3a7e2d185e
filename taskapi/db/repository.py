"""Record store for tasks"""

import logging
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from taskapi.db import models

logger = logging.getLogger(__name__)


class TaskRepository:
    """Persistence operations for Task records, keyed by integer id"""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[models.Task]:
        return self.db.query(models.Task).all()

    def find_by_id(self, task_id: int) -> Optional[models.Task]:
        return self.db.get(models.Task, task_id)

    def exists_by_id(self, task_id: int) -> bool:
        return self.db.query(models.Task.id).filter(models.Task.id == task_id).first() is not None

    def save(self, task: models.Task) -> models.Task:
        """
        Insert or update a task.

        A task without an id is inserted and receives a generated id; a task
        carrying an id replaces the stored row with that id, or is inserted
        under that id when no such row exists.

        :param task: Task to persist
        :return: The persistent instance, refreshed from the database
        """
        explicit_id = task.id is not None
        task = self.db.merge(task)
        self.db.commit()
        if explicit_id:
            self._sync_id_sequence()
        self.db.refresh(task)
        logger.debug(f"Saved task {task.id}")
        return task

    def delete_by_id(self, task_id: int) -> bool:
        """
        Delete the task with the given id if it exists.

        :return: True if a row was removed, False otherwise
        """
        deleted = self.db.query(models.Task).filter(models.Task.id == task_id).delete()
        self.db.commit()
        return deleted > 0

    def _sync_id_sequence(self):
        """Move the PostgreSQL id sequence past ids written explicitly"""
        if self.db.get_bind().dialect.name != "postgresql":
            # SQLite assigns max(rowid) + 1 on its own
            return

        table = models.Task.__tablename__
        self.db.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )
        )
        self.db.commit()
