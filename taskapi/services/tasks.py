"""Task service: business operations over the task record store"""

import logging
from typing import Iterable, List, Optional

from taskapi.db import models
from taskapi.db.repository import TaskRepository
from taskapi.schemas.task import TaskCreate, TaskPatch

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations on top of a TaskRepository"""

    def __init__(self, repository: TaskRepository, patchable_fields: Iterable[str] = ("name",)):
        """
        :param repository: Record store the service reads from and writes to
        :param patchable_fields: Fields a partial update may overwrite
        """
        self.repository = repository
        self.patchable_fields = frozenset(patchable_fields)

    def get_all_tasks(self) -> List[models.Task]:
        return self.repository.find_all()

    def get_task_by_id(self, task_id: int) -> Optional[models.Task]:
        return self.repository.find_by_id(task_id)

    def task_exists(self, task_id: int) -> bool:
        return self.repository.exists_by_id(task_id)

    def create_task(self, data: TaskCreate) -> models.Task:
        """Persist a new task; the store assigns its id"""
        task = models.Task(**data.model_dump())
        return self.repository.save(task)

    def update_task(self, task_id: int, data: TaskCreate) -> models.Task:
        """
        Replace every field of the task with the given id.

        No existence check is made: if the id is unknown the task is created
        under that id.
        """
        task = models.Task(id=task_id, **data.model_dump())
        return self.repository.save(task)

    def partial_update_task(self, task_id: int, data: TaskPatch) -> Optional[models.Task]:
        """
        Overwrite the patchable fields supplied with a non-null value.

        Returns:
            The updated task, or None if no task has the given id
        """
        task = self.repository.find_by_id(task_id)
        if task is None:
            return None

        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None and field in self.patchable_fields
        }
        ignored = set(data.model_fields_set) - self.patchable_fields
        if ignored:
            logger.debug(f"Ignoring non-patchable fields for task {task_id}: {sorted(ignored)}")

        for field, value in changes.items():
            setattr(task, field, value)

        return self.repository.save(task)

    def delete_task(self, task_id: int) -> bool:
        return self.repository.delete_by_id(task_id)
