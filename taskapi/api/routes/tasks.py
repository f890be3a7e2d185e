"""Task endpoints"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session

from taskapi.core.config import settings
from taskapi.db.database import get_db
from taskapi.db.repository import TaskRepository
from taskapi.schemas.task import TaskCreate, TaskPatch, TaskResponse
from taskapi.services.tasks import TaskService

logger = logging.getLogger(__name__)

router = APIRouter()

# Largest value the 32-bit integer id column can hold
MAX_TASK_ID = 2**31 - 1

ITEM_METHODS = ["GET", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    """Task service dependency, built on the request's database session"""
    return TaskService(TaskRepository(db), patchable_fields=settings.PATCHABLE_FIELDS)


@router.get("", response_model=List[TaskResponse])
def list_tasks(service: TaskService = Depends(get_task_service)):
    """List all tasks"""
    logger.info("Fetching all tasks")
    tasks = service.get_all_tasks()
    logger.debug(f"Fetched tasks: {tasks}")
    return tasks


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(data: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a new task; the id is assigned by the database"""
    task = service.create_task(data)
    logger.info(f"Created task: {task}")
    return task


@router.head("/{task_id}")
def head_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    service: TaskService = Depends(get_task_service),
):
    """Existence probe: 200 if the task exists, 404 otherwise, never a body"""
    if not service.task_exists(task_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


@router.options("/{task_id}")
def options_task(task_id: int = Path(..., ge=1, le=MAX_TASK_ID)):
    """Capability probe: list the methods supported on a task"""
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": ", ".join(ITEM_METHODS)})


@router.get("/{task_id}", response_model=Optional[TaskResponse])
def get_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    service: TaskService = Depends(get_task_service),
):
    """
    Get task by ID

    A missing task yields an empty (null) 200 response unless
    STRICT_NOT_FOUND is enabled.
    """
    task = service.get_task_by_id(task_id)
    if task is None and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    data: TaskCreate,
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    service: TaskService = Depends(get_task_service),
):
    """Replace the task with the given id, creating it if it does not exist"""
    task = service.update_task(task_id, data)
    logger.info(f"Updated task: {task}")
    return task


@router.patch("/{task_id}", response_model=TaskResponse)
def partial_update_task(
    data: TaskPatch,
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    service: TaskService = Depends(get_task_service),
):
    """Update only the patchable fields present in the request"""
    task = service.partial_update_task(task_id, data)
    if task is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    logger.info(f"Patched task: {task}")
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    service: TaskService = Depends(get_task_service),
):
    """Delete task by ID; deleting an unknown id is a no-op unless STRICT_NOT_FOUND is enabled"""
    deleted = service.delete_task(task_id)
    if not deleted and settings.STRICT_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    logger.info(f"Deleted task {task_id}" if deleted else f"Task {task_id} not found, nothing deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
