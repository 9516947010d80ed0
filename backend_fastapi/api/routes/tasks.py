from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from backend_fastapi.api.deps import task_service
from backend_fastapi.api.schemas import (
    ErrorResponse,
    NewTaskRequest,
    TaskResponse,
    UpdateTaskRequest,
)
from backend_fastapi.api.security import require_csrf_token, require_user
from core.application.task_service import TaskService

# Ids are stored as signed 64-bit integers.
TaskId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_csrf_token), Depends(require_user)],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
    },
)


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="List all tasks",
)
def get_tasks(
    service: TaskService = Depends(task_service),
) -> list[TaskResponse]:
    """
    Returns every stored task.
    """
    return [TaskResponse.from_domain(task) for task in service.list_tasks()]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task",
    responses={404: {"model": ErrorResponse}},
)
def get_task(
    task_id: TaskId,
    service: TaskService = Depends(task_service),
) -> TaskResponse:
    return TaskResponse.from_domain(service.get_task(task_id))


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={400: {"model": ErrorResponse}},
)
def create_task(
    request: NewTaskRequest,
    service: TaskService = Depends(task_service),
) -> TaskResponse:
    """
    Creates a task with status NEW.

    - **description**: Task description, must not be blank.
    """
    return TaskResponse.from_domain(service.create_task(request.description))


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a task",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_task(
    task_id: TaskId,
    request: UpdateTaskRequest,
    service: TaskService = Depends(task_service),
) -> TaskResponse:
    """
    Replaces the description and status of an existing task.

    - **task_id**: Id of the task to update. An `id` in the body is ignored.
    - **description**: New description, must not be blank.
    - **status**: New status.
    """
    return TaskResponse.from_domain(
        service.update_task(task_id, request.to_domain())
    )


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={404: {"model": ErrorResponse}},
)
def delete_task(
    task_id: TaskId,
    service: TaskService = Depends(task_service),
) -> None:
    service.delete_task(task_id)
