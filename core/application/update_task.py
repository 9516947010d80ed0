from dataclasses import dataclass

from core.application.storage import storage_operation
from core.application.validation import validate_description
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class UpdateTaskCommand:
    description: str
    status: TaskStatus = TaskStatus.NEW


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        # Blank input is reported even when the task does not exist.
        validate_description(cmd.description)

        message = f"Failed to update task with id {task_id}"
        with storage_operation(message):
            task = self._repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        task.description = cmd.description
        task.status = cmd.status

        with storage_operation(message):
            return self._repository.save(task)
