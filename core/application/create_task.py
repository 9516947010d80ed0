import logging
from dataclasses import dataclass

from core.application.storage import storage_operation
from core.application.validation import validate_description
from core.domain.models.task import NewTask, Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    description: str
    status: TaskStatus = TaskStatus.NEW


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        validate_description(cmd.description)

        with storage_operation("Failed to create task"):
            task = self._repository.save(
                NewTask(description=cmd.description, status=cmd.status)
            )
        logger.info(f"Created task {task.id}")
        return task
