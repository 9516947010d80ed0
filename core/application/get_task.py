from dataclasses import dataclass

from core.application.storage import storage_operation
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class GetTaskCommand:
    id: int


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: GetTaskCommand) -> Task:
        with storage_operation(f"Failed to retrieve task with id {cmd.id}"):
            task = self._repository.find_by_id(cmd.id)
        if task is None:
            raise TaskNotFoundError(cmd.id)
        return task
