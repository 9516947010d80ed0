from core.application.storage import storage_operation
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Task]:
        with storage_operation("Failed to retrieve tasks"):
            return self._repository.find_all()
