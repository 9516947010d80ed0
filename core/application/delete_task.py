import logging
from dataclasses import dataclass

from core.application.storage import storage_operation
from core.domain.errors import TaskNotFoundError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: int


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> None:
        message = f"Failed to delete task with id {cmd.id}"
        with storage_operation(message):
            exists = self._repository.exists_by_id(cmd.id)
        if not exists:
            raise TaskNotFoundError(cmd.id)

        with storage_operation(message):
            self._repository.delete_by_id(cmd.id)
        logger.info(f"Deleted task {cmd.id}")
