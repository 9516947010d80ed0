from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskCommand, GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import NewTask, Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository


class TaskService:
    """
    Entry point for the task use cases.

    Callers only ever see the errors from ``core.domain.errors``:
    InvalidTaskError and TaskNotFoundError as soon as they are detected,
    TaskOperationError for any other storage failure.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._list = ListTasksUseCase(repository)
        self._get = GetTaskUseCase(repository)
        self._create = CreateTaskUseCase(repository)
        self._update = UpdateTaskUseCase(repository)
        self._delete = DeleteTaskUseCase(repository)

    def list_tasks(self) -> list[Task]:
        return self._list.execute()

    def get_task(self, task_id: int) -> Task:
        return self._get.execute(GetTaskCommand(id=task_id))

    def create_task(
        self, description: str, status: TaskStatus = TaskStatus.NEW
    ) -> Task:
        return self._create.execute(
            CreateTaskCommand(description=description, status=status)
        )

    def update_task(self, task_id: int, updated_task: NewTask | Task) -> Task:
        # The id carried by updated_task, if any, is ignored.
        return self._update.execute(
            task_id,
            UpdateTaskCommand(
                description=updated_task.description,
                status=updated_task.status,
            ),
        )

    def delete_task(self, task_id: int) -> None:
        self._delete.execute(DeleteTaskCommand(id=task_id))
