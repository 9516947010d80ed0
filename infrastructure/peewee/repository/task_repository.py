import logging

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import NewTask, Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel

logger = logging.getLogger(__name__)


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Whatever database TaskModel is bound to; tables are created on init,
        # there are no migrations.
        self._db = TaskModel._meta.database
        self._db.connect(reuse_if_open=True)
        self._db.create_tables([TaskModel], safe=True)

    def save(self, task: NewTask | Task) -> Task:
        with self._db.atomic():
            if isinstance(task, NewTask):
                row = TaskModel.create(
                    description=task.description,
                    status=task.status.value,
                )
                logger.debug(f"Inserted task row {row.id}")
                return row.to_domain()

            updated = TaskModel.update(
                description=task.description,
                status=task.status.value,
            ).where(TaskModel.id == task.id).execute()
            if updated == 0:
                raise TaskNotFoundError(task.id)
            return Task(id=task.id, description=task.description, status=task.status)

    def find_by_id(self, task_id: int) -> Task | None:
        row = TaskModel.get_or_none(TaskModel.id == task_id)
        if row is None:
            return None
        return row.to_domain()

    def find_all(self) -> list[Task]:
        return [row.to_domain() for row in TaskModel.select().order_by(TaskModel.id)]

    def exists_by_id(self, task_id: int) -> bool:
        return TaskModel.select().where(TaskModel.id == task_id).exists()

    def delete_by_id(self, task_id: int) -> None:
        TaskModel.delete().where(TaskModel.id == task_id).execute()
