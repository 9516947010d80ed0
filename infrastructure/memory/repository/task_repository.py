import threading
from dataclasses import replace
from itertools import count

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import NewTask, Task
from core.domain.ports.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """
    Dict-backed TaskRepository.

    Ids are assigned from 1 upwards. Rows are copied on the way in and on
    the way out, so a caller mutating a returned Task changes nothing until
    it calls ``save``.
    """

    def __init__(self) -> None:
        self._data: dict[int, Task] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def find_all(self) -> list[Task]:
        with self._lock:
            return [replace(self._data[task_id]) for task_id in sorted(self._data)]

    def save(self, task: NewTask | Task) -> Task:
        with self._lock:
            if isinstance(task, NewTask):
                stored = Task(
                    id=next(self._ids),
                    description=task.description,
                    status=task.status,
                )
            elif task.id in self._data:
                stored = replace(task)
            else:
                raise TaskNotFoundError(task.id)
            self._data[stored.id] = stored
            return replace(stored)

    def find_by_id(self, task_id: int) -> Task | None:
        with self._lock:
            task = self._data.get(task_id)
            return replace(task) if task is not None else None

    def exists_by_id(self, task_id: int) -> bool:
        with self._lock:
            return task_id in self._data

    def delete_by_id(self, task_id: int) -> None:
        with self._lock:
            self._data.pop(task_id, None)
