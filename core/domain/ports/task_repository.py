from abc import ABC, abstractmethod

from core.domain.models.task import NewTask, Task


class TaskRepository(ABC):
    @abstractmethod
    def find_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def save(self, task: NewTask | Task) -> Task:
        """
        Insert a NewTask (the store assigns its id) or update a Task.

        Updating a Task whose row does not exist raises TaskNotFoundError;
        it never inserts.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, task_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, task_id: int) -> None:
        raise NotImplementedError
