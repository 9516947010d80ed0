from pydantic import BaseModel

from core.domain.models.task import NewTask, Task, TaskStatus


class TaskResponse(BaseModel):
    id: int
    description: str
    status: TaskStatus

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(id=task.id, description=task.description, status=task.status)


class NewTaskRequest(BaseModel):
    description: str


class UpdateTaskRequest(BaseModel):
    """
    Body of PUT /api/tasks/{id}.

    ``id`` is accepted so clients can send back a task as they received it,
    but the id in the path is the one that is updated.
    """

    id: int | None = None
    description: str
    status: TaskStatus

    def to_domain(self) -> NewTask:
        return NewTask(description=self.description, status=self.status)


class ErrorResponse(BaseModel):
    status: int
    message: str


class CsrfTokenResponse(BaseModel):
    headerName: str
    token: str
