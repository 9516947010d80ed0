class TaskError(Exception):
    """Base class for every failure the task service reports."""


class InvalidTaskError(TaskError):
    pass


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found")


class TaskAlreadyExistsError(TaskError):
    def __init__(self, message: str = "Task already exists") -> None:
        super().__init__(message)


class TaskOperationError(TaskError):
    """
    A storage failure the service could not classify.

    The message stays generic; the underlying exception is chained as
    ``__cause__``.
    """
