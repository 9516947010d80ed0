from dataclasses import dataclass
from enum import Enum


class TaskStatus(Enum):
    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


@dataclass(slots=True)
class NewTask:
    description: str
    status: TaskStatus = TaskStatus.NEW


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus = TaskStatus.NEW
