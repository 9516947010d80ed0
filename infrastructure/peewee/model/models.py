from peewee import AutoField, CharField, Model

from core.domain.models.task import Task, TaskStatus
from infrastructure.peewee.session.db import db


class TaskModel(Model):
    id = AutoField()
    description = CharField(max_length=1000)
    status = CharField(max_length=50)

    class Meta:
        database = db
        table_name = "tasks"

    def to_domain(self) -> Task:
        # An unknown status raises ValueError: the row is corrupt.
        return Task(
            id=self.id,
            description=self.description,
            status=TaskStatus(self.status),
        )
