import logging
import os
from functools import lru_cache

from core.application.task_service import TaskService
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.security.credentials import CredentialChecker, load_credentials

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    store = os.getenv("TASK_STORE", "peewee").lower()
    logger.info(f"Using task store: {store}")

    if store == "memory":
        return InMemoryTaskRepository()
    # Default to Peewee
    return PeeweeTaskRepository()


def get_task_service() -> TaskService:
    return TaskService(repository=get_task_repository())


@lru_cache(maxsize=1)
def get_credential_checker() -> CredentialChecker:
    return CredentialChecker(load_credentials())
