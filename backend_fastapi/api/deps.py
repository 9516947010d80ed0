from core.application.task_service import TaskService
from infrastructure.container import get_credential_checker, get_task_service
from infrastructure.security.credentials import CredentialChecker


def task_service() -> TaskService:
    return get_task_service()


def credential_checker() -> CredentialChecker:
    return get_credential_checker()
