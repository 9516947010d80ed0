import logging
from contextlib import contextmanager
from typing import Iterator

from core.domain.errors import TaskError, TaskOperationError

logger = logging.getLogger(__name__)


@contextmanager
def storage_operation(message: str) -> Iterator[None]:
    """
    Run repository calls so that only TaskError subclasses escape.

    Domain errors raised inside the block propagate unchanged. Anything else
    is logged and re-raised as TaskOperationError(message) with the original
    exception chained.
    """
    try:
        yield
    except TaskError:
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise TaskOperationError(message) from e
