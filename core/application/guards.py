import logging
from collections.abc import Iterator
from contextlib import contextmanager

from core.domain.errors import RepositoryError, TaskError, ValidationError

logger = logging.getLogger(__name__)


def ensure_valid_id(task_id: int) -> None:
    if task_id <= 0:
        raise ValidationError("invalid task ID")


@contextmanager
def repository_call(action: str) -> Iterator[None]:
    """
    Envuelve una llamada al repositorio.

    Las excepciones del driver se re-lanzan como `RepositoryError`
    encadenadas a la causa original. Los errores de dominio pasan intactos.
    """
    try:
        yield
    except TaskError:
        raise
    except Exception as e:
        logger.debug(f"Repositorio falló al {action}: {e!r}")
        raise RepositoryError(f"failed to {action}", e) from e
