import logging

from core.application.guards import ensure_valid_id, repository_call
from core.domain.errors import NotFoundError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int) -> None:
        ensure_valid_id(task_id)
        with repository_call("delete task"):
            deleted = self._repository.delete(task_id)
        if not deleted:
            raise NotFoundError(task_id)
        logger.info(f"Tarea {task_id} eliminada")
