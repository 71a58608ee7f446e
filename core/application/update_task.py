import logging
from dataclasses import dataclass

from core.application.guards import ensure_valid_id, repository_call
from core.domain.errors import NotFoundError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: str | None = None


class UpdateTaskUseCase:
    """
    Actualización parcial: solo se sobrescriben los campos presentes y no vacíos.

    Es un read-modify-write sin aislamiento; dos updates simultáneos sobre la
    misma tarea terminan con el último en escribir.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        ensure_valid_id(task_id)

        with repository_call("get task"):
            task = self._repository.get(task_id)
        if task is None:
            raise NotFoundError(task_id)

        # Validar antes de tocar la entidad: un estado inválido no deja cambios a medias.
        status = TaskStatus.parse(cmd.status) if cmd.status else task.status

        if cmd.title:
            task.title = cmd.title
        if cmd.description:
            task.description = cmd.description
        task.status = status

        with repository_call("update task"):
            updated = self._repository.update(task)
        if updated is None:
            raise NotFoundError(task_id)

        logger.info(f"Tarea {task_id} actualizada (estado: {updated.status.value})")
        return updated
