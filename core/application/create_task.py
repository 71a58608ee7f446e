import logging
from dataclasses import dataclass

from core.application.guards import repository_call
from core.domain.errors import ValidationError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str = ""
    description: str = ""


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        if not cmd.title:
            raise ValidationError("title is required")

        task = Task(
            title=cmd.title,
            description=cmd.description or "",
            status=TaskStatus.PENDING,
        )
        with repository_call("create task"):
            created = self._repository.insert(task)

        logger.info(f"Tarea {created.id} creada")
        return created
