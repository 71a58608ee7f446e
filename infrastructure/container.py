import logging

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.config import Settings

logger = logging.getLogger(__name__)


def build_task_repository(settings: Settings) -> TaskRepository:
    if settings.orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )
        from infrastructure.sqlalchemy.session.db import create_session_factory

        return SqlAlchemyTaskRepository(create_session_factory(settings.database_url))

    # Default to Peewee
    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
    from infrastructure.peewee.session.db import create_database

    return PeeweeTaskRepository(create_database(settings.database_url))


class Container:
    """
    Repositorio y casos de uso, construidos una vez por aplicación.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository
        self.create_task = CreateTaskUseCase(repository)
        self.get_task = GetTaskUseCase(repository)
        self.list_tasks = ListTasksUseCase(repository)
        self.update_task = UpdateTaskUseCase(repository)
        self.delete_task = DeleteTaskUseCase(repository)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Container":
        repository = build_task_repository(settings)
        logger.info(
            f"Repositorio de tareas: {type(repository).__name__} ({settings.orm})"
        )
        return cls(repository)
