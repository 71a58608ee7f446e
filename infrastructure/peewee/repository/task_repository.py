import logging

from peewee import Database

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel, bind_task_model
from infrastructure.timestamps import as_utc, utcnow

logger = logging.getLogger(__name__)


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description or "",
        status=TaskStatus(model.status),
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self, db: Database) -> None:
        self._db = db
        self._model = bind_task_model(db)
        # Sin migraciones: la tabla se crea si no existe.
        self._db.connect(reuse_if_open=True)
        self._db.create_tables([self._model], safe=True)
        logger.info("Tabla 'tasks' lista (Peewee)")

    def insert(self, task: Task) -> Task:
        now = utcnow()
        with self._db.atomic():
            model = self._model.create(
                title=task.title,
                description=task.description,
                status=task.status.value,
                created_at=now,
                updated_at=now,
            )
        logger.debug(f"INSERT tasks id={model.id}")
        return _to_domain(model)

    def get(self, task_id: int) -> Task | None:
        model = self._model.get_or_none(self._model.id == task_id)
        if model is None:
            return None
        return _to_domain(model)

    def list(self) -> list[Task]:
        query = self._model.select().order_by(
            self._model.created_at.desc(), self._model.id.desc()
        )
        return [_to_domain(model) for model in query]

    def update(self, task: Task) -> Task | None:
        now = utcnow()
        with self._db.atomic():
            rows = (
                self._model.update(
                    title=task.title,
                    description=task.description,
                    status=task.status.value,
                    updated_at=now,
                )
                .where(self._model.id == task.id)
                .execute()
            )
        logger.debug(f"UPDATE tasks id={task.id} rows={rows}")
        if rows == 0:
            return None
        task.updated_at = as_utc(now)
        return task

    def delete(self, task_id: int) -> bool:
        with self._db.atomic():
            rows = self._model.delete().where(self._model.id == task_id).execute()
        logger.debug(f"DELETE tasks id={task_id} rows={rows}")
        return rows > 0
