import logging

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, sessionmaker

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import init_db
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


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        init_db(session_factory.kw["bind"])
        logger.info("Tabla 'tasks' lista (SQLAlchemy)")

    def insert(self, task: Task) -> Task:
        now = utcnow()
        session = self._session_factory()
        try:
            model = TaskModel(
                title=task.title,
                description=task.description,
                status=task.status.value,
                created_at=now,
                updated_at=now,
            )
            session.add(model)
            session.commit()
            logger.debug(f"INSERT tasks id={model.id}")
            return _to_domain(model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = self._session_factory()
        try:
            model = session.get(TaskModel, task_id)
            if model is None:
                return None
            return _to_domain(model)
        finally:
            session.close()

    def list(self) -> list[Task]:
        session = self._session_factory()
        try:
            statement = select(TaskModel).order_by(
                TaskModel.created_at.desc(), TaskModel.id.desc()
            )
            return [_to_domain(model) for model in session.scalars(statement)]
        finally:
            session.close()

    def update(self, task: Task) -> Task | None:
        now = utcnow()
        session = self._session_factory()
        try:
            result = session.execute(
                update(TaskModel)
                .where(TaskModel.id == task.id)
                .values(
                    title=task.title,
                    description=task.description,
                    status=task.status.value,
                    updated_at=now,
                )
            )
            session.commit()
            logger.debug(f"UPDATE tasks id={task.id} rows={result.rowcount}")
            if result.rowcount == 0:
                return None
            task.updated_at = as_utc(now)
            return task
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, task_id: int) -> bool:
        session = self._session_factory()
        try:
            result = session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            session.commit()
            logger.debug(f"DELETE tasks id={task_id} rows={result.rowcount}")
            return result.rowcount > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
