from core.application.guards import ensure_valid_id, repository_call
from core.domain.errors import NotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int) -> Task:
        ensure_valid_id(task_id)
        with repository_call("get task"):
            task = self._repository.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task
