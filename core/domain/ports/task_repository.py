from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    """
    Puerto de persistencia de tareas.

    "No encontrado" se informa con el valor de retorno (`None` / `False`);
    cualquier otro fallo se propaga como la excepción del driver.
    """

    @abstractmethod
    def insert(self, task: Task) -> Task:
        """Persiste una tarea nueva y la devuelve con id y timestamps asignados."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Task]:
        """Todas las tareas, las más recientes primero."""
        raise NotImplementedError

    @abstractmethod
    def update(self, task: Task) -> Task | None:
        """Guarda los campos mutables y refresca `updated_at`. `None` si la fila ya no existe."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """`False` si ninguna fila fue eliminada."""
        raise NotImplementedError
