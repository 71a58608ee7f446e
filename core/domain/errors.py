"""
Errores del dominio de tareas.

La clasificación es estructural: el adaptador HTTP decide el código de
respuesta por el tipo de la excepción, nunca por su mensaje.
"""


class TaskError(Exception):
    """Base de todos los errores de la capa de servicio."""


class ValidationError(TaskError):
    """La entrada del llamador no cumple una precondición."""


class NotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task with ID {task_id} not found")
        self.task_id = task_id


class RepositoryError(TaskError):
    """
    Fallo del almacenamiento que no es un "no encontrado".

    La causa original queda disponible en `cause` y en `__cause__`.
    """

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(f"{message}: {cause}")
        self.cause = cause
