from fastapi import APIRouter, Depends, Response, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    CreateTaskRequest,
    TaskResponse,
    UpdateTaskRequest,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase

# Los errores de dominio se traducen a HTTP en backend_fastapi.main.
router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    body: CreateTaskRequest,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskResponse:
    """
    Crea una nueva tarea en estado `pending`.

    - **title**: Título de la tarea (obligatorio).
    - **description**: Descripción opcional.
    """
    task = use_case.execute(
        CreateTaskCommand(title=body.title, description=body.description)
    )
    return TaskResponse.from_domain(task)


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskResponse]:
    """
    Obtiene todas las tareas, las más recientes primero.
    """
    return [TaskResponse.from_domain(task) for task in use_case.execute()]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Obtener una tarea",
)
def get_task(
    task_id: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    return TaskResponse.from_domain(use_case.execute(task_id))


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Editar una tarea existente",
)
def update_task(
    task_id: int,
    body: UpdateTaskRequest,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskResponse:
    """
    Actualiza parcialmente una tarea. Los campos ausentes o vacíos no cambian.

    - **task_id**: ID de la tarea a modificar.
    - **title**: Nuevo título.
    - **description**: Nueva descripción.
    - **status**: `pending`, `in_progress` o `completed`.
    """
    task = use_case.execute(
        task_id,
        UpdateTaskCommand(
            title=body.title,
            description=body.description,
            status=body.status,
        ),
    )
    return TaskResponse.from_domain(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> Response:
    use_case.execute(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
