from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from ..schemas import CompletionUpdate, TodoCompletionUpdate, TodoCreate, TodoOut
from ..service import TodoService, get_todo_service

router = APIRouter(
    prefix="/api/v1/todos",
    tags=["todos"],
)

_NOT_FOUND = {404: {"description": "Todo not found"}}


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[TodoOut],
    operation_id="getTodos",
    summary="List Todos",
    description="Return every Todo item in creation order.",
    responses={200: {"description": "List retrieved successfully"}},
)
def get_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoOut]:
    """
    List all todos.
    """
    return [TodoOut(**it) for it in service.list_todos()]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    operation_id="createTodo",
    summary="Create Todo",
    description="Create a new, incomplete Todo item and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        422: {"description": "Validation error"},
    },
)
def create_todo(payload: TodoCreate, service: TodoService = Depends(get_todo_service)) -> TodoOut:
    """
    Create a new Todo.
    """
    created = service.create_todo(payload.text)
    return TodoOut(**created)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}/completion",
    response_model=TodoOut,
    operation_id="updateTodoCompletionById",
    summary="Update Todo Completion",
    description="Set the completion flag of a Todo item. Text and creation time are left unchanged.",
    responses={200: {"description": "Todo updated"}, **_NOT_FOUND},
)
def patch_todo_completion(
    payload: CompletionUpdate,
    todo_id: int = Path(..., gt=0, description="Identifier of the todo to update"),
    service: TodoService = Depends(get_todo_service),
) -> TodoOut:
    """
    Update the completion flag of the todo addressed by the path.
    """
    updated = service.set_completion(todo_id, payload.completed)
    return TodoOut(**updated)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "/completion",
    response_model=TodoOut,
    operation_id="updateTodoCompletion",
    summary="Update Todo Completion (typed call)",
    description="Set the completion flag of the Todo identified by ``id`` in the request body.",
    responses={200: {"description": "Todo updated"}, **_NOT_FOUND},
)
def update_todo_completion(
    payload: TodoCompletionUpdate, service: TodoService = Depends(get_todo_service)
) -> TodoOut:
    """
    Update the completion flag using the ``{id, completed}`` call shape.
    """
    updated = service.set_completion(payload.id, payload.completed)
    return TodoOut(**updated)  # type: ignore[arg-type]
