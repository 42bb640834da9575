"""HTTP handlers for todo operations."""

from todo_api.dto import ApiResponse, CreateTodoRequest, TodoResponse, UpdateTodoRequest
from todo_api.entities import TodoEntity
from todo_api.errors import AppError
from todo_api.handlers.errors import to_http_exception
from todo_api.services import TodoService


class TodoHandler:
    """HTTP handlers for todo CRUD.

    Delegates business logic to TodoService and converts entities to DTOs.
    """

    def __init__(self, todo_service: TodoService) -> None:
        self._todos = todo_service

    def get_all_todos(self) -> ApiResponse[list[TodoResponse]]:
        """Handle GET /todos requests."""
        try:
            todos = self._todos.find_all()
        except AppError as e:
            raise to_http_exception(e, "Failed to fetch todos") from e

        return ApiResponse(
            message="Todos fetched successfully",
            data=[TodoResponse.model_validate(todo) for todo in todos],
        )

    def get_todo(self, todo_id: int) -> ApiResponse[TodoResponse]:
        """Handle GET /todos/{id} requests."""
        try:
            todo = self._todos.find_by_id(todo_id)
        except AppError as e:
            raise to_http_exception(e, "Failed to fetch todo") from e

        return ApiResponse(message="Todo fetched successfully", data=TodoResponse.model_validate(todo))

    def create_todo(self, request: CreateTodoRequest) -> ApiResponse[TodoResponse]:
        """Handle POST /todos requests."""
        todo = TodoEntity(
            title=request.title,
            content=request.content,
            due_date=request.due_date,
            completed=request.completed,
            user_id=request.user_id,
        )
        try:
            created = self._todos.create(todo)
        except AppError as e:
            raise to_http_exception(e, "Failed to create todo") from e

        return ApiResponse(message="Todo created successfully", data=TodoResponse.model_validate(created))

    def update_todo(self, todo_id: int, request: UpdateTodoRequest) -> ApiResponse[TodoResponse]:
        """Handle PUT /todos/{id} requests.

        Raises:
            HTTPException: 404 if the todo does not exist
        """
        todo = TodoEntity(
            title=request.title,
            content=request.content,
            due_date=request.due_date,
            completed=request.completed,
        )
        try:
            updated = self._todos.update(todo_id, todo)
        except AppError as e:
            raise to_http_exception(e, "Failed to update todo") from e

        return ApiResponse(message="Todo updated successfully", data=TodoResponse.model_validate(updated))

    def delete_todo(self, todo_id: int) -> ApiResponse[None]:
        """Handle DELETE /todos/{id} requests.

        Raises:
            HTTPException: 404 if the todo does not exist
        """
        try:
            self._todos.delete(todo_id)
        except AppError as e:
            raise to_http_exception(e, "Failed to delete todo") from e

        return ApiResponse(message="Todo deleted successfully")
