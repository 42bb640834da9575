"""HTTP handlers for authentication and user management.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error handling.
"""

from todo_api.dto import (
    ApiResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UpdateUserRequest,
    UserResponse,
)
from todo_api.entities import UserEntity
from todo_api.errors import AppError
from todo_api.handlers.errors import to_http_exception
from todo_api.services import UserService


class UserHandler:
    """HTTP handlers for login, registration and user CRUD.

    Example:
        ```python
        handler = UserHandler(user_service=user_service)

        @app.post("/login")
        def login(request: LoginRequest):
            return handler.login(request)
        ```
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize the user handler.

        Args:
            user_service: The user service for business logic (required).
        """
        self._users = user_service

    def login(self, request: LoginRequest) -> ApiResponse[TokenResponse]:
        """Handle POST /login requests.

        Raises:
            HTTPException: 401 on bad credentials
        """
        try:
            token = self._users.login(request.username, request.password)
        except AppError as e:
            raise to_http_exception(e, "Failed to log in") from e

        return ApiResponse(message="Login successful", data=TokenResponse(token=token))

    def register(self, request: RegisterRequest) -> ApiResponse[UserResponse]:
        """Handle POST /register requests.

        Raises:
            HTTPException: 409 if the username is taken
        """
        user = UserEntity(
            username=request.username,
            password=request.password,
            role=request.role,
            full_name=request.full_name,
        )
        try:
            created = self._users.create_user(user)
        except AppError as e:
            raise to_http_exception(e, "Failed to create user") from e

        return ApiResponse(message="User created successfully", data=UserResponse.model_validate(created))

    def get_all_users(self) -> ApiResponse[list[UserResponse]]:
        """Handle GET /users requests."""
        try:
            users = self._users.find_all()
        except AppError as e:
            raise to_http_exception(e, "Failed to fetch users") from e

        return ApiResponse(
            message="Users fetched successfully",
            data=[UserResponse.model_validate(user) for user in users],
        )

    def get_user(self, user_id: int) -> ApiResponse[UserResponse]:
        """Handle GET /users/{id} requests."""
        try:
            user = self._users.find_by_id(user_id)
        except AppError as e:
            raise to_http_exception(e, "Failed to fetch user") from e

        return ApiResponse(message="User fetched successfully", data=UserResponse.model_validate(user))

    def update_user(self, user_id: int, request: UpdateUserRequest) -> ApiResponse[UserResponse]:
        """Handle PUT /users/{id} requests.

        Raises:
            HTTPException: 404 if the user does not exist
        """
        user = UserEntity(
            id=user_id,
            username=request.username,
            password=request.password,
            role=request.role or "",
            full_name=request.full_name,
        )
        try:
            updated = self._users.update_user(user)
        except AppError as e:
            raise to_http_exception(e, "Failed to update user") from e

        return ApiResponse(message="User updated successfully", data=UserResponse.model_validate(updated))

    def delete_user(self, user_id: int) -> ApiResponse[None]:
        """Handle DELETE /users/{id} requests.

        Raises:
            HTTPException: 404 if the user does not exist
        """
        try:
            self._users.delete_user(user_id)
        except AppError as e:
            raise to_http_exception(e, "Failed to delete user") from e

        return ApiResponse(message="User deleted successfully")
