import logging
import sys
from typing import Any

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.dependencies import (
    TodoHandlerDep,
    UserHandlerDep,
    lifespan,
    role_required,
)
from todo_api.config import settings
from todo_api.dto import (
    ApiResponse,
    CreateTodoRequest,
    ErrorResponse,
    HealthCheckResponse,
    LoginRequest,
    RegisterRequest,
    TodoResponse,
    TokenResponse,
    UpdateTodoRequest,
    UpdateUserRequest,
    UserResponse,
)
from todo_api.entities import ROLE_ADMIN, ROLES


def configure_logging() -> None:
    """Send application logs to stdout."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


configure_logging()

ADMIN_ONLY = [Depends(role_required(ROLE_ADMIN))]
MEMBERS = [Depends(role_required(*ROLES))]

app = FastAPI(
    title="Todo API",
    description="Authenticated CRUD over users and todos with a Redis read-through cache",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors in the failure envelope."""
    body = ErrorResponse(code=exc.status_code, message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed ids and payloads as 400s in the failure envelope."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    body = ErrorResponse(code=status.HTTP_400_BAD_REQUEST, message=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Todo API",
        "version": "0.1.0",
        "endpoints": {
            "auth": ["/login", "/register"],
            "users": "/users",
            "todos": "/todos",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
def health(request: Request) -> JSONResponse:
    """Health check endpoint."""
    cache_healthy = request.app.state.cache.health_check()
    database_healthy = request.app.state.user_repository.health_check()
    healthy = cache_healthy and database_healthy

    body = HealthCheckResponse(
        status="healthy" if healthy else "unhealthy",
        cache_healthy=cache_healthy,
        database_healthy=database_healthy,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


# Public routes


@app.post("/login", response_model=ApiResponse[TokenResponse])
def login(request: LoginRequest, handler: UserHandlerDep) -> ApiResponse[TokenResponse]:
    """Exchange credentials for a bearer token."""
    return handler.login(request)


@app.post(
    "/register",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(request: RegisterRequest, handler: UserHandlerDep) -> ApiResponse[UserResponse]:
    """Create a new account."""
    return handler.register(request)


# User routes (admin only)


@app.get("/users", response_model=ApiResponse[list[UserResponse]], dependencies=ADMIN_ONLY)
def get_all_users(handler: UserHandlerDep) -> ApiResponse[list[UserResponse]]:
    return handler.get_all_users()


@app.get("/users/{user_id}", response_model=ApiResponse[UserResponse], dependencies=ADMIN_ONLY)
def get_user(user_id: int, handler: UserHandlerDep) -> ApiResponse[UserResponse]:
    return handler.get_user(user_id)


@app.put("/users/{user_id}", response_model=ApiResponse[UserResponse], dependencies=ADMIN_ONLY)
def update_user(
    user_id: int,
    request: UpdateUserRequest,
    handler: UserHandlerDep,
) -> ApiResponse[UserResponse]:
    return handler.update_user(user_id, request)


@app.delete("/users/{user_id}", response_model=ApiResponse[None], dependencies=ADMIN_ONLY)
def delete_user(user_id: int, handler: UserHandlerDep) -> ApiResponse[None]:
    return handler.delete_user(user_id)


# Todo routes


@app.get("/todos", response_model=ApiResponse[list[TodoResponse]], dependencies=MEMBERS)
def get_all_todos(handler: TodoHandlerDep) -> ApiResponse[list[TodoResponse]]:
    return handler.get_all_todos()


@app.get("/todos/{todo_id}", response_model=ApiResponse[TodoResponse], dependencies=MEMBERS)
def get_todo(todo_id: int, handler: TodoHandlerDep) -> ApiResponse[TodoResponse]:
    return handler.get_todo(todo_id)


@app.post("/todos", response_model=ApiResponse[TodoResponse], dependencies=MEMBERS)
def create_todo(request: CreateTodoRequest, handler: TodoHandlerDep) -> ApiResponse[TodoResponse]:
    return handler.create_todo(request)


@app.put("/todos/{todo_id}", response_model=ApiResponse[TodoResponse], dependencies=MEMBERS)
def update_todo(
    todo_id: int,
    request: UpdateTodoRequest,
    handler: TodoHandlerDep,
) -> ApiResponse[TodoResponse]:
    return handler.update_todo(todo_id, request)


@app.delete("/todos/{todo_id}", response_model=ApiResponse[None], dependencies=ADMIN_ONLY)
def delete_todo(todo_id: int, handler: TodoHandlerDep) -> ApiResponse[None]:
    return handler.delete_todo(todo_id)


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "todo_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
