import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .exceptions import TodoNotFoundError
from .logging_config import configure_logging
from .routers import todos as todos_router
from .settings import get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "todos",
        "description": "List, create, and toggle completion of Todo items.",
    },
]

_settings = get_settings()
configure_logging(_settings.log_level)

app = FastAPI(
    title="Todo Backend",
    description="Backend API service for a minimal todo list with pluggable storage backends.",
    version="0.1.0",
    openapi_tags=openapi_tags,
)

# The browser view calls the API cross-origin; there are no cookies or auth headers to share
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_allow_origins,
    allow_methods=["GET", "POST", "PATCH"],
    allow_headers=["Content-Type"],
)


def _jsonable_errors(exc: RequestValidationError) -> list:
    # pydantic puts the raised ValueError under ctx; it is not JSON serializable
    errors = []
    for err in exc.errors():
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        errors.append(err)
    return errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": _jsonable_errors(exc),
        },
    )


@app.exception_handler(TodoNotFoundError)
async def not_found_exception_handler(request: Request, exc: TodoNotFoundError) -> JSONResponse:
    """
    Map the domain NotFound to a 404 distinguishable from other failures.

    Response format:
        {"error": "NotFound", "message": "Todo not found", "detail": {"id": <id>}}
    """
    return JSONResponse(
        status_code=404,
        content={
            "error": "NotFound",
            "message": "Todo not found",
            "detail": {"id": exc.todo_id},
        },
    )


# PUBLIC_INTERFACE
@app.get("/", summary="Health Check", tags=["health"])
def health_check():
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the active storage backend.
    """
    return {"message": "Healthy", "backend": _settings.persistence_backend}


app.include_router(todos_router.router)
logger.info("Todo backend ready (backend=%s)", _settings.persistence_backend)
