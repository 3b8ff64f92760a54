from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import NotFoundError, ValidationError, missing_fields_message
from .logging_config import configure_logging, get_logger
from .routers import blog_posts as blog_posts_router
from .seed import seed_blog_posts
from .settings import Settings, get_settings
from .store import BlogPostStore

logger = get_logger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "blog posts", "description": "CRUD operations for blog posts."},
]

# pydantic error types reported to clients as absent fields
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def _missing_body_fields(errors: List[Dict[str, Any]]) -> List[str]:
    fields: List[str] = []
    for err in errors:
        loc = err.get("loc") or ()
        if err.get("type") in _MISSING_ERROR_TYPES and len(loc) == 2 and loc[0] == "body":
            fields.append(str(loc[1]))
    return fields


def _error_content(message: str, detail: Any) -> Dict[str, Any]:
    return {"error": "ValidationError", "message": message, "detail": detail}


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Return 400 with a consistent JSON structure for request validation errors,
        malformed JSON bodies included.

        Response format:
            {
                "error": "ValidationError",
                "message": "Missing `title` in request body" | "Request validation failed",
                "detail": [... pydantic/fastapi error details ...]
            }
        """
        errors = jsonable_encoder(exc.errors())
        missing = _missing_body_fields(errors)
        message = missing_fields_message(missing) if missing else "Request validation failed"
        logger.info("request_validation_failed", path=request.url.path, message=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_content(message, errors),
        )

    @app.exception_handler(ValidationError)
    async def store_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("store_validation_failed", path=request.url.path, message=exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_content(exc.message, list(exc.missing)),
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("blog_post_not_found", post_id=exc.post_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Blog post not found"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "InternalServerError", "message": "Internal server error"},
        )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, store: Optional[BlogPostStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The application owns exactly one store for its lifetime. When no store is
    passed a fresh one is created, and seeded with sample posts if
    settings.seed_blog_posts is set.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if store is None:
        store = BlogPostStore()
        if settings.seed_blog_posts:
            seed_blog_posts(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("application_started", posts=len(app.state.store))
        yield
        logger.info("application_stopped", posts=len(app.state.store))

    app = FastAPI(
        title="Blog Posts API",
        description="Backend API service for managing blog posts in memory.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # '*' or an empty list allows every origin
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    @app.get("/", summary="Health Check", tags=["health"])
    def health_check(request: Request) -> Dict[str, Any]:
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health and the number of stored posts.
        """
        return {"message": "Healthy", "posts": len(request.app.state.store)}

    app.include_router(blog_posts_router.router)
    return app


# PUBLIC_INTERFACE
def run() -> None:
    """Serve the application with uvicorn on API_HOST:API_PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


app = create_app()
