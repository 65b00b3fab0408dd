"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from student_records.api.router import api_router
from student_records.core.config import Settings, get_settings
from student_records.core.database import Base, create_store_engine
from student_records.core.exceptions import AppException, NotFoundError
from student_records.core.store import StoreGateway
from student_records.middleware.logging import RequestLoggingMiddleware
from student_records.models import Student  # noqa: F401  registers the Students table

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Suppress noisy SQLAlchemy and other library logs
logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("python_multipart").setLevel(logging.WARNING)
logging.getLogger("python_multipart.multipart").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.debug(f"Store URL: {app.state.engine.url!r}")

    settings.uploads_path.mkdir(parents=True, exist_ok=True)
    logger.info(f"Serving marksheets from {settings.uploads_path} at {settings.MARKSHEETS_URL_PREFIX}")

    try:
        Base.metadata.create_all(app.state.engine)
    except SQLAlchemyError as e:
        logger.critical(f"Store initialisation failed: {e}")
        raise

    yield

    logger.info("Shutting down application")
    app.state.engine.dispose()


def create_application(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
Student record and marksheet service.

## Features

- **Student records**: list students and create new ones
- **Marksheet uploads**: attach an Excel file to a student by roll number
- **Static marksheets**: uploaded files are served under `/marksheets`

## Error Handling

All errors follow a standard format:
```json
{
  "success": false,
  "error": {
    "code": "ERROR_CODE",
    "message": "Human readable message",
    "details": {}
  }
}
```
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    engine = create_store_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.store = StoreGateway(engine, inline_literals=settings.STORE_INLINE_LITERALS)

    # Add middlewares
    app.add_middleware(RequestLoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Any path/method pair without a handler is reported as not found
        if exc.status_code in (404, 405):
            not_found = NotFoundError("Route", request.url.path)
            return JSONResponse(status_code=404, content=not_found.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "error": {
                    "code": "HTTP_ERROR",
                    "message": str(exc.detail),
                    "details": {},
                },
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"errors": jsonable_errors(exc)},
                },
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An internal server error occurred",
                    "details": {},
                },
            },
        )

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def banner():
        return "Student API running. Try GET /students"

    # Include API router
    app.include_router(api_router)

    # Uploaded marksheets; StaticFiles refuses paths outside the directory
    marksheets = StaticFiles(directory=settings.uploads_path, check_dir=False)
    app.mount(settings.MARKSHEETS_URL_PREFIX, marksheets, name="marksheets")

    # Listed paths start with the uploads folder name, e.g. /Marksheets/1/a.xlsx
    folder_prefix = f"/{settings.uploads_folder_name}"
    if folder_prefix != settings.MARKSHEETS_URL_PREFIX:
        app.mount(folder_prefix, marksheets, name="marksheets-folder")

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the non-serialisable ``ctx``/``input`` values."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


# Create app instance
app = create_application()


def run() -> None:
    """Run the service with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "student_records.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
