"""
School Management API - Main Application

FastAPI backend with:
- MongoDB for users, courses, students and teachers
- JWT authentication with admin / user roles
- Many-to-many enrollment between students/teachers and courses

Run: uvicorn app.main:app --reload
"""

import time

import structlog
from bson.errors import InvalidId
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import AppError, UnexpectedError
from app.core.logger import configure_logging
from app.db.mongodb import init_mongo_indexes, test_mongo_connection

settings = get_settings()
configure_logging(settings.log_level)
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title="School Management API",
    description="""
    CRUD API for a school: courses, students, teachers and user accounts.

    ## Features
    - **Authentication**: register / login, JWT bearer tokens
    - **Authorization**: admin-only create/delete, authenticated updates
    - **Enrollment**: students and teachers hold a set of courses
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration * 1000, 2)
    )
    return response


# ============================================================
# ERROR HANDLERS
# Every error body is flat JSON with at least a "message" field.
# ============================================================

def _error_field(loc: tuple) -> str:
    """("body", "email") -> "email"; ("body",) -> "body"."""
    if len(loc) > 1 and isinstance(loc[1], str):
        return loc[1]
    return str(loc[0])


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": _error_field(error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Validation Error", "errors": errors})


def _error_response(exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("app_error", path=request.url.path, message=exc.message)
    return _error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(InvalidId)
@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: Exception):
    # Malformed ids land here too: they fail inside the store layer.
    logger.error("store_error", path=request.url.path, error=str(exc), exc_info=exc)
    return _error_response(UnexpectedError())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("unexpected_error", path=request.url.path, error=str(exc), exc_info=exc)
    return _error_response(UnexpectedError())


# Include API routes
app.include_router(api_router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    try:
        init_mongo_indexes()
    except Exception as e:
        logger.warning("mongodb_index_init_failed", error=str(e))


@app.get("/", tags=["Health"])
async def root():
    """API info."""
    return {
        "message": "School Management API",
        "version": __version__,
        "status": "Online",
        "endpoints": {
            "auth": "/auth",
            "courses": "/courses",
            "students": "/students",
            "teachers": "/teachers"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
