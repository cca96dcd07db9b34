"""Application entry point for the FitSync API.

Defines the FastAPI app, middleware and exception handlers, and includes the
API routers from the `api` package. The `lifespan` handler initializes the
DB on startup.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import get_settings, validate_settings
from core.error_handlers import register_exception_handlers
from core.exceptions import DatabaseError
from core.logger import get_logger
from database import init_db
from database.deps import get_db_read
from api.admin import router as admin_router
from api.auth import router as auth_router
from api.meals import router as meals_router
from api.recommendations import router as recommendations_router
from api.workouts import router as workouts_router

settings = get_settings()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    validate_settings(settings)
    init_db(seed=settings.seed_on_startup)
    logger.info("%s started (%s)", settings.app_name, settings.environment)
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/")
def root():
    return {
        "message": "Welcome to FitSync API",
        "version": settings.app_version,
        "endpoints": {
            "auth": "/api/auth",
            "meals": "/api/meals",
            "workouts": "/api/workouts",
            "recommendations": "/api/recommendations",
            "admin": "/api/admin",
        },
    }


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If database connection fails.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check failed")
        raise DatabaseError("Database health check failed", operation="health_check")
    return {"status": "healthy", "database": "connected"}


app.include_router(auth_router)
app.include_router(meals_router)
app.include_router(workouts_router)
app.include_router(recommendations_router)
app.include_router(admin_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.environment == "development")
