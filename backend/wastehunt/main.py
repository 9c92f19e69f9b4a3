# wastehunt/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import logging
from wastehunt.core.admin import setup_admin
from wastehunt.api.v1.routes import api_router
from wastehunt.core.config import settings
from wastehunt.core.database import db_helper
from wastehunt.core.exceptions import AppException, DatabaseError
from wastehunt.core.limiter import limiter
from wastehunt.services.seed_service import seed_demo_data

logging.basicConfig(
    level=logging.INFO if settings.debug else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл приложения"""
    logger.info(f"🚀 Starting {settings.app_name} in {'DEBUG' if settings.debug else 'PRODUCTION'} mode")

    # Маскируем пароль в URL для логов
    masked_db_url = settings.db.DATABASE_URL
    db_password = settings.db.DB_PASSWORD.get_secret_value()
    if db_password:
        masked_db_url = masked_db_url.replace(db_password, "***")
    logger.info(f"📝 Database: {masked_db_url}")

    try:
        async with db_helper.session_factory() as session:
            await session.execute(text("SELECT 1"))
            if settings.seed_demo_data:
                await seed_demo_data(session)
        logger.info("✅ Database connection successful")
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")
        raise

    setup_admin(app, db_helper.engine)

    yield

    await db_helper.dispose()
    logger.info("👋 Application shutdown complete")


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/", summary="Root endpoint", tags=["root"])
async def root():
    return {
        "message": f"Welcome to {settings.app_name} API",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        } if settings.debug else None,
        "environment": "development" if settings.debug else "production",
        "timestamp": _utcnow_iso()
    }


@app.get("/health", summary="Health check", tags=["health"])
async def health_check():
    try:
        async with db_helper.session_factory() as session:
            result = await session.execute(text("SELECT 1"))
            db_value = result.scalar()

        return {
            "status": "healthy",
            "timestamp": _utcnow_iso(),
            "database": "connected",
            "database_ping": db_value,
            "app_name": settings.app_name,
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "timestamp": _utcnow_iso(),
            "database": "connection failed",
            "error": str(e) if settings.debug else "Database connection error"
        }


def _error_response(exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "error": type(exc).__name__,
            "timestamp": _utcnow_iso()
        }
    )


@app.exception_handler(AppException)
async def app_exception_handler(request, exc: AppException):
    """Кастомные исключения приложения"""
    logger.warning(f"AppException: {exc.detail} (type: {type(exc).__name__})")
    return _error_response(exc)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request, exc: SQLAlchemyError):
    """Любой сбой хранилища отдаём одной категорией, без повторов"""
    logger.exception(f"Database failure on {request.url.path}: {exc}")
    return _error_response(DatabaseError())


@app.exception_handler(Exception)
async def global_exception_handler(request, exc: Exception):
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error": "InternalServerError",
            "timestamp": _utcnow_iso(),
            "debug_info": str(exc) if settings.debug else None
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wastehunt.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
        access_log=False
    )
