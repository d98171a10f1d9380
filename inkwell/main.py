import logging
import logging.config
import subprocess
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import inkwell.models  # noqa: F401  registers every ORM model
from inkwell.auth.router import router as auth_router
from inkwell.comments.router import router as comments_router
from inkwell.config import settings
from inkwell.exceptions import GENERIC_ERROR_MESSAGE
from inkwell.posts.router import router as posts_router
from inkwell.uploads.router import router as uploads_router
from inkwell.users.router import router as users_router
from inkwell.utils.logging import attach_strip_ansi_to_file_handlers

# Load environment variables from .env file
load_dotenv()

# Configure logging from logging.ini file
logging_config_path = Path(__file__).parent.parent / "logging.ini"
if logging_config_path.exists():
    logging.config.fileConfig(
        logging_config_path, disable_existing_loggers=False
    )
    attach_strip_ansi_to_file_handlers()
else:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")

    # Optional: auto run alembic migrations on startup
    if settings.AUTO_MIGRATE_ON_STARTUP:
        try:
            subprocess.run(["alembic", "upgrade", "head"], check=True)
            logger.info("[Startup] Alembic migrations applied")
        except (OSError, subprocess.CalledProcessError) as e:
            logger.error(f"[Startup] Alembic migration failed: {e}")

    yield
    logger.info("Application shutting down...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    swagger_ui_parameters={"docExpansion": "none"},
    lifespan=lifespan,
)

# Add CORS middleware
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(posts_router, prefix=settings.API_PREFIX)
app.include_router(comments_router, prefix=settings.API_PREFIX)
app.include_router(users_router, prefix=settings.API_PREFIX)
app.include_router(uploads_router, prefix=settings.API_PREFIX)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Last resort for failures raised outside a handler's own try block
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": GENERIC_ERROR_MESSAGE})


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}!",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
