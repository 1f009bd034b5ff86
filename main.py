import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.database import get_async_session
from app.core.logging_config import setup_logging
from app.db.init_db import init_db
from app.middleware.logging import LoggingMiddleware
from app.api.v1.api import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_db()
    yield


# Create FastAPI app
app_config = {
    "title": settings.PROJECT_NAME,
    "description": "Departments and employees record keeping",
    "version": "1.0.0",
}

app = FastAPI(**app_config, lifespan=lifespan)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=settings.ALLOWED_METHODS,
    allow_headers=settings.ALLOWED_HEADERS,
)
app.add_middleware(LoggingMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400 with one message per error"""
    errors = []
    for error in exc.errors():
        ctx_error = (error.get("ctx") or {}).get("error")
        errors.append(str(ctx_error) if ctx_error is not None else error.get("msg"))
    logger.debug(f"Rejected {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


# Include routers
app.include_router(api_router)
app.include_router(api_router, prefix=settings.API_PREFIX, include_in_schema=False)

@app.get("/")
async def root():
    return {
        "message": f"Welcome to the {settings.PROJECT_NAME}",
        "status": "active",
        "version": app.version,
        "docs": "/docs"
    }

@app.get("/health")
async def health_check(session: AsyncSession = Depends(get_async_session)):
    await session.execute(text("SELECT 1"))
    return {
        "status": "healthy",
        "components": {
            "database": "connected",
        }
    }


def run_http():
    """Run HTTP server on port 8080"""
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    run_http()
