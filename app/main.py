from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Depends
from app.core.config import settings
from app.core.handlers import register_exception_handlers
from app.core.logging import logger
from app.api.deps import get_store, get_summarizer
from app.api.v1.router import api_router
from app.services.student.seed import seed_data
from app.services.student.store import StudentStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_ON_STARTUP:
        seed_data(app.dependency_overrides.get(get_store, get_store)())
    logger.info(f"{settings.PROJECT_NAME} started, summarizer: {settings.SUMMARIZER_BACKEND}")
    yield
    if get_summarizer.cache_info().currsize:
        get_summarizer().close()
        get_summarizer.cache_clear()
    logger.info(f"{settings.PROJECT_NAME} stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """
    Service information
    """
    return {
        "message": "Welcome to Student Records API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }


@app.get("/health")
def health(store: StudentStore = Depends(get_store)):
    """
    Health check endpoint
    """
    return {"status": "ok", "students": store.count()}


if __name__ == "__main__":
    logger.info(f"Server is running on port {settings.PORT}...")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
