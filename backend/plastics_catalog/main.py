"""
Plastics Catalog API application
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plastics_catalog.api.v1 import router as api_v1_router
from plastics_catalog.core.config import settings
from plastics_catalog.error_handlers import register_exception_handlers
from plastics_catalog.logging_config import setup_logging, get_logger

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Catalog API starting",
        extra={"version": settings.VERSION, "environment": settings.ENVIRONMENT, "debug": settings.DEBUG},
    )
    yield
    logger.info("Catalog API stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Searchable catalog of industrial plastic materials, vendors and reviews",
    version=settings.VERSION,
    lifespan=lifespan,
)

# The frontend pages through results using X-Total-Count
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)

register_exception_handlers(app)
app.include_router(api_v1_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    return {"message": settings.PROJECT_NAME, "version": settings.VERSION, "status": "online"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("plastics_catalog.main:app", host="0.0.0.0", port=8000, reload=settings.is_development)
