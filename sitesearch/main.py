from contextlib import asynccontextmanager
from fastapi import FastAPI
from .config.settings import settings
from .config.logger import logger
from .routes import suggest_routes, health_routes
from .services.container import container


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration and index availability on startup"""
    logger.info("Starting %s v%s", settings.api_title, settings.api_version)
    logger.info("Elasticsearch URL: %s", settings.elasticsearch_url)
    logger.info("Elasticsearch user: %s", settings.elasticsearch_username)
    logger.info("Elasticsearch password: %s", "*****" if settings.elasticsearch_password else None)
    logger.info("Content index: %s", settings.elasticsearch_index)

    available_indexes = await container.elasticsearch_service.check_index_health()
    if available_indexes:
        logger.info("Available indexes: %s", ", ".join(available_indexes))
    else:
        logger.warning("Content index '%s' is not available", settings.elasticsearch_index)

    try:
        yield
    finally:
        logger.info("Shutting down %s", settings.api_title)


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan
)

# Include routers with API prefix
app.include_router(suggest_routes.router, prefix="/api", tags=["suggest"])
app.include_router(health_routes.router, prefix="/api", tags=["health"])


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "message": settings.api_title,
        "version": settings.api_version,
        "description": settings.api_description,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/api/health",
        "endpoints": {
            "suggest": "/api/suggest",
            "health": "/api/health"
        },
        "index": settings.elasticsearch_index
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
