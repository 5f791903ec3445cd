import uvicorn

from inventory_api.core.config import settings

if __name__ == "__main__":
    print(f"Starting {settings.PROJECT_NAME} on {settings.HOST}:{settings.PORT}...")

    # String import path so uvicorn owns the app lifecycle (lifespan opens and closes the DB)
    uvicorn.run(
        "inventory_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )
