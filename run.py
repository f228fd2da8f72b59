import uvicorn
from songs_api.core.config import settings

if __name__ == "__main__":
    print(f"Starting {settings.PROJECT_NAME} on {settings.HOST}:{settings.PORT}")
    print(f"Environment: {settings.ENVIRONMENT}")
    print(f"Songs mounted at: {settings.SONGS_PREFIX} (store enabled: {settings.SONGS_STORE_ENABLED})")
    print(f"API docs available at: http://{settings.HOST}:{settings.PORT}/docs")

    # log_config=None leaves uvicorn's loggers to the JSON root handler set up by create_app
    uvicorn.run(
        "songs_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        log_config=None,
        access_log=True
    )
