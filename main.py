"""Application entry point for FastAPI server."""
import uvicorn

from src.config.logging_config import configure_logging
from src.config.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)

    print("\n" + "="*60)
    print("  File Unzip API Service v1.0")
    print("="*60)
    print("\nEndpoints:")
    print("  POST /api/unzip/blob    - Unzip a blob archive and notify the topic")
    print("  GET  /health            - Health check")
    print("\nAPI Docs: http://localhost:8000/docs")
    print("="*60 + "\n")

    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower()
    )
