#!/usr/bin/env python3
"""
Server entry point for the Big-O Catalog.
"""
import uvicorn
from app.config import settings, logger


def main():
    """Run the server."""
    logger.info(
        "Starting Big-O Catalog on %s:%d (reload %s)",
        settings.HOST,
        settings.PORT,
        "on" if settings.RELOAD else "off",
    )

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
