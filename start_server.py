#!/usr/bin/env python3
"""
Startup script for the Taskboard backend
This script starts the FastAPI server with proper configuration
"""

import logging
import os

import uvicorn
from dotenv import load_dotenv

from taskboard.config.settings import configure_logging

logger = logging.getLogger("start_server")


def main():
    # Load environment variables
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "INFO").upper())

    # Server configuration
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "true").lower() == "true"

    logger.info("Starting Taskboard server on %s:%s (reload=%s)", host, port, reload)

    # Start the server
    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
