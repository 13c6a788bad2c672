#!/usr/bin/env python3
"""
Simple script to run the COB Runner Scheduler API server.
"""

import logging

import uvicorn
from cob_scheduler.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("Starting COB Runner Scheduler API...")
    print(f"API will be available at: http://localhost:{settings.port}")
    print(f"Interactive docs at: http://localhost:{settings.port}/docs")
    print(f"Schedules are stored in: {settings.schedules_dir.resolve()}")

    uvicorn.run(
        "cob_scheduler.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # Auto-reload on code changes
        log_level=settings.log_level
    )
