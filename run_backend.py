#!/usr/bin/env python
"""Script to run the Employee Task Tracker API server."""
import uvicorn

from task_tracker import config

if __name__ == "__main__":
    uvicorn.run(
        "task_tracker.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )
