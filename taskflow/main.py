# -*- coding: utf-8 -*-

"""
TaskFlow web application.

- /: single-page UI (static/index.html) driving the JSON API
- /health: health check
- /v1/tasks: task API (see routes_tasks)
"""

from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import FileResponse
from loguru import logger

from taskflow.app import build_components
from taskflow.config import APP_VERSION, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from taskflow.logging_setup import setup_logging
from taskflow.routes_tasks import router as tasks_router
from taskflow.service_tasks import TaskService

STATIC_DIR = Path(__file__).parent / "static"


def create_app(service: Optional[TaskService] = None) -> FastAPI:
    """Build the FastAPI app. A service can be injected (tests); otherwise one is wired from config."""
    app = FastAPI(title="TaskFlow", version=APP_VERSION)
    app.state.task_service = service if service is not None else build_components().service

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(STATIC_DIR / "index.html")

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": APP_VERSION}

    app.include_router(tasks_router)
    return app


def run() -> None:
    """Entry point of `taskflow-web`."""
    setup_logging()
    logger.info(f"Starting TaskFlow {APP_VERSION} on http://{SERVER_HOST}:{SERVER_PORT}")
    uvicorn.run(create_app(), host=SERVER_HOST, port=SERVER_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
