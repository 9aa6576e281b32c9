import logging
import time
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ultmt_tasks import CloudTaskDispatcher, TaskSettings, load_task_settings

from ultmt_api.config import Settings, get_settings
from ultmt_api.errors import ApiError, api_error_handler
from ultmt_api.logging_config import configure_logging

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("ultmt_api.access")


def create_app(
    settings: Settings | None = None,
    task_settings: TaskSettings | None = None,
    dispatcher: CloudTaskDispatcher | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        task_dispatcher = dispatcher
        if task_dispatcher is None:
            # Fails fast with ConfigurationError when task variables are missing.
            task_dispatcher = CloudTaskDispatcher(task_settings or load_task_settings())
        app.state.task_dispatcher = task_dispatcher
        logger.info("Task dispatcher ready", extra={"queue": task_dispatcher.settings.message_queue_name})

        yield

        if dispatcher is None:
            await task_dispatcher.close()

    app = FastAPI(title="Ultmt API", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ApiError, api_error_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                "%s %s %s %.2fms",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
            )

    @app.get("/ultmt")
    async def info() -> Dict[str, str]:
        return {"message": "The official API of The Ultmt App"}

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "healthy"}

    return app


def get_task_dispatcher(request: Request) -> CloudTaskDispatcher:
    return request.app.state.task_dispatcher


app = create_app()
