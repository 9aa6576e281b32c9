from .client import (
    CloudTaskDispatcher,
    TaskHttpMethod,
    TaskPayloadError,
    build_http_task,
    build_task_request,
    dispatch_task,
    get_task_dispatcher,
    queue_path,
    serialize_payload,
)
from .config import ConfigurationError, TaskSettings, get_task_settings, load_task_settings

__all__ = [
    "CloudTaskDispatcher",
    "ConfigurationError",
    "TaskHttpMethod",
    "TaskPayloadError",
    "TaskSettings",
    "build_http_task",
    "build_task_request",
    "dispatch_task",
    "get_task_dispatcher",
    "get_task_settings",
    "load_task_settings",
    "queue_path",
    "serialize_payload",
]
