import asyncio
import json
import logging
from enum import Enum
from functools import lru_cache
from typing import Any

from google.api_core import exceptions as gax_exceptions
from google.cloud import tasks_v2

from ultmt_tasks.config import TaskSettings, get_task_settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class TaskHttpMethod(str, Enum):
    POST = "POST"
    PUT = "PUT"


class TaskPayloadError(ValueError):
    pass


def queue_path(settings: TaskSettings) -> str:
    return tasks_v2.CloudTasksClient.queue_path(
        settings.gcp_project_id,
        settings.message_queue_region,
        settings.message_queue_name,
    )


def serialize_payload(payload: Any) -> bytes:
    try:
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise TaskPayloadError(f"Task payload is not JSON serializable: {exc}") from exc


def build_http_task(
    url: str,
    payload: Any,
    http_method: TaskHttpMethod | str,
    settings: TaskSettings,
) -> tasks_v2.Task:
    method = TaskHttpMethod(http_method)
    http_request = tasks_v2.HttpRequest(
        http_method=tasks_v2.HttpMethod[method.value],
        url=url,
        headers={
            "Content-Type": "application/json",
            API_KEY_HEADER: settings.api_key,
        },
        body=serialize_payload(payload),
        oidc_token=tasks_v2.OidcToken(
            service_account_email=settings.gcp_service_account,
        ),
    )
    return tasks_v2.Task(http_request=http_request)


def build_task_request(parent: str, task: tasks_v2.Task) -> tasks_v2.CreateTaskRequest:
    return tasks_v2.CreateTaskRequest(parent=parent, task=task)


class CloudTaskDispatcher:
    """Enqueues HTTP callbacks against the Ultmt API on a Cloud Tasks queue.

    Each dispatch makes exactly one ``create_task`` call. Failures are raised
    to the caller as-is; redelivery is left to the queue's own retry config.
    """

    def __init__(self, settings: TaskSettings, client: tasks_v2.CloudTasksAsyncClient | None = None):
        self.settings = settings
        self._client = client
        self._owns_client = client is None
        self._client_loop: asyncio.AbstractEventLoop | None = None

    @property
    def client(self) -> tasks_v2.CloudTasksAsyncClient:
        # The grpc channel is bound to the loop it was created on; an owned
        # client is rebuilt when dispatch runs on a different loop.
        if self._owns_client:
            loop = asyncio.get_running_loop()
            if self._client is None or self._client_loop is not loop:
                self._client = tasks_v2.CloudTasksAsyncClient()
                self._client_loop = loop
        return self._client

    async def close(self) -> None:
        """Close the transport of a client this dispatcher created, if any."""
        if self._owns_client and self._client is not None:
            client, self._client, self._client_loop = self._client, None, None
            await client.transport.close()

    def build_request(
        self,
        endpoint_path: str,
        payload: Any,
        http_method: TaskHttpMethod | str,
    ) -> tasks_v2.CreateTaskRequest:
        url = f"{self.settings.ultmt_api_url}{endpoint_path}"
        task = build_http_task(url, payload, http_method, self.settings)
        return build_task_request(queue_path(self.settings), task)

    async def dispatch(
        self,
        endpoint_path: str,
        payload: Any,
        http_method: TaskHttpMethod | str,
    ) -> tasks_v2.Task:
        request = self.build_request(endpoint_path, payload, http_method)
        method = TaskHttpMethod(http_method).value

        try:
            response = await self.client.create_task(request=request, retry=None)
        except gax_exceptions.GoogleAPICallError:
            logger.exception(
                "Cloud task creation failed",
                extra={"queue": request.parent, "endpoint": endpoint_path, "method": method},
            )
            raise

        logger.info(
            "Cloud task created: %s",
            response.name,
            extra={"endpoint": endpoint_path, "method": method},
        )
        return response


@lru_cache(maxsize=1)
def get_task_dispatcher() -> CloudTaskDispatcher:
    """Process-wide dispatcher; its client is rebuilt per event loop."""
    return CloudTaskDispatcher(get_task_settings())


async def dispatch_task(
    endpoint_path: str,
    payload: Any,
    http_method: TaskHttpMethod | str,
) -> tasks_v2.Task:
    return await get_task_dispatcher().dispatch(endpoint_path, payload, http_method)
