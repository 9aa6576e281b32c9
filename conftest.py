import pytest

TASK_ENV = {
    "GCP_PROJECT_ID": "proj",
    "MESSAGE_QUEUE_NAME": "q1",
    "MESSAGE_QUEUE_REGION": "us-east1",
    "ULTMT_API_URL": "https://api.example.com",
    "API_KEY": "test-api-key",
    "GCP_SERVICE_ACCOUNT": "tasks@proj.iam.gserviceaccount.com",
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def task_env(monkeypatch) -> dict:
    for key, value in TASK_ENV.items():
        monkeypatch.setenv(key, value)
    return dict(TASK_ENV)
