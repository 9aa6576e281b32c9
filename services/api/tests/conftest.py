import pytest
from fastapi.testclient import TestClient

from ultmt_api import main
from ultmt_api.config import Settings
from ultmt_tasks import CloudTaskDispatcher, TaskSettings


@pytest.fixture
def quiet_logging(monkeypatch):
    monkeypatch.setattr(main, "configure_logging", lambda settings: None)


@pytest.fixture
def task_settings(task_env) -> TaskSettings:
    return TaskSettings(_env_file=None)


@pytest.fixture
def dispatcher(task_settings) -> CloudTaskDispatcher:
    return CloudTaskDispatcher(task_settings, client=object())


@pytest.fixture
def client(quiet_logging, dispatcher):
    app = main.create_app(settings=Settings(_env_file=None), dispatcher=dispatcher)
    with TestClient(app) as test_client:
        yield test_client
