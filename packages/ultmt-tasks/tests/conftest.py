import pytest

from ultmt_tasks.config import TaskSettings


@pytest.fixture
def settings(task_env) -> TaskSettings:
    return TaskSettings(_env_file=None)
