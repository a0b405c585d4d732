import pytest

from eloratings import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()
