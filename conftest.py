import pytest

from logger import Logger


@pytest.fixture(autouse=True)
def fresh_logger():
    Logger().reset()
    yield Logger()
    Logger().reset()
