import pytest
from loguru import logger

from monty_hall_sim.selector import RandomIndexSelector


class ScriptedGenerator:
    """Stands in for ``np.random.Generator``, returning pre-set draws in order."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = []

    def integers(self, low, high):
        value = self._draws.pop(0)
        self.calls.append((low, high))
        assert low <= value < high, f"scripted draw {value} outside [{low}, {high})"
        return value


@pytest.fixture(autouse=True)
def silent_logger():
    """Drop loguru's default stderr handler so long runs stay quiet."""
    logger.remove()
    yield
    logger.remove()
    logger.disable("monty_hall_sim")


@pytest.fixture
def log_messages():
    """Collects every message logged at DEBUG and above during a test."""
    messages = []
    logger.enable("monty_hall_sim")
    logger.add(lambda message: messages.append(str(message).rstrip("\n")), level="DEBUG", format="{message}")
    return messages


@pytest.fixture
def scripted_selector():
    def _make(*draws):
        return RandomIndexSelector(ScriptedGenerator(draws))
    return _make
