# tests/conftest.py
import pytest
from unittest.mock import AsyncMock

from vocab_app.config import set_settings
from vocab_app.generator import DefinitionGenerator
from vocab_app.main import app, get_store, get_generator
from vocab_app.schema import Word
from vocab_app.word_store import InMemoryWordStore


@pytest.fixture
def jubilant():
    return Word(
        word="Jubilant",
        meaning="Expressing great happiness",
        sentence="The jubilant crowd cheered loudly.",
    )


@pytest.fixture
def memory_store():
    return InMemoryWordStore()


@pytest.fixture
def mock_completer():
    """Chat collaborator whose replies are set per test via side_effect/return_value."""
    completer = AsyncMock()
    completer.complete = AsyncMock(return_value="")
    return completer


@pytest.fixture
def overridden_app(memory_store, mock_completer):
    """The FastAPI app with the store and generator swapped for test doubles."""
    app.dependency_overrides[get_store] = lambda: memory_store
    app.dependency_overrides[get_generator] = lambda: DefinitionGenerator(mock_completer)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_settings():
    yield
    set_settings(None)
