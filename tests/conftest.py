"""Shared pytest fixtures for lazypanes tests."""

import pytest

from lazypanes.contexts.keys import ContextKey
from lazypanes.contexts.registry import StaticListProvider
from lazypanes.engine import LayoutEngine
from lazypanes.i18n import Translator
from lazypanes.views.backend import MemoryBackend

VERSION = "v0.1.0-test"


@pytest.fixture
def backend():
    """In-memory backend sized like a roomy terminal."""
    return MemoryBackend(200, 50)


@pytest.fixture
def providers():
    """List providers with a few items each."""
    return {
        ContextKey.FILES: StaticListProvider([f"file_{i}.py" for i in range(40)], selected_line=3),
        ContextKey.LOCAL_BRANCHES: StaticListProvider(["main", "develop", "feature"]),
        ContextKey.BRANCH_COMMITS: StaticListProvider(
            [f"commit {i}" for i in range(100)], selected_line=0
        ),
        ContextKey.STASH: StaticListProvider(["stash@{0}"]),
    }


@pytest.fixture
def translator():
    """Translator that renders every message id as itself."""
    return Translator.identity()


@pytest.fixture
def engine(backend, providers, translator):
    """Layout engine over the memory backend; no pass has run yet."""
    return LayoutEngine(backend, version=VERSION, providers=providers, translator=translator)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config directory at a temporary path."""
    monkeypatch.setenv("LAZYPANES_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("LAZYPANES_LOG_LEVEL", raising=False)
    return tmp_path
