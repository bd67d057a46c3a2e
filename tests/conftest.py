"""
Shared pytest fixtures for flj tests.

Also turns the categories declared with ``flj.category`` into pytest
markers, so ``pytest -m monad`` selects the monad properties.
"""

import pytest

from flj import IterableW, categories_of, reset_settings


def pytest_collection_modifyitems(items):
    for item in items:
        obj = getattr(item, "obj", None)
        if obj is None:
            continue
        for name in sorted(categories_of(obj, getattr(item, "cls", None))):
            item.add_marker(getattr(pytest.mark, name))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Run every test with default settings.

    Clears FLJ_* environment variables, points the project root at an empty
    directory and drops cached settings before and after the test.
    """
    for var in ("FLJ_DEBUG_LOG", "FLJ_LOG_LEVEL", "FLJ_LOG_DIR", "FLJ_REPR_LIMIT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("FLJ_PROJECT_ROOT", str(tmp_path))
    reset_settings()

    yield

    reset_settings()


@pytest.fixture
def numbers():
    """A wrapper over a small list of integers."""
    return IterableW.wrap([1, 2, 3, 4])


@pytest.fixture
def standard_list():
    """The list view used by the iterator scenarios."""
    return IterableW.wrap([10, 20, 30]).to_standard_list()
