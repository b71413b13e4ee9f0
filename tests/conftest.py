"""Pytest configuration and fixtures for all tests."""

import pytest

from typeahead import IncrementalSearch

# Entries from the interactive demo
DEMO_CORPUS = [
    "list test",
    "first, item",
    "second item!",
    "third &string",
    "fourth...element",
    "...fifth",
    "sixth,item,in,list",
    "seventh string",
    "one more string",
    "and one more item",
]

SMALL_CORPUS = ["first item", "second item", "third string"]

CONFIG_ENV_VARS = [
    "TYPEAHEAD_MAX_RESULTS",
    "TYPEAHEAD_MAX_CORRECTIONS",
    "TYPEAHEAD_MIN_INCREMENTAL_LENGTH",
    "TYPEAHEAD_CASE_FOLDING",
]


@pytest.fixture
def demo_corpus():
    return list(DEMO_CORPUS)


@pytest.fixture
def small_corpus():
    return list(SMALL_CORPUS)


@pytest.fixture
def demo_search(demo_corpus):
    return IncrementalSearch(demo_corpus)


@pytest.fixture
def small_search(small_corpus):
    return IncrementalSearch(small_corpus)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset typeahead variables and restore them after the test.

    Setting before deleting makes monkeypatch also undo anything
    load_dotenv() writes during the test.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield monkeypatch
