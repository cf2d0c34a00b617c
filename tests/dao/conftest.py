"""Fixtures for DAO tests.

DAOs are given a mock Supabase client; every query builder call returns the
same query object so tests can inspect the chain and stub ``execute``.
"""

from unittest.mock import MagicMock

import pytest

QUERY_METHODS = ("select", "eq", "ilike", "order", "limit", "insert", "update", "delete")


def make_query(data: list[dict] | None = None) -> MagicMock:
    query = MagicMock()
    for method in QUERY_METHODS:
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=data or [])
    return query


@pytest.fixture
def query() -> MagicMock:
    return make_query()


@pytest.fixture
def client(query) -> MagicMock:
    """Mock Supabase client whose tables all share ``query``."""
    mock = MagicMock()
    mock.table.return_value = query
    return mock
