"""Shared fixtures."""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Settings are read when the app is created; point them at a local stack
os.environ.setdefault("SUPABASE_URL", "http://127.0.0.1:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("LOG_FORMAT", "console")

from seasonteams.models import Season, User  # noqa: E402
from tests.factories import make_season, make_user  # noqa: E402


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return datetime(2026, 5, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def season(now: datetime) -> Season:
    """Current season, acceptance letters not sent yet."""
    return make_season(name=str(now.year), acceptance_notification_at=now + timedelta(days=1))


@pytest.fixture
def last_season(now: datetime) -> Season:
    return make_season(name=str(now.year - 1))


@pytest.fixture
def user() -> User:
    return make_user()


@pytest.fixture
def admin() -> User:
    return make_user(is_admin=True)
