"""Fixtures for API tests.

The app runs against an in-memory team store: the TeamService gets mock DAOs
whose side effects read and write ``team_store``, so requests exercise the
real routes, service, validation and templates without a database.
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from seasonteams.api.app import create_app
from seasonteams.api.auth import get_current_user, get_optional_user
from seasonteams.api.dependencies import (
    get_current_season,
    get_now,
    get_supabase,
    get_team_service,
)
from seasonteams.dao import RoleDAO, SourceDAO, TeamDAO, UserDAO
from seasonteams.models import Role, Source, Team, User
from seasonteams.services import TeamService


@pytest.fixture
def team_store() -> dict[str, Team]:
    """Persisted teams by ID."""
    return {}


@pytest.fixture
def team_dao(team_store: dict[str, Team]) -> MagicMock:
    def get_by_id(id: str) -> Team | None:
        team = team_store.get(id)
        return team.model_copy(deep=True) if team else None

    def create(team: Team) -> Team:
        created = team.model_copy(deep=True, update={"id": str(uuid4())})
        team_store[created.id] = created
        return created.model_copy(deep=True)

    def update(id: str, team: Team) -> Team | None:
        if id not in team_store:
            return None
        team_store[id] = team.model_copy(deep=True)
        return team

    def delete(id: str) -> bool:
        return team_store.pop(id, None) is not None

    def find_by_season(season_id: str, with_activities: bool = False) -> list[Team]:
        return [t.model_copy(deep=True) for t in team_store.values() if t.season_id == season_id]

    def find_by_name_in_season(name: str, season_id: str) -> list[Team]:
        return [
            t
            for t in team_store.values()
            if t.season_id == season_id and (t.name or "").lower() == name.lower()
        ]

    dao = MagicMock(spec=TeamDAO)
    dao.get_by_id.side_effect = get_by_id
    dao.create.side_effect = create
    dao.update.side_effect = update
    dao.delete.side_effect = delete
    dao.find_by_season.side_effect = find_by_season
    dao.find_by_name_in_season.side_effect = find_by_name_in_season
    return dao


@pytest.fixture
def team_service(team_store: dict[str, Team], team_dao: MagicMock, user: User) -> TeamService:
    """TeamService over the in-memory store."""

    def create_role(role: Role) -> Role:
        created = role.model_copy(update={"id": str(uuid4())})
        team_store[role.team_id].roles.append(created)
        return created

    def create_source(source: Source) -> Source:
        created = source.model_copy(update={"id": str(uuid4())})
        team_store[source.team_id].sources.append(created)
        return created

    role_dao = MagicMock(spec=RoleDAO)
    role_dao.create.side_effect = create_role
    source_dao = MagicMock(spec=SourceDAO)
    source_dao.create.side_effect = create_source
    user_dao = MagicMock(spec=UserDAO)
    user_dao.list_by_github_handle.return_value = [user]
    user_dao.find_by_github_handle.return_value = None

    return TeamService(
        team_dao=team_dao,
        role_dao=role_dao,
        source_dao=source_dao,
        user_dao=user_dao,
    )


@pytest.fixture
def app(team_service, season, now) -> FastAPI:
    """App with the database, clock and season pinned."""
    app = create_app()
    app.dependency_overrides[get_supabase] = lambda: MagicMock()
    app.dependency_overrides[get_team_service] = lambda: team_service
    app.dependency_overrides[get_current_season] = lambda: season
    app.dependency_overrides[get_now] = lambda: now
    return app


def _client_as(app: FastAPI, user: User) -> TestClient:
    async def mock_get_current_user():
        return user

    async def mock_get_optional_user():
        return user

    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_optional_user] = mock_get_optional_user
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def client_as_user(app: FastAPI, user: User) -> TestClient:
    """Provide a test client signed in as a regular user."""
    return _client_as(app, user)


@pytest.fixture
def client_as_admin(app: FastAPI, admin: User) -> TestClient:
    """Provide a test client signed in as an admin."""
    return _client_as(app, admin)


@pytest.fixture
def client_unauthenticated(app: FastAPI) -> TestClient:
    """Provide a test client with no authentication."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def add_team(team_store: dict[str, Team]):
    """Put a team into the store."""

    def add(team: Team) -> Team:
        team_store[team.id] = team
        return team

    return add
