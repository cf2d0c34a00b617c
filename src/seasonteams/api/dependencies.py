"""FastAPI dependencies for dependency injection.

Usage in routes:
    from seasonteams.api.dependencies import CurrentSeasonDep, TeamServiceDep

    @router.get("/teams")
    def list_teams(season: CurrentSeasonDep, service: TeamServiceDep):
        return service.list_teams(season, now=...)
"""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from supabase import Client, create_client

from seasonteams.config import Settings, get_settings
from seasonteams.dao.season_dao import SeasonDAO
from seasonteams.dao.team_dao import RoleDAO, SourceDAO, TeamDAO
from seasonteams.dao.user_dao import UserDAO
from seasonteams.models import Season
from seasonteams.services.team_service import TeamService


def get_settings_dep() -> Settings:
    """Get application settings (dependency wrapper)."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


@lru_cache
def get_supabase_client(supabase_url: str, supabase_key: str) -> Client:
    """Create cached Supabase client."""
    return create_client(supabase_url, supabase_key)


def get_supabase(settings: SettingsDep) -> Client:
    """Get Supabase client for database operations."""
    return get_supabase_client(
        settings.supabase_url,
        settings.supabase_key.get_secret_value(),
    )


SupabaseDep = Annotated[Client, Depends(get_supabase)]


def get_now() -> datetime:
    """Current time (UTC); overridden in tests to pin the season phase."""
    return datetime.now(timezone.utc)


NowDep = Annotated[datetime, Depends(get_now)]


def get_season_dao(client: SupabaseDep) -> SeasonDAO:
    return SeasonDAO(client)


def get_team_dao(client: SupabaseDep) -> TeamDAO:
    return TeamDAO(client)


def get_user_dao(client: SupabaseDep) -> UserDAO:
    return UserDAO(client)


SeasonDAODep = Annotated[SeasonDAO, Depends(get_season_dao)]
TeamDAODep = Annotated[TeamDAO, Depends(get_team_dao)]
UserDAODep = Annotated[UserDAO, Depends(get_user_dao)]


def get_team_service(
    client: SupabaseDep, team_dao: TeamDAODep, user_dao: UserDAODep
) -> TeamService:
    """Get TeamService wired to the request's DAOs."""
    return TeamService(
        team_dao=team_dao,
        role_dao=RoleDAO(client),
        source_dao=SourceDAO(client),
        user_dao=user_dao,
    )


TeamServiceDep = Annotated[TeamService, Depends(get_team_service)]


def get_current_season(dao: SeasonDAODep, now: NowDep) -> Season:
    """The season named after the current year (created if missing)."""
    return dao.current(now.date())


CurrentSeasonDep = Annotated[Season, Depends(get_current_season)]
