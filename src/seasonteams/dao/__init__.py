"""Data Access Objects for database operations."""

from seasonteams.dao.base import BaseDAO, SupabaseClient
from seasonteams.dao.season_dao import SeasonDAO
from seasonteams.dao.team_dao import RoleDAO, SourceDAO, TeamDAO
from seasonteams.dao.user_dao import UserDAO

__all__ = [
    "BaseDAO",
    "RoleDAO",
    "SeasonDAO",
    "SourceDAO",
    "SupabaseClient",
    "TeamDAO",
    "UserDAO",
]
