"""Pydantic models for seasonal team management."""

from seasonteams.models.activity import Activity
from seasonteams.models.application import Application
from seasonteams.models.season import Season, SeasonPhase
from seasonteams.models.team import (
    BLOG_SOURCE,
    STUDENT_ROLE,
    Project,
    Role,
    Source,
    Team,
)
from seasonteams.models.user import User

__all__ = [
    # Activity
    "Activity",
    # Application
    "Application",
    # Season
    "Season",
    "SeasonPhase",
    # Team
    "BLOG_SOURCE",
    "Project",
    "Role",
    "STUDENT_ROLE",
    "Source",
    "Team",
    # User
    "User",
]
