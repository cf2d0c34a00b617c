"""Service layer for seasonteams business logic."""

from seasonteams.services.listing import (
    SortDirection,
    display_roles,
    sort_by_activity,
    sort_by_kind_and_name,
    visible_teams,
)
from seasonteams.services.permissions import TeamAction, can
from seasonteams.services.team_schemas import (
    NestedAction,
    RoleEntry,
    SourceEntry,
    TeamPayload,
    TeamValidationError,
)
from seasonteams.services.team_service import TeamService

__all__ = [
    "can",
    "display_roles",
    "NestedAction",
    "RoleEntry",
    "sort_by_activity",
    "sort_by_kind_and_name",
    "SortDirection",
    "SourceEntry",
    "TeamAction",
    "TeamPayload",
    "TeamService",
    "TeamValidationError",
    "visible_teams",
]
