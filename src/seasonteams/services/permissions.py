"""Permission checks for team actions.

Usage:
    from seasonteams.services.permissions import TeamAction, can

    if not can(user, TeamAction.UPDATE, team):
        ...  # deny before touching the database
"""

from enum import StrEnum

from seasonteams.models.team import Team
from seasonteams.models.user import User


class TeamAction(StrEnum):
    READ = "read"
    CREATE = "create"
    EDIT = "edit"
    UPDATE = "update"
    DESTROY = "destroy"


MEMBER_ACTIONS = frozenset({TeamAction.EDIT, TeamAction.UPDATE, TeamAction.DESTROY})


def can(user: User | None, action: TeamAction, team: Team | None = None) -> bool:
    """Whether ``user`` may perform ``action`` on ``team``.

    Anyone may read. Any signed-in user may create. Editing, updating and
    destroying a team is reserved for admins and the team's own members.
    """
    if action == TeamAction.READ:
        return True
    if user is None:
        return False
    if action == TeamAction.CREATE:
        return True
    if action in MEMBER_ACTIONS:
        if user.is_admin:
            return True
        return team is not None and team.has_member(user)
    return False
