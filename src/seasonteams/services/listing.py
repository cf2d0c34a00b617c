"""Season-phase visibility and ordering for the public team list."""

from datetime import datetime, timezone
from enum import StrEnum

from seasonteams.models.season import Season
from seasonteams.models.team import STUDENT_ROLE, Team

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

# Role names shown as columns on the list page
DISPLAY_ROLES = (STUDENT_ROLE,)


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortDirection":
        """``asc`` is ascending; anything else (including nothing) is descending."""
        return cls.ASC if value == cls.ASC.value else cls.DESC


def display_roles() -> list[str]:
    return [f"{name}s" for name in DISPLAY_ROLES]


def visible_teams(teams: list[Team], season: Season, now: datetime) -> list[Team]:
    """Teams of ``season`` that are listed in the season's phase at ``now``.

    Teams of any other season are dropped whatever their kind.
    """
    phase = season.phase(now)
    return [team for team in teams if team.season_id == season.id and team.listed_in(phase)]


def _kind_key(team: Team) -> tuple[bool, str]:
    # Undecided teams (no kind) go last
    return (team.kind is None, team.kind or "")


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def sort_by_kind_and_name(teams: list[Team]) -> list[Team]:
    """Order by kind, then by name ignoring case.

    Sorting happens here, after visibility filtering, so names compare
    case-insensitively in Python rather than by the database collation.
    """
    return sorted(teams, key=lambda team: (*_kind_key(team), (team.name or "").lower()))


def sort_by_activity(teams: list[Team], direction: SortDirection) -> list[Team]:
    """Order by kind, then by when the team's activities were created.

    Descending uses each team's newest activity, ascending its oldest. Teams
    without activities come first when descending and last when ascending.
    """
    descending = direction == SortDirection.DESC

    def activity_key(team: Team) -> tuple[bool, datetime]:
        stamps = [_aware(activity.created_at) for activity in team.activities]
        if not stamps:
            return (True, _EPOCH)
        return (False, max(stamps) if descending else min(stamps))

    by_activity = sorted(teams, key=activity_key, reverse=descending)
    return sorted(by_activity, key=_kind_key)
