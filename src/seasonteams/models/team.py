"""Team models: a team plus its roles, sources and project."""

from datetime import date

from pydantic import BaseModel, Field

from seasonteams.models.activity import Activity
from seasonteams.models.season import SeasonPhase
from seasonteams.models.user import User

STUDENT_ROLE = "student"
BLOG_SOURCE = "blog"


class Role(BaseModel):
    """A user's membership in a team ("student", "coach", "mentor", ...)."""

    id: str | None = None
    team_id: str | None = None
    user_id: str | None = None
    name: str
    github_handle: str | None = None


class Source(BaseModel):
    """A link published by a team, e.g. its blog."""

    id: str | None = None
    team_id: str | None = None
    kind: str = BLOG_SOURCE
    url: str | None = None


class Project(BaseModel):
    """Optional one-to-one extension of a team."""

    id: str | None = None
    team_id: str | None = None
    name: str | None = None


class Team(BaseModel):
    """A team taking part in one season."""

    id: str | None = None
    season_id: str | None = None
    name: str | None = None
    kind: str | None = None  # "sponsored", "voluntary", ...; None until decided
    twitter_handle: str | None = None
    github_handle: str | None = None
    description: str | None = None
    post_info: str | None = None
    event_id: str | None = None
    checked: bool = False
    starts_on: date | None = None
    finishes_on: date | None = None
    invisible: bool = False
    project_name: str | None = None

    roles: list[Role] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)
    project: Project | None = None
    activities: list[Activity] = Field(default_factory=list)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def listed_in(self, phase: SeasonPhase) -> bool:
        """Whether the team shows up in public listings during ``phase``.

        Before acceptance letters go out only undecided, visible teams are
        listed; afterwards only teams with a kind are.
        """
        if phase == SeasonPhase.PRE_NOTIFICATION:
            return self.kind is None and not self.invisible
        return self.kind is not None

    def has_member(self, user: User) -> bool:
        """Whether ``user`` holds any role on this team."""
        for role in self.roles:
            if role.user_id is not None:
                if role.user_id == user.id:
                    return True
            elif role.github_handle and role.github_handle.lower() == user.github_handle.lower():
                return True
        return False

    def members_with_role(self, name: str) -> list[Role]:
        return [role for role in self.roles if role.name == name]

    def __str__(self) -> str:
        return self.name or "(unnamed team)"
