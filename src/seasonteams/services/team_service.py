"""Service for listing, building and persisting teams."""

from datetime import datetime

from seasonteams import get_logger
from seasonteams.dao.team_dao import RoleDAO, SourceDAO, TeamDAO
from seasonteams.dao.user_dao import UserDAO
from seasonteams.models.season import Season
from seasonteams.models.team import BLOG_SOURCE, STUDENT_ROLE, Project, Role, Source, Team
from seasonteams.models.user import User
from seasonteams.services.listing import (
    SortDirection,
    sort_by_activity,
    sort_by_kind_and_name,
    visible_teams,
)
from seasonteams.services.team_schemas import (
    NestedAction,
    RoleEntry,
    SourceEntry,
    TeamPayload,
    TeamValidationError,
)

logger = get_logger(__name__)

# Team flags that cannot be null; an explicit null in a payload leaves them as they are
_NON_NULL_FIELDS = frozenset({"checked", "invisible"})


class TeamService:
    """Business logic behind the team pages and API.

    Context (current season, current user, current time) is always passed in
    by the caller.
    """

    def __init__(
        self,
        team_dao: TeamDAO | None = None,
        role_dao: RoleDAO | None = None,
        source_dao: SourceDAO | None = None,
        user_dao: UserDAO | None = None,
    ):
        self.team_dao = team_dao or TeamDAO()
        self.role_dao = role_dao or RoleDAO()
        self.source_dao = source_dao or SourceDAO()
        self.user_dao = user_dao or UserDAO()

    # =========================================================================
    # Reads
    # =========================================================================

    def list_teams(
        self,
        season: Season,
        now: datetime,
        sort: str | None = None,
        direction: str | None = None,
    ) -> list[Team]:
        """Teams of the current season visible in its phase, ordered for display.

        Args:
            season: The current season
            now: Reference time for the season phase
            sort: Any value switches to activity-based ordering
            direction: "asc" for ascending activity order, else descending
        """
        teams = self.team_dao.find_by_season(season.id, with_activities=bool(sort))
        teams = visible_teams(teams, season, now)
        if sort:
            return sort_by_activity(teams, SortDirection.parse(direction))
        return sort_by_kind_and_name(teams)

    def get_team(self, team_id: str) -> Team | None:
        return self.team_dao.get_by_id(team_id)

    def users_for_form(self) -> list[User]:
        return self.user_dao.list_by_github_handle()

    def build_new(self, user: User) -> Team:
        """Unsaved team prefilled with the user as student and a blog source."""
        return Team(
            roles=[Role(name=STUDENT_ROLE, github_handle=user.github_handle, user_id=user.id)],
            sources=[Source(kind=BLOG_SOURCE)],
        )

    def prepare_edit(self, team: Team) -> Team:
        """Copy of ``team`` with a blank blog source and a project when missing."""
        editable = team.model_copy(deep=True)
        if not editable.sources:
            editable.sources.append(Source(team_id=team.id, kind=BLOG_SOURCE))
        if editable.project is None:
            editable.project = Project(team_id=team.id)
        return editable

    def preview(self, team: Team, payload: TeamPayload) -> Team:
        """Unsaved copy of ``team`` showing what ``payload`` would change.

        Used to re-present a form after a failed save.
        """
        draft = self._apply_fields(team.model_copy(deep=True), payload)
        for entry in payload.roles:
            if entry.action == NestedAction.CREATE and entry.name:
                draft.roles.append(Role(name=entry.name, github_handle=entry.github_handle))
        for entry in payload.sources:
            if entry.action == NestedAction.CREATE:
                draft.sources.append(Source(kind=entry.kind or BLOG_SOURCE, url=entry.url))
        return draft

    # =========================================================================
    # Writes
    # =========================================================================

    def create(self, payload: TeamPayload, season: Season) -> Team:
        """Create a team in ``season`` from a request payload.

        The team is deleted again if any of its roles or sources cannot be
        saved.

        Raises:
            TeamValidationError: The team or its nested entries are invalid
        """
        team = self._apply_fields(Team(), payload)
        team.season_id = season.id

        self._validate(team, payload)
        created = self._save(team)

        try:
            self._apply_roles(created, payload.roles)
            self._apply_sources(created, payload.sources)
        except Exception as e:
            # Nested rows failed; do not leave a half-built team behind
            logger.error("team_create_rolled_back", team_id=created.id, error=str(e))
            self.team_dao.delete(created.id)
            raise

        return self.team_dao.get_by_id(created.id) or created

    def update(self, team: Team, payload: TeamPayload) -> Team:
        """Apply a request payload to an existing team.

        Raises:
            TeamValidationError: The team or its nested entries are invalid
        """
        updated = self._apply_fields(team.model_copy(deep=True), payload)

        self._validate(updated, payload)
        self._save(updated)

        self._apply_roles(updated, payload.roles)
        self._apply_sources(updated, payload.sources)

        return self.team_dao.get_by_id(team.id) or updated

    def destroy(self, team: Team) -> bool:
        """Delete a team and every row attached to it."""
        return self.team_dao.delete(team.id)

    # =========================================================================
    # Internals
    # =========================================================================

    @staticmethod
    def _apply_fields(team: Team, payload: TeamPayload) -> Team:
        for field, value in payload.team_fields().items():
            if value is None and field in _NON_NULL_FIELDS:
                continue
            setattr(team, field, value)
        return team

    def _validate(self, team: Team, payload: TeamPayload) -> None:
        errors: dict[str, list[str]] = {}

        def add(field: str, message: str) -> None:
            errors.setdefault(field, []).append(message)

        if not team.name or not team.name.strip():
            add("name", "can't be blank")
        else:
            taken = self.team_dao.find_by_name_in_season(team.name.strip(), team.season_id)
            if any(other.id != team.id for other in taken):
                add("name", "has already been taken")

        if team.starts_on and team.finishes_on and team.finishes_on < team.starts_on:
            add("finishes_on", "must be on or after the start date")

        role_ids = {role.id for role in team.roles}
        for entry in payload.roles:
            if entry.action != NestedAction.CREATE and entry.id not in role_ids:
                add("roles", f"unknown role {entry.id!r}")
            elif entry.action == NestedAction.CREATE and not (entry.name and entry.name.strip()):
                add("roles", "name can't be blank")

        source_ids = {source.id for source in team.sources}
        for entry in payload.sources:
            if entry.action != NestedAction.CREATE and entry.id not in source_ids:
                add("sources", f"unknown source {entry.id!r}")

        if errors:
            raise TeamValidationError(errors)

    def _save(self, team: Team) -> Team:
        try:
            if team.is_persisted:
                saved = self.team_dao.update(team.id, team)
            else:
                saved = self.team_dao.create(team)
        except Exception as e:
            error_str = str(e).lower()
            if "duplicate" in error_str or "unique" in error_str:
                raise TeamValidationError({"name": ["has already been taken"]}) from e
            raise
        return saved or team

    def _user_id_for(self, github_handle: str | None) -> str | None:
        if not github_handle:
            return None
        user = self.user_dao.find_by_github_handle(github_handle)
        if user is None:
            logger.info("role_user_unknown", github_handle=github_handle)
            return None
        return user.id

    def _apply_roles(self, team: Team, entries: list[RoleEntry]) -> None:
        existing = {role.id: role for role in team.roles}
        for entry in entries:
            if entry.action == NestedAction.DELETE:
                self.role_dao.delete(entry.id)
            elif entry.action == NestedAction.UPDATE:
                role = existing[entry.id].model_copy()
                if entry.name is not None:
                    role.name = entry.name
                if entry.github_handle is not None:
                    role.github_handle = entry.github_handle
                    role.user_id = self._user_id_for(entry.github_handle)
                self.role_dao.update(role.id, role)
            else:
                self.role_dao.create(
                    Role(
                        team_id=team.id,
                        name=entry.name,
                        github_handle=entry.github_handle,
                        user_id=self._user_id_for(entry.github_handle),
                    )
                )

    def _apply_sources(self, team: Team, entries: list[SourceEntry]) -> None:
        existing = {source.id: source for source in team.sources}
        for entry in entries:
            if entry.action == NestedAction.DELETE:
                self.source_dao.delete(entry.id)
            elif entry.action == NestedAction.UPDATE:
                source = existing[entry.id].model_copy()
                if entry.kind is not None:
                    source.kind = entry.kind
                if entry.url is not None:
                    source.url = entry.url
                self.source_dao.update(source.id, source)
            else:
                self.source_dao.create(
                    Source(team_id=team.id, kind=entry.kind or BLOG_SOURCE, url=entry.url)
                )
