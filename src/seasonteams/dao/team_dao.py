"""Data Access Objects for Teams and their roles, sources and project."""

from supabase import Client

from seasonteams.dao.base import BaseDAO
from seasonteams.models.team import Role, Source, Team

TEAM_COLUMNS = (
    "season_id",
    "name",
    "kind",
    "twitter_handle",
    "github_handle",
    "description",
    "post_info",
    "event_id",
    "checked",
    "starts_on",
    "finishes_on",
    "invisible",
    "project_name",
)

# Tables holding rows keyed by team_id
DEPENDENT_TABLES = ("roles", "sources", "projects", "activities", "applications")


class TeamDAO(BaseDAO[Team]):
    """DAO for Team entities.

    Reads embed roles, sources and the project so a loaded Team is complete.
    """

    table_name = "teams"
    model_class = Team
    select_columns = "*, roles(*), sources(*), projects(*)"

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_by_season(self, season_id: str, with_activities: bool = False) -> list[Team]:
        """Find all teams of a season.

        Args:
            season_id: The season's ID
            with_activities: Also embed each team's activity timestamps

        Returns:
            List of Teams, unordered
        """
        columns = self.select_columns
        if with_activities:
            columns = f"{columns}, activities(id, team_id, created_at)"
        result = self.table.select(columns).eq("season_id", season_id).execute()
        return [self._to_model(row) for row in result.data]

    def find_by_name_in_season(self, name: str, season_id: str) -> list[Team]:
        """Find teams of a season whose name matches ``name`` case-insensitively."""
        result = (
            self.table.select("id, name, season_id")
            .eq("season_id", season_id)
            .ilike("name", name)
            .execute()
        )
        return [self._to_model(row) for row in result.data]

    def delete(self, id: str) -> bool:
        """Delete a team together with every row that references it.

        Children go first so the team row is never blocked by a foreign key.
        """
        for child_table in DEPENDENT_TABLES:
            self.client.table(child_table).delete().eq("team_id", id).execute()
        return super().delete(id)

    def _to_model(self, row: dict) -> Team:
        """Convert database row (with embedded children) to a Team model."""
        data = dict(row)
        projects = data.pop("projects", None)
        # PostgREST embeds a one-to-one as an object when the FK is unique
        if isinstance(projects, list):
            projects = projects[0] if projects else None
        data["project"] = projects
        for key in ("roles", "sources", "activities"):
            if data.get(key) is None:
                data.pop(key, None)
        return Team(**data)

    def _to_db(self, model: Team) -> dict:
        """Convert Team model to a teams row (children are stored separately)."""
        return model.model_dump(mode="json", include=set(TEAM_COLUMNS))


class RoleDAO(BaseDAO[Role]):
    """DAO for team roles."""

    table_name = "roles"
    model_class = Role

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def _to_db(self, model: Role) -> dict:
        return model.model_dump(mode="json", exclude={"id"})


class SourceDAO(BaseDAO[Source]):
    """DAO for team sources (blogs, feeds)."""

    table_name = "sources"
    model_class = Source

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def _to_db(self, model: Source) -> dict:
        return model.model_dump(mode="json", exclude={"id"})

