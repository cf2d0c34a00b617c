"""Data Access Object for Seasons."""

from datetime import date, datetime

from supabase import Client

from seasonteams import get_logger
from seasonteams.dao.base import BaseDAO
from seasonteams.models.season import Season

logger = get_logger(__name__)


class SeasonDAO(BaseDAO[Season]):
    """DAO for Season entities."""

    table_name = "seasons"
    model_class = Season

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def find_by_name(self, name: str) -> Season | None:
        """Find a season by its year label.

        Returns:
            The Season or None if not found
        """
        result = self.table.select("*").eq("name", name).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def current(self, today: date | None = None) -> Season:
        """Get the current season, creating it on first access.

        The current season is the one named after the current year.

        Args:
            today: Reference day (defaults to today)

        Returns:
            The current Season
        """
        name = Season.name_for(today or date.today())
        season = self.find_by_name(name)
        if season is None:
            season = self.create(Season(name=name))
            logger.info("season_created", season_id=season.id, season=name)
        return season

    def set_acceptance_notification_at(self, id: str, at: datetime | None) -> Season | None:
        """Set (or clear, with None) when acceptance letters were sent.

        Returns:
            The updated Season or None if not found
        """
        result = (
            self.table.update({"acceptance_notification_at": at.isoformat() if at else None})
            .eq("id", id)
            .execute()
        )

        if not result.data:
            return None

        return self._to_model(result.data[0])
