"""Season model: one program cycle, labelled by its year."""

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel


class SeasonPhase(StrEnum):
    """Visibility phase of a season, relative to acceptance notifications."""

    PRE_NOTIFICATION = "pre_notification"  # Applications still being decided
    POST_NOTIFICATION = "post_notification"  # Acceptance letters have gone out


class Season(BaseModel):
    """A time-bounded program cycle. Exactly one season is current."""

    id: str | None = None
    name: str  # Year label, e.g. "2026"
    acceptance_notification_at: datetime | None = None

    def phase(self, now: datetime) -> SeasonPhase:
        """Phase of the season at ``now``.

        The season stays pre-notification until the notification timestamp
        is set and has been reached.
        """
        if self.acceptance_notification_at is None or self.acceptance_notification_at > now:
            return SeasonPhase.PRE_NOTIFICATION
        return SeasonPhase.POST_NOTIFICATION

    def acceptance_letters_sent(self, now: datetime) -> bool:
        return self.phase(now) == SeasonPhase.POST_NOTIFICATION

    @staticmethod
    def name_for(today: date) -> str:
        """Season name for a given day."""
        return str(today.year)

    def __str__(self) -> str:
        return self.name
