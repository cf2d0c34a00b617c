"""Activity model: feed entries (blog posts, updates) published by a team."""

from datetime import datetime

from pydantic import BaseModel


class Activity(BaseModel):
    """A single feed entry attached to a team."""

    id: str | None = None
    team_id: str
    kind: str | None = None  # e.g. "feed_entry", "status_update"
    title: str | None = None
    created_at: datetime
