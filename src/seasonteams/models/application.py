"""Application model: a team's submission to take part in a season."""

from typing import Any

from pydantic import BaseModel, Field


class Application(BaseModel):
    """Application submitted by a team.

    ``application_data`` is free-form (project name, coding levels, student
    name, location, minimum money, coach hours per week, ...).
    """

    id: str | None = None
    team_id: str
    season_id: str | None = None
    application_data: dict[str, Any] = Field(default_factory=dict)

    @property
    def project_name(self) -> str | None:
        return self.application_data.get("project_name")
