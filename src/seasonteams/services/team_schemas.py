"""Request payloads and validation errors for team create/update."""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NestedAction(StrEnum):
    """What to do with one nested role/source entry."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class RoleEntry(BaseModel):
    """A nested role in a team payload."""

    model_config = ConfigDict(extra="ignore")

    action: NestedAction = NestedAction.CREATE
    id: str | None = None
    name: str | None = None
    github_handle: str | None = None


class SourceEntry(BaseModel):
    """A nested source in a team payload."""

    model_config = ConfigDict(extra="ignore")

    action: NestedAction = NestedAction.CREATE
    id: str | None = None
    kind: str | None = None  # "blog" when created without one
    url: str | None = None

    @property
    def is_blank(self) -> bool:
        """A new source without a URL, or an update that empties the URL."""
        if self.action == NestedAction.CREATE:
            return not self.url
        return self.action == NestedAction.UPDATE and self.url == ""


class TeamPayload(BaseModel):
    """Request body for creating or updating a team.

    Only the fields below are accepted; anything else in the request body
    (``season_id``, ``kind``, ...) is dropped on parsing.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    twitter_handle: str | None = None
    github_handle: str | None = None
    description: str | None = None
    post_info: str | None = None
    event_id: str | None = None
    checked: bool | None = None
    starts_on: date | None = None
    finishes_on: date | None = None
    invisible: bool | None = None
    project_name: str | None = None

    roles: list[RoleEntry] = Field(default_factory=list)
    sources: list[SourceEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def drop_blank_sources(self) -> "TeamPayload":
        """Discard sources submitted with an empty URL."""
        self.sources = [source for source in self.sources if not source.is_blank]
        return self

    def team_fields(self) -> dict:
        """Team attributes explicitly present in the request."""
        return self.model_dump(exclude_unset=True, exclude={"roles", "sources"})


class TeamValidationError(Exception):
    """A team failed validation; carries ``{field: [messages]}``."""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__("; ".join(f"{field} {', '.join(msgs)}" for field, msgs in errors.items()))
