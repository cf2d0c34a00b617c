"""User model."""

from pydantic import BaseModel


class User(BaseModel):
    """A registered user, identified publicly by their GitHub handle."""

    id: str
    github_handle: str
    name: str | None = None
    is_admin: bool = False

    def __str__(self) -> str:
        return self.name or self.github_handle
