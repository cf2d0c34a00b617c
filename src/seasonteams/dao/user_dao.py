"""Data Access Object for Users."""

from supabase import Client

from seasonteams.dao.base import BaseDAO
from seasonteams.models.user import User


class UserDAO(BaseDAO[User]):
    """DAO for User entities."""

    table_name = "users"
    model_class = User

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def list_by_github_handle(self) -> list[User]:
        """All users ordered by GitHub handle."""
        result = self.table.select("*").order("github_handle").execute()
        return [self._to_model(row) for row in result.data]

    def find_by_github_handle(self, github_handle: str) -> User | None:
        """Find a user by GitHub handle (case-insensitive).

        Returns:
            The User or None if not found
        """
        result = self.table.select("*").ilike("github_handle", github_handle).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])
