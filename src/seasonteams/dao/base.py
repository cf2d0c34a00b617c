"""Base DAO with Supabase client connection."""

from typing import Generic, TypeVar

from pydantic import BaseModel
from supabase import Client, create_client

from seasonteams.config import get_settings

T = TypeVar("T", bound=BaseModel)


class SupabaseClient:
    """Process-wide Supabase client for code running outside a request (CLI, scripts)."""

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """Get or create the client, preferring the service role key."""
        if cls._instance is None:
            settings = get_settings()
            key = settings.supabase_service_role_key or settings.supabase_key
            cls._instance = create_client(settings.supabase_url, key.get_secret_value())

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the client (useful for testing)."""
        cls._instance = None


class BaseDAO(Generic[T]):
    """Base Data Access Object with common CRUD operations."""

    table_name: str
    model_class: type[T]
    select_columns: str = "*"

    def __init__(self, client: Client | None = None):
        """Initialize the DAO.

        Args:
            client: Supabase client. If not provided, uses the shared one.
        """
        self.client = client or SupabaseClient.get_client()

    @property
    def table(self):
        """Get the table reference."""
        return self.client.table(self.table_name)

    def get_by_id(self, id: str) -> T | None:
        """Get a single record by ID.

        Returns:
            The model instance or None if not found
        """
        result = self.table.select(self.select_columns).eq("id", id).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def create(self, model: T) -> T:
        """Insert a record and return it with its ID populated."""
        data = self._to_db(model)
        result = self.table.insert(data).execute()
        return self._to_model(result.data[0])

    def update(self, id: str, model: T) -> T | None:
        """Overwrite an existing record.

        Returns:
            The updated model or None if not found
        """
        data = self._to_db(model)
        result = self.table.update(data).eq("id", id).execute()

        if not result.data:
            return None

        return self._to_model(result.data[0])

    def delete(self, id: str) -> bool:
        """Delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        result = self.table.delete().eq("id", id).execute()
        return len(result.data) > 0

    def _to_model(self, row: dict) -> T:
        """Convert a database row to a model instance.

        Override this method for custom mapping logic.
        """
        return self.model_class(**row)

    def _to_db(self, model: T) -> dict:
        """Convert a model instance to a database row.

        Override this method for custom mapping logic.
        """
        return model.model_dump(mode="json", exclude_none=True)
