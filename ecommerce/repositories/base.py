"""Base repository with shared Supabase client."""

from supabase._async.client import AsyncClient


class BaseRepository:
    """Base class for Supabase-backed repositories.

    All methods should use await with the client.
    """

    def __init__(self, client: AsyncClient) -> None:
        self.client = client
