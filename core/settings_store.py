# core/settings_store.py

"""
Key/value document store for system settings.

Permission documents (the dynamic role matrix and the custom role list) are
stored as JSON strings under well-known keys. The engine only needs
get / upsert / delete.
"""

from typing import Callable, Optional, Protocol

from supabase import Client

from core.config import settings
from core.supabase_client import get_supabase_client


class SettingsStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def upsert(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class StoreNotConfiguredError(RuntimeError):
    """Supabase credentials are missing, so the store cannot be reached."""


# ============================================================
# Supabase-backed store (system_settings table: key, value)
# ============================================================
class SupabaseSettingsStore:
    def __init__(
        self,
        client_factory: Callable[[], Optional[Client]] = get_supabase_client,
        table: Optional[str] = None,
    ):
        self._client_factory = client_factory
        self.table = table or settings.SYSTEM_SETTINGS_TABLE

    def _client(self) -> Client:
        client = self._client_factory()
        if client is None:
            raise StoreNotConfiguredError("Supabase client not configured")
        return client

    def get(self, key: str) -> Optional[str]:
        result = (
            self._client()
            .table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        rows = result.data or []
        if not rows:
            return None
        return rows[0].get("value")

    def upsert(self, key: str, value: str) -> None:
        (
            self._client()
            .table(self.table)
            .upsert({"key": key, "value": value}, on_conflict="key")
            .execute()
        )

    def delete(self, key: str) -> None:
        (
            self._client()
            .table(self.table)
            .delete()
            .eq("key", key)
            .execute()
        )
