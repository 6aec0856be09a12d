# core/custom_roles.py

"""
Custom role store.

Custom roles live in one JSON list under the custom roles settings key.
Reads are cached for the permission cache window; failures degrade to
"no custom roles" and are logged, never raised to authorization callers.
"""

import json
import time
from typing import Callable, List, Optional

from pydantic import ValidationError

from core.cache import TimedCache
from core.config import settings
from core.errors import PermissionConfigError
from core.logging_config import logger
from core.roles import is_built_in_role, is_custom_role
from core.settings_store import SettingsStore
from models.role import CustomRole

__all__ = [
    "CustomRoleStore",
    "decode_custom_roles",
    "encode_custom_roles",
    "is_built_in_role",
    "is_custom_role",
]


def decode_custom_roles(raw: str) -> List[CustomRole]:
    """
    Strictly decode the stored document.

    A document that is not JSON or not a list raises PermissionConfigError.
    Individual malformed entries (and repeated names) are skipped.
    """
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise PermissionConfigError(f"custom roles document is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise PermissionConfigError(
            f"custom roles document must be a list, got {type(parsed).__name__}"
        )

    roles: List[CustomRole] = []
    seen = set()
    for index, item in enumerate(parsed):
        try:
            role = CustomRole.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping malformed custom role at index {index}: {e.errors()}")
            continue

        if role.name in seen:
            logger.warning(f"Skipping duplicate custom role '{role.name}'")
            continue
        seen.add(role.name)
        roles.append(role)

    return roles


def encode_custom_roles(roles: List[CustomRole]) -> str:
    return json.dumps([role.to_document() for role in roles])


class CustomRoleStore:
    def __init__(
        self,
        store: SettingsStore,
        key: Optional[str] = None,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self.key = key or settings.CUSTOM_ROLES_SETTING_KEY
        if ttl_seconds is None:
            ttl_seconds = settings.PERMISSIONS_CACHE_TTL_SECONDS
        self._cache: TimedCache[List[CustomRole]] = TimedCache(
            "custom_roles", ttl_seconds=ttl_seconds, clock=clock
        )

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------
    def fetch_custom_roles(self) -> List[CustomRole]:
        """Read and decode from the store; raises PermissionConfigError."""
        try:
            raw = self._store.get(self.key)
        except Exception as e:
            raise PermissionConfigError(f"could not read '{self.key}': {e}") from e

        if raw is None or raw == "":
            return []
        return decode_custom_roles(raw)

    def load_custom_roles(self) -> List[CustomRole]:
        """Uncached load; returns [] when absent or unreadable."""
        try:
            return self.fetch_custom_roles()
        except PermissionConfigError as e:
            logger.error(f"Error loading custom roles: {e}")
            return []

    def get_custom_roles(self) -> List[CustomRole]:
        """
        Cached accessor.

        A failed load is not cached: this request gets [] and the next one
        tries the store again.
        """
        try:
            return list(self._cache.get_or_reload(self.fetch_custom_roles))
        except PermissionConfigError as e:
            logger.error(f"Error loading custom roles: {e}")
            return []

    def find(self, name: str) -> Optional[CustomRole]:
        return next((r for r in self.get_custom_roles() if r.name == name), None)

    def invalidate_custom_role_cache(self):
        self._cache.invalidate()

    # -----------------------------------------------------
    # Writes (administrative surface)
    # -----------------------------------------------------
    def save_custom_roles(self, roles: List[CustomRole]):
        """
        Persist the full list, then invalidate the local cache.
        Store errors propagate; the cache is left alone when the write fails.
        """
        self._store.upsert(self.key, encode_custom_roles(roles))
        self.invalidate_custom_role_cache()
        logger.info(f"Saved {len(roles)} custom role(s)")
