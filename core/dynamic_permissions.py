# core/dynamic_permissions.py

"""
Dynamic role → permissions override.

When an override document exists it REPLACES the static matrix wholesale:
a built-in role missing from the document has no permissions while the
override is active. A missing, unreadable or corrupt document silently
falls back to the static matrix.
"""

import json
import time
from typing import Callable, Dict, FrozenSet, Iterable, Mapping, Optional

from core.cache import TimedCache
from core.config import settings
from core.errors import PermissionConfigError
from core.logging_config import logger
from core.permissions import Permission, get_static_role_permissions, normalize_permission
from core.roles import is_built_in_role
from core.settings_store import SettingsStore


RoleMatrix = Dict[str, FrozenSet[Permission]]


def decode_role_matrix(raw: str) -> RoleMatrix:
    """
    Strictly decode an override document.

    The document must be a JSON object. Keys that are not built-in roles,
    values that are not lists, and unknown permission identifiers are
    dropped with a warning.
    """
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise PermissionConfigError(f"role permissions document is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise PermissionConfigError(
            f"role permissions document must be an object, got {type(parsed).__name__}"
        )

    matrix: RoleMatrix = {}
    for role, values in parsed.items():
        if not is_built_in_role(role):
            logger.warning(f"Ignoring unknown role '{role}' in role permissions document")
            continue
        if not isinstance(values, list):
            logger.warning(f"Ignoring non-list permissions for role '{role}'")
            continue
        matrix[role] = clean_permission_values(values, context=role)

    return matrix


def clean_permission_values(values: Iterable, context: str = "") -> FrozenSet[Permission]:
    kept = set()
    for value in values:
        permission = normalize_permission(value)
        if permission is None:
            logger.warning(f"Ignoring unknown permission '{value}' for '{context}'")
            continue
        kept.add(permission)
    return frozenset(kept)


def encode_role_matrix(matrix: Mapping[str, Iterable[Permission]]) -> str:
    return json.dumps(
        {role: sorted(p.value for p in perms) for role, perms in matrix.items()},
        sort_keys=True,
    )


class DynamicMatrixStore:
    def __init__(
        self,
        store: SettingsStore,
        key: Optional[str] = None,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self.key = key or settings.ROLE_PERMISSIONS_SETTING_KEY
        if ttl_seconds is None:
            ttl_seconds = settings.PERMISSIONS_CACHE_TTL_SECONDS
        # Payload is None when no override is stored; absence is cached too.
        self._cache: TimedCache[Optional[RoleMatrix]] = TimedCache(
            "role_permissions", ttl_seconds=ttl_seconds, clock=clock
        )

    # -----------------------------------------------------
    # Reads
    # -----------------------------------------------------
    def fetch_dynamic_matrix(self) -> Optional[RoleMatrix]:
        """Read and decode; None if no override. Raises PermissionConfigError."""
        try:
            raw = self._store.get(self.key)
        except Exception as e:
            raise PermissionConfigError(f"could not read '{self.key}': {e}") from e

        if raw is None or raw == "":
            return None
        return decode_role_matrix(raw)

    def load_dynamic_matrix(self) -> Optional[RoleMatrix]:
        """Uncached load; None when absent or unreadable."""
        try:
            return self.fetch_dynamic_matrix()
        except PermissionConfigError as e:
            logger.error(f"Error loading dynamic role permissions: {e}")
            return None

    def get_override(self) -> Optional[RoleMatrix]:
        """Cached override, or None when absent or the load failed."""
        try:
            return self._cache.get_or_reload(self.fetch_dynamic_matrix)
        except PermissionConfigError as e:
            logger.error(f"Error loading dynamic role permissions: {e}")
            return None

    def get_current_matrix(self) -> RoleMatrix:
        """The active matrix: the override if present, else the static one."""
        override = self.get_override()
        if override is None:
            return get_static_role_permissions()
        return dict(override)

    def invalidate_dynamic_matrix_cache(self):
        self._cache.invalidate()

    # -----------------------------------------------------
    # Writes (administrative surface)
    # -----------------------------------------------------
    def save_matrix(self, matrix: Mapping[str, Iterable[Permission]]):
        """Persist a complete override, then invalidate the local cache."""
        self._store.upsert(self.key, encode_role_matrix(matrix))
        self.invalidate_dynamic_matrix_cache()
        logger.info(f"Saved dynamic role permissions for {len(matrix)} role(s)")

    def reset_to_static(self) -> bool:
        """
        Delete the persisted override so every instance falls back to the
        static matrix once its cache expires. Returns whether one existed.
        """
        existed = self._store.get(self.key) is not None
        self._store.delete(self.key)
        self.invalidate_dynamic_matrix_cache()
        logger.info("Role permissions reset to the static configuration")
        return existed
