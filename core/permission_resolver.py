# core/permission_resolver.py

"""
Permission resolver.

Effective table = active matrix (dynamic override if present, else static)
with custom roles layered on top. A custom role whose name equals a built-in
role is dropped: built-ins can never be shadowed, neither in permissions nor
in metadata.

Unknown roles have no permissions. Store failures are absorbed by the two
stores, so none of these methods raise because of configuration problems.
"""

import time
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional

from core.custom_roles import CustomRoleStore
from core.dynamic_permissions import DynamicMatrixStore
from core.logging_config import logger
from core.permissions import Permission, PermissionLike, normalize_permission
from core.roles import (
    ALL_ROLES,
    DEFAULT_ROLE_COLOR,
    DEFAULT_ROLE_DESCRIPTION,
    DEFAULT_ROUTE,
    ROLE_METADATA,
    RoleMetadata,
    format_role_name,
    is_built_in_role,
    is_reserved_role_name,
)
from core.settings_store import SettingsStore
from models.role import CustomRole


EffectiveTable = Dict[str, FrozenSet[Permission]]


class PermissionResolver:
    def __init__(self, dynamic_matrix: DynamicMatrixStore, custom_roles: CustomRoleStore):
        self.dynamic_matrix = dynamic_matrix
        self.custom_roles = custom_roles

    @classmethod
    def from_store(
        cls,
        store: SettingsStore,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "PermissionResolver":
        return cls(
            DynamicMatrixStore(store, ttl_seconds=ttl_seconds, clock=clock),
            CustomRoleStore(store, ttl_seconds=ttl_seconds, clock=clock),
        )

    # -----------------------------------------------------
    # Custom role layer
    # -----------------------------------------------------
    def _visible_custom_roles(self) -> List[CustomRole]:
        """Custom roles minus any that use a reserved name (built-in or legacy ADMIN)."""
        visible = []
        for role in self.custom_roles.get_custom_roles():
            if is_reserved_role_name(role.name):
                logger.warning(
                    f"Custom role '{role.name}' uses a reserved role name and is ignored"
                )
                continue
            visible.append(role)
        return visible

    # -----------------------------------------------------
    # Effective permissions
    # -----------------------------------------------------
    def get_effective_table(self) -> EffectiveTable:
        table: EffectiveTable = dict(self.dynamic_matrix.get_current_matrix())
        for role in self._visible_custom_roles():
            table[role.name] = frozenset(role.permissions)
        return table

    def get_permissions_for_role(self, role: str) -> FrozenSet[Permission]:
        return self.get_effective_table().get(role, frozenset())

    def has_permission(self, role: str, permission: PermissionLike) -> bool:
        canonical = normalize_permission(permission)
        if canonical is None:
            return False
        return canonical in self.get_permissions_for_role(role)

    def has_any_permission(self, role: str, permissions: Iterable[PermissionLike]) -> bool:
        granted = self.get_permissions_for_role(role)
        return any(normalize_permission(p) in granted for p in permissions)

    def has_all_permissions(self, role: str, permissions: Iterable[PermissionLike]) -> bool:
        granted = self.get_permissions_for_role(role)
        return all(normalize_permission(p) in granted for p in permissions)

    # -----------------------------------------------------
    # Role lookups (built-in first, then custom)
    # -----------------------------------------------------
    def get_all_roles(self) -> List[str]:
        return [r.value for r in ALL_ROLES] + [r.name for r in self._visible_custom_roles()]

    def is_valid_role(self, role: str) -> bool:
        if is_built_in_role(role):
            return True
        return any(r.name == role for r in self._visible_custom_roles())

    def get_custom_role_metadata(self, role: str) -> Optional[RoleMetadata]:
        if is_reserved_role_name(role):
            return None
        custom = self.custom_roles.find(role)
        return custom.metadata() if custom else None

    def get_custom_role_permissions(self, role: str) -> FrozenSet[Permission]:
        if is_reserved_role_name(role):
            return frozenset()
        custom = self.custom_roles.find(role)
        return frozenset(custom.permissions) if custom else frozenset()

    def get_all_role_metadata(self) -> Dict[str, RoleMetadata]:
        metadata: Dict[str, RoleMetadata] = {
            role.value: meta for role, meta in ROLE_METADATA.items()
        }
        for custom in self._visible_custom_roles():
            metadata[custom.name] = custom.metadata()
        return metadata

    def get_role_metadata(self, role: str) -> Optional[RoleMetadata]:
        return ROLE_METADATA.get(role) or self.get_custom_role_metadata(role)

    def get_role_label(self, role: str) -> str:
        metadata = self.get_role_metadata(role)
        return metadata.label if metadata else format_role_name(role)

    def get_role_color(self, role: str) -> str:
        metadata = self.get_role_metadata(role)
        return metadata.color if metadata else DEFAULT_ROLE_COLOR

    def get_role_description(self, role: str) -> str:
        metadata = self.get_role_metadata(role)
        return metadata.description if metadata else DEFAULT_ROLE_DESCRIPTION

    def get_default_route(self, role: str) -> str:
        metadata = self.get_role_metadata(role)
        return metadata.default_route if metadata else DEFAULT_ROUTE

    # -----------------------------------------------------
    # Cache control
    # -----------------------------------------------------
    def invalidate_caches(self):
        self.dynamic_matrix.invalidate_dynamic_matrix_cache()
        self.custom_roles.invalidate_custom_role_cache()
