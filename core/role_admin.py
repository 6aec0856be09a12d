# core/role_admin.py

"""
Administrative mutations of the permission configuration.

Each operation writes to the settings store first; the store classes
invalidate their local cache only after the write succeeded. Other
processes pick the change up when their own cache window expires.
"""

from typing import Dict, FrozenSet, List, Mapping

from fastapi import HTTPException

from core.dynamic_permissions import clean_permission_values
from core.errors import PermissionConfigError, handle_store_error
from core.logging_config import logger
from core.permission_resolver import PermissionResolver
from core.permissions import Permission, normalize_permissions
from core.roles import is_built_in_role, is_reserved_role_name
from models.role import CustomRole, CustomRoleCreate, CustomRoleUpdate


def _current_custom_roles(resolver: PermissionResolver) -> List[CustomRole]:
    """
    Fresh, strict read for read-modify-write. A corrupt or unreachable
    document must not be overwritten with a partial list.
    """
    try:
        return resolver.custom_roles.fetch_custom_roles()
    except PermissionConfigError as e:
        logger.error(f"Cannot modify custom roles: {e}")
        raise HTTPException(503, "Custom role configuration is unavailable")


def _save_custom_roles(resolver: PermissionResolver, roles: List[CustomRole], operation: str):
    try:
        resolver.custom_roles.save_custom_roles(roles)
    except Exception as e:
        raise handle_store_error(e, operation)


def _reject_built_in(name: str, message: str):
    if is_reserved_role_name(name):
        raise HTTPException(400, message)


# -----------------------------------------------------
# Custom roles
# -----------------------------------------------------
def create_custom_role(resolver: PermissionResolver, payload: CustomRoleCreate) -> CustomRole:
    _reject_built_in(payload.name, "Cannot create a custom role with a built-in role name")

    existing = _current_custom_roles(resolver)
    if any(r.name == payload.name for r in existing):
        raise HTTPException(409, "A custom role with this name already exists")

    role = CustomRole(
        name=payload.name,
        label=payload.label,
        color=payload.color,
        description=payload.description,
        default_route=payload.default_route,
        permissions=payload.permissions,
    )

    _save_custom_roles(resolver, existing + [role], "Create custom role")
    logger.info(f"Custom role created: {role.name} ({len(role.permissions)} permissions)")
    return role


def update_custom_role(resolver: PermissionResolver, name: str, payload: CustomRoleUpdate) -> CustomRole:
    _reject_built_in(
        name,
        "Cannot update a built-in role. Use the permission configuration to modify built-in role permissions.",
    )

    existing = _current_custom_roles(resolver)
    index = next((i for i, r in enumerate(existing) if r.name == name), None)
    if index is None:
        raise HTTPException(404, "Custom role not found")

    changes = payload.model_dump(exclude_none=True)
    updated = existing[index].model_copy(update=changes)
    if "permissions" in changes:
        # model_copy skips validation, so normalize explicitly
        updated.permissions = sorted(normalize_permissions(changes["permissions"]), key=lambda p: p.value)

    roles = list(existing)
    roles[index] = updated
    _save_custom_roles(resolver, roles, "Update custom role")
    logger.info(f"Custom role updated: {name} (fields: {', '.join(sorted(changes)) or 'none'})")
    return updated


def delete_custom_role(resolver: PermissionResolver, name: str) -> CustomRole:
    _reject_built_in(name, "Cannot delete a built-in role")

    existing = _current_custom_roles(resolver)
    removed = next((r for r in existing if r.name == name), None)
    if removed is None:
        raise HTTPException(404, "Custom role not found")

    remaining = [r for r in existing if r.name != name]
    _save_custom_roles(resolver, remaining, "Delete custom role")
    logger.info(f"Custom role deleted: {name}")
    return removed


# -----------------------------------------------------
# Built-in role permission matrix
# -----------------------------------------------------
def update_role_permissions(
    resolver: PermissionResolver,
    matrix: Mapping[str, List[str]],
) -> Dict[str, FrozenSet[Permission]]:
    """
    Replace the active matrix with a complete override document.
    Only built-in roles may appear; unknown permissions are filtered out.
    """
    unknown_roles = sorted(role for role in matrix if not is_built_in_role(role))
    if unknown_roles:
        raise HTTPException(
            400,
            f"Only built-in roles can be configured here; unknown: {', '.join(unknown_roles)}",
        )

    cleaned = {
        role: clean_permission_values(values, context=role)
        for role, values in matrix.items()
    }

    try:
        resolver.dynamic_matrix.save_matrix(cleaned)
    except Exception as e:
        raise handle_store_error(e, "Update role permissions")

    return cleaned


def reset_role_permissions(resolver: PermissionResolver) -> bool:
    """Drop the override so the static matrix applies again."""
    try:
        return resolver.dynamic_matrix.reset_to_static()
    except Exception as e:
        raise handle_store_error(e, "Reset role permissions")
