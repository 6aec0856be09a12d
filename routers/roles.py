# routers/roles.py

from typing import Dict, FrozenSet, Iterable, List

from fastapi import APIRouter, Depends, status

from core.permission_helpers import get_permission_resolver, requires_role_level
from core.permission_resolver import PermissionResolver
from core.permissions import ALL_PERMISSIONS, PERMISSION_ALIASES, Permission, get_static_role_permissions
from core.role_admin import (
    create_custom_role,
    delete_custom_role,
    reset_role_permissions,
    update_custom_role,
    update_role_permissions,
)
from core.roles import ROLE_LEVELS, Role, is_built_in_role
from dependencies.auth import get_current_user, CurrentUser
from models.role import CustomRoleCreate, CustomRoleUpdate, RolePermissionsUpdate, RoleRead


router = APIRouter(
    prefix="/roles",
    tags=["Roles & Permissions"],
)

senior_admin_only = requires_role_level(Role.SENIOR_ADMIN)


def _as_list(permissions: Iterable[Permission]) -> List[str]:
    return sorted(p.value for p in permissions)


def _matrix_as_lists(matrix: Dict[str, FrozenSet[Permission]]) -> Dict[str, List[str]]:
    return {role: _as_list(perms) for role, perms in matrix.items()}


# -----------------------------------------------------
# GET /roles
# All roles (built-in + custom) with display metadata
# -----------------------------------------------------
@router.get("", summary="List roles", response_model=List[RoleRead])
def list_roles(
    current_user: CurrentUser = Depends(get_current_user),
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    roles = []
    for name, metadata in resolver.get_all_role_metadata().items():
        built_in = is_built_in_role(name)
        roles.append(RoleRead(
            name=name,
            label=metadata.label,
            color=metadata.color,
            description=metadata.description,
            default_route=metadata.default_route,
            built_in=built_in,
            level=ROLE_LEVELS[Role(name)] if built_in else None,
        ))
    return roles


# -----------------------------------------------------
# GET /roles/me/permissions
# -----------------------------------------------------
@router.get("/me/permissions", summary="Effective permissions of the current user")
def my_permissions(
    current_user: CurrentUser = Depends(get_current_user),
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    return {
        "role": current_user.role,
        "label": resolver.get_role_label(current_user.role),
        "default_route": resolver.get_default_route(current_user.role),
        "permissions": _as_list(resolver.get_permissions_for_role(current_user.role)),
    }


# -----------------------------------------------------
# GET /roles/permissions
# Active matrix, static defaults and the permission catalog
# -----------------------------------------------------
@router.get(
    "/permissions",
    summary="Admin: role permission configuration",
    dependencies=[Depends(senior_admin_only)],
)
def get_role_permissions(resolver: PermissionResolver = Depends(get_permission_resolver)):
    override = resolver.dynamic_matrix.get_override()
    return {
        "is_override": override is not None,
        "active": _matrix_as_lists(resolver.dynamic_matrix.get_current_matrix()),
        "static": _matrix_as_lists(get_static_role_permissions()),
        "effective": _matrix_as_lists(resolver.get_effective_table()),
        "all_permissions": [p.value for p in ALL_PERMISSIONS],
        "aliases": {alias: p.value for alias, p in PERMISSION_ALIASES.items()},
    }


# -----------------------------------------------------
# PUT /roles/permissions
# -----------------------------------------------------
@router.put(
    "/permissions",
    summary="Admin: replace built-in role permissions",
    dependencies=[Depends(senior_admin_only)],
)
def put_role_permissions(
    payload: RolePermissionsUpdate,
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    saved = update_role_permissions(resolver, payload.permissions)
    return {"success": True, "permissions": _matrix_as_lists(saved)}


# -----------------------------------------------------
# POST /roles/permissions/reset
# -----------------------------------------------------
@router.post(
    "/permissions/reset",
    summary="Admin: reset built-in role permissions to defaults",
    dependencies=[Depends(senior_admin_only)],
)
def post_reset_role_permissions(resolver: PermissionResolver = Depends(get_permission_resolver)):
    had_override = reset_role_permissions(resolver)
    return {"success": True, "had_override": had_override}


# -----------------------------------------------------
# Custom roles
# -----------------------------------------------------
@router.get(
    "/custom",
    summary="Admin: list custom roles",
    dependencies=[Depends(senior_admin_only)],
)
def list_custom_roles(resolver: PermissionResolver = Depends(get_permission_resolver)):
    return [role.to_document() for role in resolver.custom_roles.get_custom_roles()]


@router.post(
    "/custom",
    summary="Admin: create custom role",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(senior_admin_only)],
)
def post_custom_role(
    payload: CustomRoleCreate,
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    role = create_custom_role(resolver, payload)
    return {"success": True, "role": role.to_document()}


@router.patch(
    "/custom/{name}",
    summary="Admin: update custom role",
    dependencies=[Depends(senior_admin_only)],
)
def patch_custom_role(
    name: str,
    payload: CustomRoleUpdate,
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    role = update_custom_role(resolver, name, payload)
    return {"success": True, "role": role.to_document()}


@router.delete(
    "/custom/{name}",
    summary="Admin: delete custom role",
    dependencies=[Depends(senior_admin_only)],
)
def remove_custom_role(
    name: str,
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    role = delete_custom_role(resolver, name)
    return {"success": True, "deleted": role.name}
