# core/permission_helpers.py

from fastapi import Depends, Request

from core.errors import forbidden
from core.logging_config import logger
from core.permission_resolver import PermissionResolver
from core.permissions import PermissionLike
from core.roles import Role, has_role_level
from core.settings_store import SupabaseSettingsStore
from dependencies.auth import get_current_user, CurrentUser


# -----------------------------------------------------
# Resolver wiring (one instance per process)
# -----------------------------------------------------
def build_permission_resolver() -> PermissionResolver:
    return PermissionResolver.from_store(SupabaseSettingsStore())


def get_permission_resolver(request: Request) -> PermissionResolver:
    return request.app.state.permission_resolver


# -----------------------------------------------------
# FastAPI dependency wrappers
#
# The resolver only answers True/False; every denial becomes the same
# generic 403 so callers cannot tell "denied" from "unknown role".
# -----------------------------------------------------
def requires_permission(permission: PermissionLike):
    """
    Usage:
        @router.post("/", dependencies=[Depends(requires_permission(Permission.MANAGE_INVOICES))])
    """

    def dependency(
        current_user: CurrentUser = Depends(get_current_user),
        resolver: PermissionResolver = Depends(get_permission_resolver),
    ) -> CurrentUser:
        if not resolver.has_permission(current_user.role, permission):
            logger.info(f"Permission denied: {current_user.id} ({current_user.role}) lacks {permission}")
            raise forbidden()
        return current_user

    return dependency


def requires_any_permission(*permissions: PermissionLike):
    def dependency(
        current_user: CurrentUser = Depends(get_current_user),
        resolver: PermissionResolver = Depends(get_permission_resolver),
    ) -> CurrentUser:
        if not resolver.has_any_permission(current_user.role, permissions):
            logger.info(f"Permission denied: {current_user.id} ({current_user.role}) lacks any of {list(permissions)}")
            raise forbidden()
        return current_user

    return dependency


def requires_role_level(required_role: Role):
    """Coarse seniority gate; custom roles never pass."""

    def dependency(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not has_role_level(current_user.role, required_role):
            logger.info(f"Role level denied: {current_user.id} ({current_user.role}) below {required_role}")
            raise forbidden()
        return current_user

    return dependency
