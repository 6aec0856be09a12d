# models/role.py

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, validator

from core.permissions import Permission, normalize_permissions
from core.roles import RoleMetadata


ROLE_NAME_PATTERN = r"^[A-Z_]+$"


def _normalize_permission_list(v):
    """Keep known permissions only (aliases → canonical), sorted, no duplicates."""
    if v is None:
        return []
    if not isinstance(v, (list, tuple, set, frozenset)):
        raise ValueError("permissions must be a list")
    return sorted(normalize_permissions(v), key=lambda p: p.value)


# -------------------------------------------------
# Stored custom role (one entry of custom_roles_config)
# -------------------------------------------------
class CustomRole(BaseModel):
    """
    Administrator-defined role.

    Stored as JSON in the system settings under the custom roles key using
    camelCase `defaultRoute`, which is what existing documents contain.
    Unknown permission identifiers are dropped on load.
    """

    name: str = Field(..., min_length=1)
    label: str
    color: str
    description: str
    default_route: str = Field(alias="defaultRoute")
    permissions: List[Permission] = []

    class Config:
        populate_by_name = True

    @validator("permissions", pre=True)
    def clean_permissions(cls, v):
        return _normalize_permission_list(v)

    def metadata(self) -> RoleMetadata:
        return RoleMetadata(
            label=self.label,
            color=self.color,
            description=self.description,
            default_route=self.default_route,
        )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


# -------------------------------------------------
# Admin payloads
# -------------------------------------------------
class CustomRoleCreate(BaseModel):
    name: str = Field(..., pattern=ROLE_NAME_PATTERN, description="Uppercase with underscores, e.g. PROJECT_COORDINATOR")
    label: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    default_route: str = Field(..., min_length=1, alias="defaultRoute")

    # Raw identifiers; unknown ones are filtered out by the service
    permissions: List[str] = []

    class Config:
        populate_by_name = True


class CustomRoleUpdate(BaseModel):
    label: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    default_route: Optional[str] = Field(None, min_length=1, alias="defaultRoute")
    permissions: Optional[List[str]] = None

    class Config:
        populate_by_name = True


class RolePermissionsUpdate(BaseModel):
    """
    A complete replacement matrix: built-in role → permission identifiers.
    Roles left out lose every permission while the override is active.
    """

    permissions: Dict[str, List[str]]


# -------------------------------------------------
# Responses
# -------------------------------------------------
class RoleRead(BaseModel):
    name: str
    label: str
    color: str
    description: str
    default_route: str
    built_in: bool
    level: Optional[int] = None
