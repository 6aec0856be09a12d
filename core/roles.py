# core/roles.py

"""
Built-in role catalog.

Every built-in role has exactly one hierarchy level and one metadata record.
Custom roles are defined at runtime (see core.custom_roles) and never appear
here; they have no hierarchy level.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from models.enums import BaseStrEnum


# ============================================
# BUILT-IN ROLES
# ============================================
class Role(BaseStrEnum):
    # Administrative roles
    SENIOR_ADMIN = "SENIOR_ADMIN"
    JUNIOR_ADMIN = "JUNIOR_ADMIN"
    MANAGER = "MANAGER"

    # Specialized roles
    TECHNICAL_MANAGER = "TECHNICAL_MANAGER"
    SALES_AGENT = "SALES_AGENT"
    ACCOUNTANT = "ACCOUNTANT"
    SUPERVISOR = "SUPERVISOR"

    # Operational roles
    ARTISAN = "ARTISAN"
    STAFF = "STAFF"

    # External roles
    CUSTOMER = "CUSTOMER"
    PROPERTY_MANAGER = "PROPERTY_MANAGER"
    CONTRACTOR = "CONTRACTOR"
    CONTRACTOR_SENIOR_MANAGER = "CONTRACTOR_SENIOR_MANAGER"
    CONTRACTOR_JUNIOR_MANAGER = "CONTRACTOR_JUNIOR_MANAGER"


ALL_ROLES: List[Role] = list(Role)

_BUILT_IN_ROLE_NAMES = frozenset(Role.list())

# Older accounts carry a generic "ADMIN" role string.
LEGACY_ADMIN_ROLE = "ADMIN"


def is_built_in_role(role: str) -> bool:
    return role in _BUILT_IN_ROLE_NAMES


def is_reserved_role_name(role: str) -> bool:
    """Names a custom role may never take: built-ins and the legacy ADMIN."""
    return is_built_in_role(role) or role == LEGACY_ADMIN_ROLE


def is_custom_role(role: str) -> bool:
    return not is_reserved_role_name(role)


# ============================================
# ROLE HIERARCHY (higher number = more authority)
# ============================================
ROLE_LEVELS: Dict[Role, int] = {
    Role.SENIOR_ADMIN: 100,
    Role.JUNIOR_ADMIN: 80,
    Role.MANAGER: 70,
    Role.ACCOUNTANT: 60,
    Role.TECHNICAL_MANAGER: 55,
    Role.SUPERVISOR: 50,
    Role.SALES_AGENT: 45,
    Role.ARTISAN: 30,
    Role.PROPERTY_MANAGER: 15,
    Role.CONTRACTOR_SENIOR_MANAGER: 14,
    Role.CONTRACTOR_JUNIOR_MANAGER: 13,
    Role.CONTRACTOR: 12,
    Role.STAFF: 11,
    Role.CUSTOMER: 10,
}


def get_role_level(role: str) -> int:
    """
    Numeric level for a role string.
    Legacy "ADMIN" counts as JUNIOR_ADMIN; unknown and custom roles are 0.
    """
    if role == LEGACY_ADMIN_ROLE:
        role = Role.JUNIOR_ADMIN
    return ROLE_LEVELS.get(role, 0)


def has_role_level(user_role: str, required_role: Role) -> bool:
    """
    Check if a role has equal or higher authority than a built-in role.

    Coarse check only ("is this at least a manager"). Custom roles have no
    level and always fail; use the permission resolver for feature gating.
    """
    required_level = ROLE_LEVELS[Role(required_role)]
    return get_role_level(user_role) >= required_level


# -----------------------------------------------------
# Common role checks
# -----------------------------------------------------
def is_admin(role: str) -> bool:
    """Junior admin or higher (includes legacy ADMIN)."""
    return has_role_level(role, Role.JUNIOR_ADMIN)


def is_senior_admin(role: str) -> bool:
    return role == Role.SENIOR_ADMIN


def is_manager_or_higher(role: str) -> bool:
    return has_role_level(role, Role.MANAGER)


def get_selectable_roles() -> List[Role]:
    """Built-in roles an administrator may assign to employees."""
    return [
        Role.SENIOR_ADMIN,
        Role.JUNIOR_ADMIN,
        Role.MANAGER,
        Role.TECHNICAL_MANAGER,
        Role.ACCOUNTANT,
        Role.SALES_AGENT,
        Role.SUPERVISOR,
        Role.ARTISAN,
        Role.PROPERTY_MANAGER,
    ]


# ============================================
# ROLE METADATA
# ============================================
class RoleMetadata(BaseModel):
    label: str
    color: str
    description: str
    default_route: str = Field(alias="defaultRoute")

    class Config:
        populate_by_name = True


DEFAULT_ROLE_COLOR = "bg-orange-100 text-orange-800"
DEFAULT_ROLE_DESCRIPTION = "Custom role"
DEFAULT_ROUTE = "/customer/dashboard"


ROLE_METADATA: Dict[Role, RoleMetadata] = {
    Role.SENIOR_ADMIN: RoleMetadata(
        label="Senior Admin",
        color="bg-purple-100 text-purple-800",
        description="Full system access with ability to manage settings, users, and all features",
        default_route="/admin/dashboard",
    ),
    Role.JUNIOR_ADMIN: RoleMetadata(
        label="Junior Admin",
        color="bg-blue-100 text-blue-800",
        description="Administrative access to most features except critical system settings",
        default_route="/admin/dashboard",
    ),
    Role.MANAGER: RoleMetadata(
        label="Manager",
        color="bg-indigo-100 text-indigo-800",
        description="Team and project management with HR and operational oversight",
        default_route="/admin/dashboard",
    ),
    Role.ACCOUNTANT: RoleMetadata(
        label="Accountant",
        color="bg-emerald-100 text-emerald-800",
        description="Financial management including accounts, invoices, and payment approvals",
        default_route="/admin/accounts",
    ),
    Role.TECHNICAL_MANAGER: RoleMetadata(
        label="Technical Manager",
        color="bg-orange-100 text-orange-800",
        description="Manages operational execution, project delivery, and quality control",
        default_route="/admin/operations",
    ),
    Role.SUPERVISOR: RoleMetadata(
        label="Supervisor",
        color="bg-cyan-100 text-cyan-800",
        description="Operational oversight with ability to manage orders, quotations, and leads",
        default_route="/admin/operations",
    ),
    Role.SALES_AGENT: RoleMetadata(
        label="Sales Agent",
        color="bg-pink-100 text-pink-800",
        description="Focuses on lead conversion, quotation management, and sales analytics",
        default_route="/admin/crm",
    ),
    Role.ARTISAN: RoleMetadata(
        label="Artisan",
        color="bg-green-100 text-green-800",
        description="Field worker with access to assigned jobs and projects",
        default_route="/artisan/dashboard",
    ),
    Role.STAFF: RoleMetadata(
        label="Staff",
        color="bg-lime-100 text-lime-800",
        description="Property management staff with access to assigned tasks and property maintenance",
        default_route="/staff/dashboard",
    ),
    Role.CUSTOMER: RoleMetadata(
        label="Tenant",
        color="bg-gray-100 text-gray-800",
        description="Tenant portal access to view orders and invoices",
        default_route="/customer/dashboard",
    ),
    Role.PROPERTY_MANAGER: RoleMetadata(
        label="Property Manager",
        color="bg-teal-100 text-teal-800",
        description="Manages properties, tenants, budgets, and maintenance requests with ability to request quotes and issue orders",
        default_route="/property-manager/dashboard",
    ),
    Role.CONTRACTOR: RoleMetadata(
        label="Contractor",
        color="bg-amber-100 text-amber-800",
        description="External contractor with access to assigned jobs, invoices, performance metrics, and documents",
        default_route="/contractor/dashboard",
    ),
    Role.CONTRACTOR_SENIOR_MANAGER: RoleMetadata(
        label="Senior Manager",
        color="bg-purple-100 text-purple-800",
        description="Contractor senior manager with full authority over contractor portal operations, invoices, quotations, and employee management",
        default_route="/contractor/dashboard",
    ),
    Role.CONTRACTOR_JUNIOR_MANAGER: RoleMetadata(
        label="Junior Manager",
        color="bg-blue-100 text-blue-800",
        description="Contractor junior manager with operational oversight, limited financial authority, and HR management capabilities",
        default_route="/contractor/dashboard",
    ),
}


def format_role_name(role: str) -> str:
    """PROJECT_COORDINATOR -> Project Coordinator"""
    return " ".join(word.capitalize() for word in role.split("_"))


# -----------------------------------------------------
# Static metadata lookups (built-in roles only)
# -----------------------------------------------------
def get_role_label(role: str) -> str:
    metadata = ROLE_METADATA.get(role)
    return metadata.label if metadata else format_role_name(role)


def get_role_color(role: str) -> str:
    metadata = ROLE_METADATA.get(role)
    return metadata.color if metadata else DEFAULT_ROLE_COLOR


def get_role_description(role: str) -> str:
    metadata = ROLE_METADATA.get(role)
    return metadata.description if metadata else DEFAULT_ROLE_DESCRIPTION


def get_default_route(role: str) -> str:
    metadata = ROLE_METADATA.get(role)
    return metadata.default_route if metadata else DEFAULT_ROUTE
