# core/permissions.py

"""
Permission catalog and the compiled-in (static) role → permissions matrix.

The static matrix is the default layer consumed by the permission resolver.
The helpers at the bottom of this module consult ONLY the static matrix:
they never see dynamic overrides or custom roles and can disagree with
PermissionResolver. Use them only where a reload is not acceptable.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Union

from models.enums import BaseStrEnum
from core.roles import Role


# ============================================
# PERMISSIONS
# ============================================
class Permission(BaseStrEnum):
    # System administration
    MANAGE_SYSTEM_SETTINGS = "MANAGE_SYSTEM_SETTINGS"
    MANAGE_COMPANY_SETTINGS = "MANAGE_COMPANY_SETTINGS"

    # User management
    MANAGE_ALL_EMPLOYEES = "MANAGE_ALL_EMPLOYEES"
    VIEW_ALL_EMPLOYEES = "VIEW_ALL_EMPLOYEES"
    # Backward-compatible aliases (same enum member as the canonical name)
    MANAGE_EMPLOYEES = "MANAGE_ALL_EMPLOYEES"
    VIEW_EMPLOYEES = "VIEW_ALL_EMPLOYEES"
    MANAGE_EMPLOYEE_ROLES = "MANAGE_EMPLOYEE_ROLES"
    MANAGE_EMPLOYEE_COMPENSATION = "MANAGE_EMPLOYEE_COMPENSATION"
    DELETE_EMPLOYEES = "DELETE_EMPLOYEES"

    # HR management
    MANAGE_PERFORMANCE_REVIEWS = "MANAGE_PERFORMANCE_REVIEWS"
    VIEW_PERFORMANCE_REVIEWS = "VIEW_PERFORMANCE_REVIEWS"
    MANAGE_LEAVE_REQUESTS = "MANAGE_LEAVE_REQUESTS"
    VIEW_LEAVE_REQUESTS = "VIEW_LEAVE_REQUESTS"
    MANAGE_HR_DOCUMENTS = "MANAGE_HR_DOCUMENTS"
    VIEW_HR_DOCUMENTS = "VIEW_HR_DOCUMENTS"
    MANAGE_KPI = "MANAGE_KPI"
    VIEW_KPI = "VIEW_KPI"
    VIEW_PAYSLIPS = "VIEW_PAYSLIPS"
    MANAGE_PAYSLIPS = "MANAGE_PAYSLIPS"

    # Financial management
    MANAGE_ACCOUNTS = "MANAGE_ACCOUNTS"
    VIEW_ACCOUNTS = "VIEW_ACCOUNTS"
    MANAGE_LIABILITIES = "MANAGE_LIABILITIES"
    VIEW_LIABILITIES = "VIEW_LIABILITIES"
    MANAGE_ASSETS = "MANAGE_ASSETS"
    VIEW_ASSETS = "VIEW_ASSETS"
    GENERATE_FINANCIAL_REPORTS = "GENERATE_FINANCIAL_REPORTS"
    VIEW_FINANCIAL_REPORTS = "VIEW_FINANCIAL_REPORTS"
    MANAGE_INVOICES = "MANAGE_INVOICES"
    VIEW_INVOICES = "VIEW_INVOICES"
    APPROVE_PAYMENT_REQUESTS = "APPROVE_PAYMENT_REQUESTS"
    VIEW_PAYMENT_REQUESTS = "VIEW_PAYMENT_REQUESTS"

    # Project management
    MANAGE_PROJECTS = "MANAGE_PROJECTS"
    VIEW_ALL_PROJECTS = "VIEW_ALL_PROJECTS"
    VIEW_ASSIGNED_PROJECTS = "VIEW_ASSIGNED_PROJECTS"
    MANAGE_MILESTONES = "MANAGE_MILESTONES"
    VIEW_MILESTONES = "VIEW_MILESTONES"
    APPROVE_CHANGE_ORDERS = "APPROVE_CHANGE_ORDERS"

    # Operations
    MANAGE_ORDERS = "MANAGE_ORDERS"
    VIEW_ALL_ORDERS = "VIEW_ALL_ORDERS"
    VIEW_ASSIGNED_ORDERS = "VIEW_ASSIGNED_ORDERS"
    MANAGE_QUOTATIONS = "MANAGE_QUOTATIONS"
    VIEW_QUOTATIONS = "VIEW_QUOTATIONS"
    ASSIGN_WORK = "ASSIGN_WORK"

    # CRM & sales
    MANAGE_LEADS = "MANAGE_LEADS"
    VIEW_ALL_LEADS = "VIEW_ALL_LEADS"
    VIEW_ASSIGNED_LEADS = "VIEW_ASSIGNED_LEADS"
    MANAGE_CAMPAIGNS = "MANAGE_CAMPAIGNS"
    VIEW_CAMPAIGNS = "VIEW_CAMPAIGNS"

    # Analytics & reports
    VIEW_DASHBOARD_ANALYTICS = "VIEW_DASHBOARD_ANALYTICS"
    VIEW_SALES_ANALYTICS = "VIEW_SALES_ANALYTICS"
    VIEW_EMPLOYEE_ANALYTICS = "VIEW_EMPLOYEE_ANALYTICS"
    CUSTOMIZE_DASHBOARD = "CUSTOMIZE_DASHBOARD"

    # Customer features
    VIEW_OWN_ORDERS = "VIEW_OWN_ORDERS"
    CREATE_REVIEWS = "CREATE_REVIEWS"
    VIEW_OWN_INVOICES = "VIEW_OWN_INVOICES"

    # Property manager features
    MANAGE_PM_RFQS = "MANAGE_PM_RFQS"
    VIEW_PM_RFQS = "VIEW_PM_RFQS"
    MANAGE_PM_ORDERS = "MANAGE_PM_ORDERS"
    VIEW_PM_ORDERS = "VIEW_PM_ORDERS"
    APPROVE_PM_INVOICES = "APPROVE_PM_INVOICES"
    VIEW_PM_INVOICES = "VIEW_PM_INVOICES"
    MANAGE_PM_CUSTOMERS = "MANAGE_PM_CUSTOMERS"
    VIEW_PM_CUSTOMERS = "VIEW_PM_CUSTOMERS"
    MANAGE_PM_BUILDINGS = "MANAGE_PM_BUILDINGS"
    VIEW_PM_BUILDINGS = "VIEW_PM_BUILDINGS"
    MANAGE_PM_BUDGETS = "MANAGE_PM_BUDGETS"
    VIEW_PM_BUDGETS = "VIEW_PM_BUDGETS"
    MANAGE_MAINTENANCE_SCHEDULES = "MANAGE_MAINTENANCE_SCHEDULES"
    VIEW_MAINTENANCE_SCHEDULES = "VIEW_MAINTENANCE_SCHEDULES"
    APPROVE_MAINTENANCE_REQUESTS = "APPROVE_MAINTENANCE_REQUESTS"
    VIEW_MAINTENANCE_REQUESTS = "VIEW_MAINTENANCE_REQUESTS"


# Canonical members only; enum iteration skips aliases.
ALL_PERMISSIONS: List[Permission] = list(Permission)

# Alias name → canonical member, e.g. "MANAGE_EMPLOYEES" → MANAGE_ALL_EMPLOYEES
PERMISSION_ALIASES: Dict[str, Permission] = {
    name: member
    for name, member in Permission.__members__.items()
    if name != member.name
}

PermissionLike = Union[Permission, str]


def normalize_permission(value: PermissionLike) -> Optional[Permission]:
    """
    Map a permission member, canonical name or alias name to its canonical
    member. Unknown values return None (and never grant anything).
    """
    if isinstance(value, Permission):
        return value
    if not isinstance(value, str):
        return None
    member = Permission.__members__.get(value)
    if member is not None:
        return member
    try:
        return Permission(value)
    except ValueError:
        return None


def normalize_permissions(values: Iterable[PermissionLike]) -> FrozenSet[Permission]:
    """Normalize a collection, silently dropping unknown identifiers."""
    normalized = (normalize_permission(value) for value in values)
    return frozenset(p for p in normalized if p is not None)


P = Permission

# ============================================
# CENTRALIZED ROLE → PERMISSIONS MAP
# ============================================
ROLE_PERMISSIONS: Dict[Role, FrozenSet[Permission]] = {

    # =====================================================
    # SENIOR ADMIN: Full system access
    # =====================================================
    Role.SENIOR_ADMIN: frozenset([
        P.MANAGE_SYSTEM_SETTINGS, P.MANAGE_COMPANY_SETTINGS,

        P.MANAGE_ALL_EMPLOYEES, P.VIEW_ALL_EMPLOYEES,
        P.MANAGE_EMPLOYEE_ROLES, P.MANAGE_EMPLOYEE_COMPENSATION,
        P.DELETE_EMPLOYEES,

        P.MANAGE_PERFORMANCE_REVIEWS, P.VIEW_PERFORMANCE_REVIEWS,
        P.MANAGE_LEAVE_REQUESTS, P.VIEW_LEAVE_REQUESTS,
        P.MANAGE_HR_DOCUMENTS, P.VIEW_HR_DOCUMENTS,
        P.MANAGE_KPI, P.VIEW_KPI,
        P.VIEW_PAYSLIPS, P.MANAGE_PAYSLIPS,

        P.MANAGE_ACCOUNTS, P.VIEW_ACCOUNTS,
        P.MANAGE_LIABILITIES, P.VIEW_LIABILITIES,
        P.MANAGE_ASSETS, P.VIEW_ASSETS,
        P.GENERATE_FINANCIAL_REPORTS, P.VIEW_FINANCIAL_REPORTS,
        P.MANAGE_INVOICES, P.VIEW_INVOICES,
        P.APPROVE_PAYMENT_REQUESTS, P.VIEW_PAYMENT_REQUESTS,

        P.MANAGE_PROJECTS, P.VIEW_ALL_PROJECTS,
        P.MANAGE_MILESTONES, P.VIEW_MILESTONES,
        P.APPROVE_CHANGE_ORDERS,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,

        P.MANAGE_LEADS, P.VIEW_ALL_LEADS,
        P.MANAGE_CAMPAIGNS, P.VIEW_CAMPAIGNS,

        P.VIEW_DASHBOARD_ANALYTICS, P.VIEW_SALES_ANALYTICS,
        P.VIEW_EMPLOYEE_ANALYTICS, P.CUSTOMIZE_DASHBOARD,
    ]),

    # =====================================================
    # JUNIOR ADMIN: everything except critical settings
    # =====================================================
    Role.JUNIOR_ADMIN: frozenset([
        P.VIEW_ALL_EMPLOYEES,
        P.VIEW_PERFORMANCE_REVIEWS, P.VIEW_LEAVE_REQUESTS,
        P.VIEW_HR_DOCUMENTS, P.VIEW_KPI, P.VIEW_PAYSLIPS,

        P.VIEW_ACCOUNTS, P.VIEW_LIABILITIES, P.VIEW_ASSETS,
        P.VIEW_FINANCIAL_REPORTS,
        P.MANAGE_INVOICES, P.VIEW_INVOICES,
        P.VIEW_PAYMENT_REQUESTS,

        P.MANAGE_PROJECTS, P.VIEW_ALL_PROJECTS,
        P.MANAGE_MILESTONES, P.VIEW_MILESTONES,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,

        P.MANAGE_LEADS, P.VIEW_ALL_LEADS,
        P.MANAGE_CAMPAIGNS, P.VIEW_CAMPAIGNS,

        P.VIEW_DASHBOARD_ANALYTICS, P.VIEW_SALES_ANALYTICS,
        P.VIEW_EMPLOYEE_ANALYTICS, P.CUSTOMIZE_DASHBOARD,
    ]),

    # =====================================================
    # MANAGER: team and project management
    # =====================================================
    Role.MANAGER: frozenset([
        P.VIEW_ALL_EMPLOYEES,
        P.MANAGE_PERFORMANCE_REVIEWS, P.VIEW_PERFORMANCE_REVIEWS,
        P.MANAGE_LEAVE_REQUESTS, P.VIEW_LEAVE_REQUESTS,
        P.VIEW_HR_DOCUMENTS,
        P.MANAGE_KPI, P.VIEW_KPI,
        P.VIEW_PAYSLIPS,

        P.VIEW_FINANCIAL_REPORTS, P.VIEW_INVOICES, P.VIEW_PAYMENT_REQUESTS,

        P.MANAGE_PROJECTS, P.VIEW_ALL_PROJECTS,
        P.MANAGE_MILESTONES, P.VIEW_MILESTONES,
        P.APPROVE_CHANGE_ORDERS,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,

        P.MANAGE_LEADS, P.VIEW_ALL_LEADS, P.VIEW_CAMPAIGNS,

        P.VIEW_DASHBOARD_ANALYTICS, P.VIEW_SALES_ANALYTICS,
        P.VIEW_EMPLOYEE_ANALYTICS,
    ]),

    # =====================================================
    # ACCOUNTANT: financial management
    # =====================================================
    Role.ACCOUNTANT: frozenset([
        P.VIEW_ALL_EMPLOYEES,
        P.VIEW_PAYSLIPS, P.MANAGE_PAYSLIPS,

        P.MANAGE_ACCOUNTS, P.VIEW_ACCOUNTS,
        P.MANAGE_LIABILITIES, P.VIEW_LIABILITIES,
        P.MANAGE_ASSETS, P.VIEW_ASSETS,
        P.GENERATE_FINANCIAL_REPORTS, P.VIEW_FINANCIAL_REPORTS,
        P.MANAGE_INVOICES, P.VIEW_INVOICES,
        P.APPROVE_PAYMENT_REQUESTS, P.VIEW_PAYMENT_REQUESTS,

        P.VIEW_ALL_PROJECTS, P.VIEW_MILESTONES,
        P.VIEW_ALL_ORDERS, P.VIEW_QUOTATIONS,

        P.VIEW_DASHBOARD_ANALYTICS,
    ]),

    # =====================================================
    # TECHNICAL MANAGER: no management accounts, no HR
    # =====================================================
    Role.TECHNICAL_MANAGER: frozenset([
        P.VIEW_ALL_LEADS, P.MANAGE_LEADS, P.VIEW_CAMPAIGNS,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS, P.ASSIGN_WORK,

        P.MANAGE_PROJECTS, P.VIEW_ALL_PROJECTS,
        P.MANAGE_MILESTONES, P.VIEW_MILESTONES,

        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,

        P.MANAGE_INVOICES, P.VIEW_INVOICES,
    ]),

    # =====================================================
    # SUPERVISOR: operational oversight
    # =====================================================
    Role.SUPERVISOR: frozenset([
        P.VIEW_ALL_EMPLOYEES, P.VIEW_LEAVE_REQUESTS, P.VIEW_KPI,

        P.VIEW_INVOICES, P.VIEW_PAYMENT_REQUESTS,

        P.VIEW_ALL_PROJECTS, P.VIEW_MILESTONES,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,

        P.MANAGE_LEADS, P.VIEW_ALL_LEADS,

        P.VIEW_DASHBOARD_ANALYTICS,
    ]),

    # =====================================================
    # SALES AGENT: CRM, quotations, invoices, statements
    # =====================================================
    Role.SALES_AGENT: frozenset([
        P.VIEW_ALL_LEADS, P.MANAGE_LEADS,
        P.MANAGE_CAMPAIGNS, P.VIEW_CAMPAIGNS,
        P.VIEW_SALES_ANALYTICS,

        P.VIEW_ACCOUNTS,
        P.VIEW_INVOICES, P.MANAGE_INVOICES,
        P.VIEW_FINANCIAL_REPORTS,

        P.VIEW_ALL_PROJECTS, P.VIEW_MILESTONES,
        P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,
    ]),

    # =====================================================
    # ARTISAN: field worker
    # =====================================================
    Role.ARTISAN: frozenset([
        P.VIEW_ASSIGNED_PROJECTS,
        P.VIEW_ASSIGNED_ORDERS,
        P.VIEW_MILESTONES,
        P.VIEW_ASSIGNED_LEADS,
        P.VIEW_PAYSLIPS,
    ]),

    # =====================================================
    # STAFF: assigned tasks and property maintenance
    # =====================================================
    Role.STAFF: frozenset([
        P.VIEW_ASSIGNED_ORDERS,
        P.VIEW_ASSIGNED_PROJECTS,
        P.VIEW_MILESTONES,
        P.VIEW_MAINTENANCE_SCHEDULES,
        P.VIEW_MAINTENANCE_REQUESTS,
        P.VIEW_LEAVE_REQUESTS,
        P.VIEW_PAYSLIPS,
    ]),

    # =====================================================
    # CUSTOMER: tenant portal
    # =====================================================
    Role.CUSTOMER: frozenset([
        P.VIEW_OWN_ORDERS,
        P.CREATE_REVIEWS,
        P.VIEW_OWN_INVOICES,
    ]),

    # =====================================================
    # PROPERTY MANAGER
    # =====================================================
    Role.PROPERTY_MANAGER: frozenset([
        P.MANAGE_PM_RFQS, P.VIEW_PM_RFQS,
        P.MANAGE_PM_ORDERS, P.VIEW_PM_ORDERS,
        P.APPROVE_PM_INVOICES, P.VIEW_PM_INVOICES,
        P.MANAGE_PM_CUSTOMERS, P.VIEW_PM_CUSTOMERS,
        P.MANAGE_PM_BUILDINGS, P.VIEW_PM_BUILDINGS,
        P.MANAGE_PM_BUDGETS, P.VIEW_PM_BUDGETS,

        P.MANAGE_MAINTENANCE_SCHEDULES, P.VIEW_MAINTENANCE_SCHEDULES,
        P.APPROVE_MAINTENANCE_REQUESTS, P.VIEW_MAINTENANCE_REQUESTS,

        P.VIEW_OWN_ORDERS, P.CREATE_REVIEWS,
    ]),

    # =====================================================
    # CONTRACTOR: full contractor business operations
    # =====================================================
    Role.CONTRACTOR: frozenset([
        P.MANAGE_LEADS, P.VIEW_ALL_LEADS,
        P.MANAGE_CAMPAIGNS, P.VIEW_CAMPAIGNS,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,

        P.MANAGE_PROJECTS, P.VIEW_ALL_PROJECTS,
        P.MANAGE_MILESTONES, P.VIEW_MILESTONES,

        P.MANAGE_INVOICES, P.VIEW_INVOICES,
        P.VIEW_FINANCIAL_REPORTS, P.VIEW_ACCOUNTS,
        P.VIEW_ASSETS, P.VIEW_LIABILITIES,
        P.VIEW_PAYMENT_REQUESTS,

        P.VIEW_ALL_EMPLOYEES,
        P.MANAGE_PERFORMANCE_REVIEWS, P.VIEW_PERFORMANCE_REVIEWS,
        P.MANAGE_LEAVE_REQUESTS, P.VIEW_LEAVE_REQUESTS,
        P.MANAGE_KPI, P.VIEW_KPI,
        P.VIEW_HR_DOCUMENTS, P.VIEW_PAYSLIPS,

        P.VIEW_DASHBOARD_ANALYTICS, P.VIEW_SALES_ANALYTICS,
        P.VIEW_EMPLOYEE_ANALYTICS,

        P.CUSTOMIZE_DASHBOARD, P.VIEW_OWN_ORDERS, P.CREATE_REVIEWS,
    ]),

    # =====================================================
    # CONTRACTOR SENIOR MANAGER: contractor + full HR
    # =====================================================
    Role.CONTRACTOR_SENIOR_MANAGER: frozenset([
        P.MANAGE_LEADS, P.VIEW_ALL_LEADS,
        P.MANAGE_CAMPAIGNS, P.VIEW_CAMPAIGNS,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,

        P.MANAGE_PROJECTS, P.VIEW_ALL_PROJECTS,
        P.MANAGE_MILESTONES, P.VIEW_MILESTONES,

        P.MANAGE_INVOICES, P.VIEW_INVOICES,
        P.VIEW_FINANCIAL_REPORTS, P.VIEW_ACCOUNTS,
        P.VIEW_ASSETS, P.VIEW_LIABILITIES,
        P.VIEW_PAYMENT_REQUESTS,

        P.VIEW_ALL_EMPLOYEES, P.MANAGE_EMPLOYEES, P.DELETE_EMPLOYEES,
        P.MANAGE_PERFORMANCE_REVIEWS, P.VIEW_PERFORMANCE_REVIEWS,
        P.MANAGE_LEAVE_REQUESTS, P.VIEW_LEAVE_REQUESTS,
        P.MANAGE_KPI, P.VIEW_KPI,
        P.VIEW_HR_DOCUMENTS, P.VIEW_PAYSLIPS,

        P.VIEW_DASHBOARD_ANALYTICS, P.VIEW_SALES_ANALYTICS,
        P.VIEW_EMPLOYEE_ANALYTICS,

        P.CUSTOMIZE_DASHBOARD, P.VIEW_OWN_ORDERS, P.CREATE_REVIEWS,
    ]),

    # =====================================================
    # CONTRACTOR JUNIOR MANAGER: view-only finance, limited HR
    # =====================================================
    Role.CONTRACTOR_JUNIOR_MANAGER: frozenset([
        P.MANAGE_LEADS, P.VIEW_ALL_LEADS,
        P.MANAGE_CAMPAIGNS, P.VIEW_CAMPAIGNS,

        P.MANAGE_ORDERS, P.VIEW_ALL_ORDERS,
        P.MANAGE_QUOTATIONS, P.VIEW_QUOTATIONS,
        P.ASSIGN_WORK,

        P.MANAGE_PROJECTS, P.VIEW_ALL_PROJECTS,
        P.MANAGE_MILESTONES, P.VIEW_MILESTONES,

        P.VIEW_INVOICES, P.VIEW_FINANCIAL_REPORTS,
        P.VIEW_ACCOUNTS, P.VIEW_ASSETS, P.VIEW_LIABILITIES,
        P.VIEW_PAYMENT_REQUESTS,

        P.VIEW_ALL_EMPLOYEES,
        P.MANAGE_PERFORMANCE_REVIEWS, P.VIEW_PERFORMANCE_REVIEWS,
        P.MANAGE_LEAVE_REQUESTS, P.VIEW_LEAVE_REQUESTS,
        P.VIEW_KPI, P.VIEW_HR_DOCUMENTS, P.VIEW_PAYSLIPS,

        P.VIEW_DASHBOARD_ANALYTICS, P.VIEW_SALES_ANALYTICS,
        P.VIEW_EMPLOYEE_ANALYTICS,

        P.CUSTOMIZE_DASHBOARD, P.VIEW_OWN_ORDERS, P.CREATE_REVIEWS,
    ]),
}

del P


def get_static_role_permissions() -> Dict[str, FrozenSet[Permission]]:
    """Copy of the static matrix keyed by role string (for resets / diffs)."""
    return {role.value: perms for role, perms in ROLE_PERMISSIONS.items()}


# -----------------------------------------------------
# Static-only permission evaluation
# -----------------------------------------------------
def get_role_permissions(role: str) -> FrozenSet[Permission]:
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_permission(role: str, permission: PermissionLike) -> bool:
    """
    Static-matrix check. Ignores dynamic overrides and custom roles; prefer
    PermissionResolver.has_permission everywhere a reload is acceptable.
    """
    canonical = normalize_permission(permission)
    if canonical is None:
        return False
    return canonical in get_role_permissions(role)


def has_any_permission(role: str, permissions: Iterable[PermissionLike]) -> bool:
    return any(has_permission(role, p) for p in permissions)


def has_all_permissions(role: str, permissions: Iterable[PermissionLike]) -> bool:
    return all(has_permission(role, p) for p in permissions)


def can_manage_employees(role: str) -> bool:
    return has_permission(role, Permission.MANAGE_ALL_EMPLOYEES)


def can_view_financials(role: str) -> bool:
    return has_permission(role, Permission.VIEW_ACCOUNTS)


def can_manage_projects(role: str) -> bool:
    return has_permission(role, Permission.MANAGE_PROJECTS)
