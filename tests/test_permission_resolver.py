# tests/test_permission_resolver.py

"""
Tests for effective permission resolution across the static matrix,
stored overrides and custom roles.
"""

import pytest

from core.config import settings
from core.permissions import ALL_PERMISSIONS, PERMISSION_ALIASES, ROLE_PERMISSIONS, Permission
from core.roles import ALL_ROLES, ROLE_METADATA, Role


# -----------------------------------------------------
# Built-in roles
# -----------------------------------------------------
@pytest.mark.parametrize("role", ALL_ROLES)
def test_built_in_roles_resolve_to_static_permissions(resolver, role):
    assert resolver.get_permissions_for_role(role.value) == ROLE_PERMISSIONS[role]


def test_senior_admin_has_everything_without_override(resolver):
    for permission in ALL_PERMISSIONS:
        assert resolver.has_permission("SENIOR_ADMIN", permission)


def test_aliases_resolve_like_canonical_names(resolver):
    assert resolver.has_permission("SENIOR_ADMIN", "MANAGE_EMPLOYEES")
    assert resolver.has_permission("SENIOR_ADMIN", Permission.MANAGE_EMPLOYEES)
    assert resolver.has_permission("CONTRACTOR", "VIEW_EMPLOYEES")


def test_unknown_role_fails_closed(resolver):
    assert resolver.get_permissions_for_role("GHOST") == frozenset()
    for permission in ALL_PERMISSIONS:
        assert not resolver.has_permission("GHOST", permission)
    assert not resolver.has_permission("", Permission.VIEW_OWN_ORDERS)


def test_unknown_permission_is_denied(resolver):
    assert not resolver.has_permission("SENIOR_ADMIN", "LAUNCH_ROCKETS")


def test_any_and_all(resolver):
    assert resolver.has_any_permission("CUSTOMER", ["MANAGE_ACCOUNTS", "VIEW_OWN_ORDERS"])
    assert not resolver.has_any_permission("CUSTOMER", ["MANAGE_ACCOUNTS"])
    assert not resolver.has_any_permission("CUSTOMER", [])
    assert resolver.has_all_permissions("CUSTOMER", ["VIEW_OWN_ORDERS", "CREATE_REVIEWS"])
    assert not resolver.has_all_permissions("CUSTOMER", ["VIEW_OWN_ORDERS", "LAUNCH_ROCKETS"])
    assert resolver.has_all_permissions("GHOST", [])


# -----------------------------------------------------
# Dynamic override
# -----------------------------------------------------
def test_override_applies_to_built_in_roles(resolver, store_role_matrix):
    store_role_matrix({"ARTISAN": ["VIEW_ALL_ORDERS"], "SENIOR_ADMIN": ["MANAGE_SYSTEM_SETTINGS"]})

    assert resolver.has_permission("ARTISAN", "VIEW_ALL_ORDERS")
    assert not resolver.has_permission("SENIOR_ADMIN", "MANAGE_ACCOUNTS")
    # not in the document: no permissions while the override is active
    assert resolver.get_permissions_for_role("CUSTOMER") == frozenset()


def test_unknown_role_fails_closed_under_override(resolver, store_role_matrix):
    store_role_matrix({"MANAGER": ["VIEW_KPI"], "GHOST": ["VIEW_KPI"]})

    assert not resolver.has_permission("GHOST", "VIEW_KPI")
    assert resolver.has_permission("MANAGER", "VIEW_KPI")


# -----------------------------------------------------
# Custom roles
# -----------------------------------------------------
def test_custom_role_permissions_are_resolved(resolver, store_custom_roles, custom_role_doc):
    store_custom_roles(custom_role_doc("PROJECT_COORDINATOR", ["VIEW_ALL_PROJECTS", "MANAGE_MILESTONES"]))

    assert resolver.has_permission("PROJECT_COORDINATOR", Permission.MANAGE_MILESTONES)
    assert not resolver.has_permission("PROJECT_COORDINATOR", Permission.MANAGE_PROJECTS)
    assert resolver.is_valid_role("PROJECT_COORDINATOR")
    assert resolver.get_all_roles()[-1] == "PROJECT_COORDINATOR"


def test_custom_roles_layer_on_top_of_override(resolver, store_role_matrix, store_custom_roles, custom_role_doc):
    store_role_matrix({"MANAGER": ["VIEW_KPI"]})
    store_custom_roles(custom_role_doc("PROJECT_COORDINATOR", ["VIEW_ALL_PROJECTS"]))

    table = resolver.get_effective_table()

    assert table == {
        "MANAGER": frozenset([Permission.VIEW_KPI]),
        "PROJECT_COORDINATOR": frozenset([Permission.VIEW_ALL_PROJECTS]),
    }


@pytest.mark.parametrize("override", [None, {"MANAGER": ["VIEW_KPI"]}])
def test_custom_role_cannot_shadow_built_in(resolver, store_role_matrix, store_custom_roles, custom_role_doc, override):
    if override is not None:
        store_role_matrix(override)
    store_custom_roles(
        custom_role_doc("MANAGER", ["MANAGE_SYSTEM_SETTINGS"], label="Hijacked", defaultRoute="/evil"),
    )

    assert not resolver.has_permission("MANAGER", "MANAGE_SYSTEM_SETTINGS")
    assert resolver.get_role_label("MANAGER") == ROLE_METADATA[Role.MANAGER].label
    assert resolver.get_default_route("MANAGER") == ROLE_METADATA[Role.MANAGER].default_route
    assert resolver.get_all_roles().count("MANAGER") == 1
    assert resolver.get_custom_role_metadata("MANAGER") is None
    assert resolver.get_custom_role_permissions("MANAGER") == frozenset()


def test_corrupt_custom_roles_leave_built_ins_working(resolver, store):
    store.documents[settings.CUSTOM_ROLES_SETTING_KEY] = "this is not json"

    assert resolver.has_permission("ACCOUNTANT", "MANAGE_INVOICES")
    assert not resolver.has_permission("PROJECT_COORDINATOR", "VIEW_KPI")
    assert resolver.get_all_roles() == [r.value for r in ALL_ROLES]


# -----------------------------------------------------
# Metadata
# -----------------------------------------------------
def test_metadata_prefers_built_in_then_custom_then_defaults(resolver, store_custom_roles, custom_role_doc):
    store_custom_roles(custom_role_doc("PROJECT_COORDINATOR", label="Coordinator"))

    assert resolver.get_role_label("CUSTOMER") == "Tenant"
    assert resolver.get_role_label("PROJECT_COORDINATOR") == "Coordinator"
    assert resolver.get_role_color("PROJECT_COORDINATOR") == "bg-teal-100 text-teal-800"
    assert resolver.get_default_route("PROJECT_COORDINATOR") == "/admin/projects"

    assert resolver.get_role_label("SITE_INSPECTOR") == "Site Inspector"
    assert resolver.get_role_color("SITE_INSPECTOR") == "bg-orange-100 text-orange-800"
    assert resolver.get_role_description("SITE_INSPECTOR") == "Custom role"
    assert resolver.get_default_route("SITE_INSPECTOR") == "/customer/dashboard"
    assert resolver.get_role_metadata("SITE_INSPECTOR") is None


def test_all_role_metadata_includes_custom_roles(resolver, store_custom_roles, custom_role_doc):
    store_custom_roles(custom_role_doc("PROJECT_COORDINATOR"))

    metadata = resolver.get_all_role_metadata()

    assert set(metadata) == {r.value for r in ALL_ROLES} | {"PROJECT_COORDINATOR"}
    assert metadata["PROJECT_COORDINATOR"].default_route == "/admin/projects"


# -----------------------------------------------------
# Caching
# -----------------------------------------------------
def test_repeated_checks_hit_the_store_once_per_window(resolver, store, clock):
    for _ in range(50):
        resolver.has_permission("MANAGER", "VIEW_KPI")

    assert store.reads[settings.ROLE_PERMISSIONS_SETTING_KEY] == 1
    assert store.reads[settings.CUSTOM_ROLES_SETTING_KEY] == 1

    clock.advance(300)
    resolver.has_permission("MANAGER", "VIEW_KPI")
    assert store.reads[settings.ROLE_PERMISSIONS_SETTING_KEY] == 2


def test_external_changes_appear_after_the_window(resolver, clock, store_custom_roles, custom_role_doc):
    assert not resolver.is_valid_role("PROJECT_COORDINATOR")

    store_custom_roles(custom_role_doc("PROJECT_COORDINATOR", ["VIEW_KPI"]))
    assert not resolver.is_valid_role("PROJECT_COORDINATOR")

    clock.advance(300)
    assert resolver.has_permission("PROJECT_COORDINATOR", "VIEW_KPI")


def test_invalidate_caches_forces_reload(resolver, store_role_matrix):
    assert resolver.has_permission("SENIOR_ADMIN", "MANAGE_ACCOUNTS")

    store_role_matrix({"SENIOR_ADMIN": []})
    resolver.invalidate_caches()

    assert not resolver.has_permission("SENIOR_ADMIN", "MANAGE_ACCOUNTS")


def test_stored_custom_admin_role_is_ignored(resolver, store_custom_roles, custom_role_doc):
    store_custom_roles(custom_role_doc("ADMIN", ["MANAGE_SYSTEM_SETTINGS", "VIEW_KPI"]))

    assert not resolver.is_valid_role("ADMIN")
    assert "ADMIN" not in resolver.get_all_roles()
    assert "ADMIN" not in resolver.get_all_role_metadata()
    assert not resolver.has_permission("ADMIN", "VIEW_KPI")
    assert resolver.get_custom_role_permissions("ADMIN") == frozenset()


@pytest.mark.parametrize(
    "key,raw",
    [
        (settings.CUSTOM_ROLES_SETTING_KEY, "[" * 200000),
        (settings.ROLE_PERMISSIONS_SETTING_KEY, '{"a":' * 200000),
    ],
)
def test_deeply_nested_documents_never_reach_the_caller(resolver, store, key, raw):
    store.documents[key] = raw

    assert resolver.has_permission("ACCOUNTANT", "MANAGE_INVOICES")
    assert not resolver.has_permission("CUSTOMER", "MANAGE_INVOICES")


# -----------------------------------------------------
# Aliases
# -----------------------------------------------------
@pytest.mark.parametrize("alias,canonical", sorted(PERMISSION_ALIASES.items()))
@pytest.mark.parametrize("role", ALL_ROLES)
def test_alias_and_canonical_agree_for_every_role(resolver, role, alias, canonical):
    expected = canonical in ROLE_PERMISSIONS[role]

    assert resolver.has_permission(role.value, alias) is expected
    assert resolver.has_permission(role.value, canonical.value) is expected
    assert resolver.has_permission(role.value, canonical) is expected


@pytest.mark.parametrize("alias,canonical", sorted(PERMISSION_ALIASES.items()))
def test_override_stored_with_alias_spelling(resolver, store_role_matrix, alias, canonical):
    store_role_matrix({"ARTISAN": [alias]})

    assert resolver.get_permissions_for_role("ARTISAN") == frozenset([canonical])
    assert resolver.has_permission("ARTISAN", alias)
    assert resolver.has_permission("ARTISAN", canonical.value)
