"""Tests for the permission catalog and the role form mapper."""

from types import SimpleNamespace

import pytest

from hostel_admin.core.exceptions import BusinessRuleError, ErrorCode
from hostel_admin.schemas.rbac import RoleFormPermissions, ViewLevel
from hostel_admin.services.rbac.permission_catalog import PermissionCatalog
from hostel_admin.services.rbac.permission_mapper import (
    blank_form,
    extract_permission_ids,
    form_key_to_resource,
    map_permissions_to_form,
    resource_to_form_key,
)

ACTIONS = ["view_list", "view_one", "create", "edit", "delete"]


def make_catalog(resources=("tenants", "user_roles", "work_orders", "tasks")):
    rows = []
    for resource in resources:
        for action in ACTIONS:
            rows.append(SimpleNamespace(id=len(rows) + 1, resource=resource, action=action))
    return PermissionCatalog.from_permissions(rows)


class TestPermissionCatalog:
    def test_lookup(self):
        catalog = make_catalog()

        assert len(catalog) == 20
        assert catalog.id_for("tenants", "view_list") == 1
        assert catalog.id_for("user_roles", "delete") == 10
        assert catalog.id_for("vendors", "view_list") is None
        assert "tasks_edit" in catalog
        assert catalog.get(6).key == "user_roles_view_list"
        assert catalog.resources() == ["tenants", "user_roles", "work_orders", "tasks"]

    def test_duplicate_entries_rejected(self):
        rows = [
            SimpleNamespace(id=1, resource="tenants", action="view_list"),
            SimpleNamespace(id=2, resource="tenants", action="view_list"),
        ]
        with pytest.raises(BusinessRuleError) as exc_info:
            PermissionCatalog.from_permissions(rows)
        assert exc_info.value.error_code == ErrorCode.PERMISSION_CATALOG_MISMATCH

    def test_require_ids_deduplicates_in_order(self):
        assert make_catalog().require_ids([3, 1, 3, 2]) == [3, 1, 2]

    def test_require_ids_rejects_unknown(self):
        with pytest.raises(BusinessRuleError) as exc_info:
            make_catalog().require_ids([1, 999, 500])

        assert exc_info.value.message == "One or more permissions not found"
        assert exc_info.value.status_code == 400
        assert exc_info.value.details["missing_permission_ids"] == [500, 999]


class TestKeyConversion:
    @pytest.mark.parametrize("form_key,resource", [
        ("tenants", "tenants"),
        ("userRoles", "user_roles"),
        ("apiKeys", "api_keys"),
        ("tenantRequests", "tenant_requests"),
    ])
    def test_both_directions(self, form_key, resource):
        assert form_key_to_resource(form_key) == resource
        assert resource_to_form_key(resource) == form_key


class TestExtractPermissionIds:
    def test_boolean_flags(self):
        form = RoleFormPermissions.model_validate({
            "people": {
                "tenants": {"viewList": True, "edit": True},
                "userRoles": {"viewOne": True},
            },
        })
        catalog = make_catalog()

        assert extract_permission_ids(form, catalog) == [
            catalog.id_for("tenants", "view_list"),
            catalog.id_for("tenants", "edit"),
            catalog.id_for("user_roles", "view_one"),
        ]

    def test_tri_state_view_levels(self):
        form = RoleFormPermissions.model_validate({
            "tasksAndMaintenance": {
                "workOrders": {"viewList": "edit", "viewOne": "view", "delete": True},
                "tasks": {"viewList": "none", "viewOne": "none"},
            },
        })
        catalog = make_catalog()

        assert extract_permission_ids(form, catalog) == [
            catalog.id_for("work_orders", "view_list"),
            catalog.id_for("work_orders", "view_one"),
            catalog.id_for("work_orders", "delete"),
        ]

    def test_entries_missing_from_catalog_are_skipped(self):
        form = RoleFormPermissions.model_validate({
            "people": {"vendors": {"viewList": True}, "tenants": {"create": True}},
        })
        catalog = make_catalog()

        assert extract_permission_ids(form, catalog) == [catalog.id_for("tenants", "create")]

    def test_blank_form_grants_nothing(self):
        assert extract_permission_ids(blank_form(), make_catalog()) == []


class TestMapPermissionsToForm:
    def test_starts_from_all_denied(self):
        form = map_permissions_to_form([])

        assert set(form.people) == {"prospects", "owners", "vendors", "tenants", "users", "userRoles", "apiKeys"}
        assert set(form.tasks_and_maintenance) == {"tasks", "workOrders", "tenantRequests", "ownerRequests"}
        assert form.people["tenants"].view_list is False
        assert form.tasks_and_maintenance["tasks"].view_list == ViewLevel.NONE

    def test_grants_are_set(self):
        permissions = [
            SimpleNamespace(resource="user_roles", action="edit"),
            SimpleNamespace(resource="owner_requests", action="view_one"),
            SimpleNamespace(resource="owner_requests", action="create"),
        ]
        form = map_permissions_to_form(permissions)

        assert form.people["userRoles"].edit is True
        assert form.people["userRoles"].view_list is False
        assert form.tasks_and_maintenance["ownerRequests"].view_one == ViewLevel.VIEW
        assert form.tasks_and_maintenance["ownerRequests"].create is True

    def test_unknown_resources_and_actions_ignored(self):
        permissions = [
            SimpleNamespace(resource="hostels", action="view_list"),
            SimpleNamespace(resource="tenants", action="archive"),
        ]
        assert map_permissions_to_form(permissions) == blank_form()

    def test_serializes_camel_case(self):
        form = map_permissions_to_form([SimpleNamespace(resource="tenants", action="view_list")])
        dumped = form.model_dump(by_alias=True)

        assert dumped["people"]["tenants"]["viewList"] is True
        assert "tasksAndMaintenance" in dumped


class TestRoundTrip:
    def test_edit_view_level_collapses_to_view(self):
        catalog = make_catalog()
        rows = {entry.id: SimpleNamespace(resource=entry.resource, action=entry.action) for entry in catalog}
        form = RoleFormPermissions.model_validate({
            "tasksAndMaintenance": {"tasks": {"viewList": "edit"}},
        })

        ids = extract_permission_ids(form, catalog)
        restored = map_permissions_to_form(rows[i] for i in ids)

        assert restored.tasks_and_maintenance["tasks"].view_list == ViewLevel.VIEW
        assert restored != form
