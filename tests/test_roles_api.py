"""Tests for the role and permission endpoints."""

from tests.conftest import API


def permission_ids(client, headers, resource):
    response = client.get(f"{API}/admin/permissions", params={"resource": resource}, headers=headers)
    assert response.status_code == 200
    return {p["action"]: p["id"] for p in response.json()["data"]["items"]}


def create_role(client, headers, name="auditor", permissions=(), **extra):
    payload = {"rolename": name, "description": f"{name} role", "permissions": list(permissions), **extra}
    return client.post(f"{API}/admin/role", json=payload, headers=headers)


class TestPermissionEndpoints:
    def test_catalog_is_seeded(self, client, admin_headers):
        response = client.get(f"{API}/admin/permissions", params={"page_size": 100}, headers=admin_headers)
        body = response.json()

        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["meta"]["total_items"] == 55
        keys = {(p["resource"], p["action"]) for p in body["data"]["items"]}
        assert ("user_roles", "edit") in keys
        assert ("work_orders", "view_list") in keys

    def test_filters(self, client, admin_headers):
        by_action = client.get(
            f"{API}/admin/permissions",
            params={"action": "delete", "page_size": 100},
            headers=admin_headers,
        ).json()["data"]
        by_search = client.get(
            f"{API}/admin/permissions",
            params={"search": "vendors"},
            headers=admin_headers,
        ).json()["data"]

        assert by_action["meta"]["total_items"] == 11
        assert all(p["action"] == "delete" for p in by_action["items"])
        assert by_search["meta"]["total_items"] == 5

    def test_pagination_meta(self, client, admin_headers):
        meta = client.get(
            f"{API}/admin/permissions",
            params={"page": 2, "page_size": 10},
            headers=admin_headers,
        ).json()["data"]["meta"]

        assert meta["current_page"] == 2
        assert meta["total_pages"] == 6
        assert meta["has_next"] is True
        assert meta["has_previous"] is True

    def test_get_and_create(self, client, admin_headers):
        created = client.post(
            f"{API}/admin/permissions",
            json={"resource": "Hostels", "action": "view_list", "description": "List hostels"},
            headers=admin_headers,
        )
        assert created.status_code == 201
        data = created.json()["data"]
        assert data["resource"] == "hostels"
        assert data["role_count"] == 0

        fetched = client.get(f"{API}/admin/permissions/{data['id']}", headers=admin_headers)
        assert fetched.json()["data"]["description"] == "List hostels"

    def test_duplicate_permission_conflicts(self, client, admin_headers):
        response = client.post(
            f"{API}/admin/permissions",
            json={"resource": "tenants", "action": "create"},
            headers=admin_headers,
        )
        assert response.status_code == 409
        assert response.json()["error_code"] == "DUPLICATE_ENTRY"

    def test_missing_permission(self, client, admin_headers):
        response = client.get(f"{API}/admin/permissions/9999", headers=admin_headers)
        assert response.status_code == 404

    def test_resources_and_actions(self, client, admin_headers):
        resources = client.get(f"{API}/admin/permissions/resources", headers=admin_headers).json()["data"]
        actions = client.get(f"{API}/admin/permissions/actions", headers=admin_headers).json()["data"]

        assert resources[0] == "owners"
        assert "owner_requests" in resources
        assert actions == ["view_list", "view_one", "create", "edit", "delete"]


class TestRoleCrud:
    def test_seeded_roles(self, client, admin_headers):
        body = client.get(f"{API}/admin/roles", headers=admin_headers).json()
        names = {r["role_name"] for r in body["data"]["items"]}

        assert names == {"owner", "manager", "staff", "user"}

    def test_create_role_with_permissions(self, client, admin_headers):
        tenants = permission_ids(client, admin_headers, "tenants")
        response = create_role(client, admin_headers, permissions=[tenants["view_one"], tenants["view_list"]])

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["role_name"] == "auditor"
        assert data["owner_user_id"] is None
        assert [p["id"] for p in data["permissions"]] == sorted([tenants["view_list"], tenants["view_one"]])

    def test_duplicate_role_name(self, client, admin_headers):
        assert create_role(client, admin_headers).status_code == 201
        response = create_role(client, admin_headers, name="Auditor")

        assert response.status_code == 409
        assert response.json()["message"] == "Role with this name already exists"

    def test_unknown_permission_ids_rejected(self, client, admin_headers):
        response = create_role(client, admin_headers, permissions=[1, 9999])
        body = response.json()

        assert response.status_code == 400
        assert body["success"] is False
        assert body["message"] == "One or more permissions not found"
        assert body["details"]["missing_permission_ids"] == [9999]

    def test_blank_name_is_a_validation_error(self, client, admin_headers):
        response = create_role(client, admin_headers, name="   ")

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_update_and_delete(self, client, admin_headers):
        role_id = create_role(client, admin_headers).json()["data"]["id"]

        updated = client.put(
            f"{API}/admin/role/{role_id}",
            json={"rolename": "inspector", "description": "Reads everything"},
            headers=admin_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["data"]["role_name"] == "inspector"

        deleted = client.delete(f"{API}/admin/role/{role_id}", headers=admin_headers)
        assert deleted.status_code == 200
        missing = client.get(f"{API}/admin/role/{role_id}", headers=admin_headers)
        assert missing.status_code == 404
        assert missing.json()["error_code"] == "ROLE_NOT_FOUND"

    def test_role_in_use_cannot_be_deleted(self, client, admin_headers, make_user, role_id):
        make_user("sam", role="staff")
        response = client.delete(f"{API}/admin/role/{role_id('staff')}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["details"]["user_count"] == 1


class TestRolePermissions:
    def test_replace_permission_set(self, client, admin_headers):
        role_id = create_role(client, admin_headers, permissions=[1, 2]).json()["data"]["id"]
        vendors = permission_ids(client, admin_headers, "vendors")

        response = client.put(
            f"{API}/admin/role/{role_id}/permissions",
            json={"permissions": [vendors["edit"]]},
            headers=admin_headers,
        )
        assert response.status_code == 200

        listed = client.get(f"{API}/admin/role/{role_id}/permissions", headers=admin_headers).json()["data"]
        assert [(p["resource"], p["action"]) for p in listed] == [("vendors", "edit")]

    def test_replace_with_unknown_id_keeps_old_set(self, client, admin_headers):
        role_id = create_role(client, admin_headers, permissions=[1]).json()["data"]["id"]

        response = client.put(
            f"{API}/admin/role/{role_id}/permissions",
            json={"permissions": [1, 2, 4242]},
            headers=admin_headers,
        )
        assert response.status_code == 400

        listed = client.get(f"{API}/admin/role/{role_id}/permissions", headers=admin_headers).json()["data"]
        assert [p["id"] for p in listed] == [1]


class TestRoleForm:
    def test_form_reflects_permissions(self, client, admin_headers, role_id):
        response = client.get(f"{API}/admin/role/{role_id('owner')}/form", headers=admin_headers)
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["roleName"] == "owner"
        assert data["permissions"]["people"]["tenants"]["viewList"] is True
        assert data["permissions"]["people"]["tenants"]["delete"] is False
        assert data["permissions"]["tasksAndMaintenance"]["tasks"]["viewList"] == "none"

    def test_save_form(self, client, admin_headers):
        role_id = create_role(client, admin_headers).json()["data"]["id"]
        form = {
            "roleName": "",
            "roleDescription": "Maintenance crew",
            "permissions": {
                "people": {"userRoles": {"viewList": True}},
                "tasksAndMaintenance": {"workOrders": {"viewList": "edit", "create": True}},
            },
        }

        response = client.put(f"{API}/admin/role/{role_id}/form", json=form, headers=admin_headers)
        assert response.status_code == 200
        saved = response.json()["data"]
        assert saved["roleName"] == "auditor"
        assert saved["roleDescription"] == "Maintenance crew"
        # "edit" view level is stored as a plain view grant
        assert saved["permissions"]["tasksAndMaintenance"]["workOrders"]["viewList"] == "view"

        listed = client.get(f"{API}/admin/role/{role_id}/permissions", headers=admin_headers).json()["data"]
        assert {(p["resource"], p["action"]) for p in listed} == {
            ("user_roles", "view_list"),
            ("work_orders", "view_list"),
            ("work_orders", "create"),
        }


class TestRoleOwnership:
    def test_private_roles(self, client, make_user, admin_headers):
        olivia = make_user("olivia", role="owner")
        oscar = make_user("oscar", role="owner")

        created = create_role(client, olivia, name="night-desk")
        assert created.status_code == 201
        role = created.json()["data"]
        assert role["owner_user_id"] == int(olivia["X-User-Id"])

        olivia_roles = {r["role_name"] for r in client.get(f"{API}/admin/roles", headers=olivia).json()["data"]["items"]}
        oscar_roles = {r["role_name"] for r in client.get(f"{API}/admin/roles", headers=oscar).json()["data"]["items"]}
        admin_roles = {r["role_name"] for r in client.get(f"{API}/admin/roles", headers=admin_headers).json()["data"]["items"]}

        assert "night-desk" in olivia_roles
        assert "night-desk" not in oscar_roles
        assert "night-desk" in admin_roles

        denied = client.get(f"{API}/admin/role/{role['id']}", headers=oscar)
        assert denied.status_code == 403

    def test_same_name_allowed_for_different_owners(self, client, make_user):
        olivia = make_user("olivia", role="owner")
        oscar = make_user("oscar", role="owner")

        assert create_role(client, olivia, name="cleaners").status_code == 201
        assert create_role(client, oscar, name="cleaners").status_code == 201
        assert create_role(client, oscar, name="cleaners").status_code == 409
