"""Tests for permission checks on the acting user."""

from hostel_admin.models.people import User
from hostel_admin.services.rbac import AccessControlService
from tests.conftest import API


class TestIdentification:
    def test_missing_header(self, client):
        response = client.get(f"{API}/admin/roles")

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTHENTICATION_FAILED"

    def test_unknown_user(self, client):
        response = client.get(f"{API}/admin/roles", headers={"X-User-Id": "9999"})

        assert response.status_code == 404
        assert response.json()["error_code"] == "USER_NOT_FOUND"

    def test_hostel_routes_need_a_user(self, client):
        assert client.get(f"{API}/admin/hostels").status_code == 401


class TestRoleChecks:
    def test_user_without_role(self, client, make_user):
        nobody = make_user("nobody")
        response = client.get(f"{API}/admin/tenants", headers=nobody)

        assert response.status_code == 403
        assert response.json()["message"] == "Access denied. No role assigned."

    def test_staff_can_view_but_not_create_tenants(self, client, make_user):
        staff = make_user("sam", role="staff")

        assert client.get(f"{API}/admin/tenants", headers=staff).status_code == 200
        denied = client.post(f"{API}/admin/tenants", json={"name": "Asha"}, headers=staff)
        assert denied.status_code == 403
        assert denied.json()["details"] == {"resource": "tenants", "action": "create"}

    def test_staff_cannot_manage_roles(self, client, make_user):
        staff = make_user("sam", role="staff")
        assert client.get(f"{API}/admin/roles", headers=staff).status_code == 403

    def test_owner_always_manages_roles(self, client, make_user):
        owner = make_user("olivia", role="owner")

        assert client.get(f"{API}/admin/roles", headers=owner).status_code == 200
        assert client.get(f"{API}/admin/permissions", headers=owner).status_code == 200

    def test_owner_limited_elsewhere(self, client, make_user, make_tenant):
        owner = make_user("olivia", role="owner")
        tenant = make_tenant("Asha")

        assert client.get(f"{API}/admin/tenants/{tenant['id']}", headers=owner).status_code == 200
        assert client.delete(f"{API}/admin/tenants/{tenant['id']}", headers=owner).status_code == 403

    def test_granting_a_permission_takes_effect(self, client, admin_headers, make_user, role_id):
        staff = make_user("sam", role="staff")
        assert client.get(f"{API}/admin/users", headers=staff).status_code == 403

        users_list = client.get(
            f"{API}/admin/permissions",
            params={"resource": "users", "action": "view_list"},
            headers=admin_headers,
        ).json()["data"]["items"][0]["id"]
        current = client.get(f"{API}/admin/role/{role_id('staff')}/permissions", headers=admin_headers).json()["data"]
        client.put(
            f"{API}/admin/role/{role_id('staff')}/permissions",
            json={"permissions": [p["id"] for p in current] + [users_list]},
            headers=admin_headers,
        )

        assert client.get(f"{API}/admin/users", headers=staff).status_code == 200


class TestAccessControlService:
    def test_admin_is_allowed_everything(self, db):
        admin = db.query(User).filter(User.is_admin.is_(True)).one()
        result = AccessControlService(db).check(admin.id, "api_keys", "delete")

        assert result.is_success
        assert result.data.id == admin.id

    def test_missing_user_id(self, db):
        result = AccessControlService(db).check(None, "tenants", "view_list")

        assert not result.is_success
        assert result.error.status_code == 401
