"""Tests for tenants, employees, people tables and user accounts."""

from tests.conftest import API
from tests.test_roles_api import create_role, permission_ids


class TestTenants:
    def test_create_normalizes_bed(self, make_hostel, make_tenant):
        hostel = make_hostel()
        tenant = make_tenant("Asha", hostel_id=hostel["id"], room="101", bed="a", email="asha@hostel.io")

        assert tenant["bed"] == "A"
        assert tenant["hostel_name"] == "Green Valley"
        assert tenant["status"] == "Active"

    def test_default_status_is_pending(self, client, admin_headers):
        response = client.post(f"{API}/admin/tenants", json={"name": "Dev"}, headers=admin_headers)
        assert response.json()["data"]["status"] == "Pending"

    def test_unknown_hostel(self, client, admin_headers):
        response = client.post(f"{API}/admin/tenants", json={"name": "Dev", "hostel_id": 77}, headers=admin_headers)
        assert response.status_code == 404

    def test_lease_dates_validated(self, client, admin_headers):
        response = client.post(
            f"{API}/admin/tenants",
            json={"name": "Dev", "lease_start": "2025-06-01", "lease_end": "2025-01-01"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_update_rejects_lease_end_before_stored_start(self, client, admin_headers, make_tenant):
        tenant = make_tenant("Asha", lease_start="2025-06-01")

        response = client.put(
            f"{API}/admin/tenants/{tenant['id']}",
            json={"lease_end": "2025-01-01"},
            headers=admin_headers,
        )
        stored = client.get(f"{API}/admin/tenants/{tenant['id']}", headers=admin_headers).json()["data"]

        assert response.status_code == 422
        assert response.json()["details"]["field_errors"]["lease_end"] == ["lease_end must not be before lease_start"]
        assert stored["lease_end"] is None

    def test_update_rejects_dates_out_of_order(self, client, admin_headers, make_tenant):
        tenant = make_tenant("Asha")

        response = client.put(
            f"{API}/admin/tenants/{tenant['id']}",
            json={"lease_start": "2025-06-01", "lease_end": "2025-01-01"},
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_update_moves_lease_forward(self, client, admin_headers, make_tenant):
        tenant = make_tenant("Asha", lease_start="2025-01-01", lease_end="2025-06-01")

        response = client.put(
            f"{API}/admin/tenants/{tenant['id']}",
            json={"lease_start": "2025-03-01"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["lease_start"] == "2025-03-01"

    def test_update_rejects_null_name(self, client, admin_headers, make_tenant):
        tenant = make_tenant("Asha")
        response = client.put(f"{API}/admin/tenants/{tenant['id']}", json={"name": None}, headers=admin_headers)

        assert response.status_code == 422

    def test_invalid_email(self, client, admin_headers):
        response = client.post(f"{API}/admin/tenants", json={"name": "Dev", "email": "nope"}, headers=admin_headers)
        assert response.status_code == 422

    def test_filters(self, client, admin_headers, make_hostel, make_tenant):
        first = make_hostel(name="One")
        second = make_hostel(name="Two")
        make_tenant("Asha", hostel_id=first["id"], room="101", bed="A")
        make_tenant("Bela", hostel_id=first["id"], status="Inactive")
        make_tenant("Chirag", hostel_id=second["id"], phone="98765")

        def names(**params):
            body = client.get(f"{API}/admin/tenants", params=params, headers=admin_headers).json()
            return sorted(t["name"] for t in body["data"]["items"])

        assert names(hostel_id=first["id"]) == ["Asha", "Bela"]
        assert names(status="Inactive") == ["Bela"]
        assert names(search="987") == ["Chirag"]
        assert names(search="asha", hostel_id=second["id"]) == []

    def test_update_and_delete(self, client, admin_headers, make_tenant):
        tenant = make_tenant("Asha", status="Pending")

        updated = client.put(
            f"{API}/admin/tenants/{tenant['id']}",
            json={"status": "Active", "room": "202", "bed": "d"},
            headers=admin_headers,
        ).json()["data"]
        assert updated["status"] == "Active"
        assert updated["bed"] == "D"
        assert updated["name"] == "Asha"

        assert client.delete(f"{API}/admin/tenants/{tenant['id']}", headers=admin_headers).status_code == 200
        missing = client.get(f"{API}/admin/tenants/{tenant['id']}", headers=admin_headers)
        assert missing.json()["error_code"] == "TENANT_NOT_FOUND"


class TestEmployees:
    def test_create_and_get(self, client, admin_headers, make_hostel, make_employee):
        hostel = make_hostel()
        employee = make_employee("Mohan", role="manager", hostel_id=hostel["id"], joined_at="2024-01-05")

        assert employee["role"] == "manager"
        assert employee["status"] == "Active"
        assert employee["hostel_name"] == "Green Valley"

        fetched = client.get(f"{API}/admin/employees/{employee['id']}", headers=admin_headers).json()["data"]
        assert fetched["joined_at"] == "2024-01-05"

    def test_unknown_hostel(self, client, admin_headers):
        response = client.post(f"{API}/admin/employees", json={"name": "Sunil", "hostel_id": 77}, headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == "HOSTEL_NOT_FOUND"

    def test_requires_identified_user(self, client):
        response = client.post(f"{API}/admin/employees", json={"name": "Sunil"})
        assert response.status_code == 401

    def test_list_filters(self, client, admin_headers, make_hostel, make_employee):
        hostel = make_hostel()
        make_employee("Sunil", hostel_id=hostel["id"])
        make_employee("Sara", status="Inactive")
        make_employee("Mohan", role="manager", phone="98765")

        def names(**params):
            body = client.get(f"{API}/admin/employees", params=params, headers=admin_headers).json()
            return sorted(e["name"] for e in body["data"]["items"])

        assert names() == ["Mohan", "Sara", "Sunil"]
        assert names(role="staff") == ["Sara", "Sunil"]
        assert names(hostel_id=hostel["id"]) == ["Sunil"]
        assert names(status="Inactive") == ["Sara"]
        assert names(search="987") == ["Mohan"]

    def test_update_status_and_delete(self, client, admin_headers, make_employee):
        employee = make_employee("Sunil")

        updated = client.put(
            f"{API}/admin/employees/{employee['id']}",
            json={"role": "manager", "phone": "12345"},
            headers=admin_headers,
        ).json()["data"]
        assert updated["role"] == "manager"
        assert updated["name"] == "Sunil"

        deactivated = client.patch(
            f"{API}/admin/employees/{employee['id']}/status",
            json={"status": "Inactive"},
            headers=admin_headers,
        ).json()["data"]
        assert deactivated["status"] == "Inactive"

        assert client.delete(f"{API}/admin/employees/{employee['id']}", headers=admin_headers).status_code == 200
        missing = client.get(f"{API}/admin/employees/{employee['id']}", headers=admin_headers)
        assert missing.status_code == 404
        assert missing.json()["error_code"] == "EMPLOYEE_NOT_FOUND"

    def test_update_rejects_null_role(self, client, admin_headers, make_employee):
        employee = make_employee("Sunil")
        response = client.put(f"{API}/admin/employees/{employee['id']}", json={"role": None}, headers=admin_headers)

        assert response.status_code == 422


class TestPeopleTables:
    def test_tables(self, client, admin_headers, make_tenant, make_employee):
        make_tenant("Asha")
        make_employee("Sunil", joined_at="2024-01-05")
        make_employee("Sara")
        make_employee("Mohan", role="manager")

        tenants = client.get(f"{API}/admin/table/tenants", headers=admin_headers).json()["data"]
        staff = client.get(f"{API}/admin/table/staff", headers=admin_headers).json()["data"]
        managers = client.get(f"{API}/admin/table/managers", headers=admin_headers).json()["data"]

        assert [t["name"] for t in tenants["items"]] == ["Asha"]
        assert sorted(e["name"] for e in staff["items"]) == ["Sara", "Sunil"]
        assert staff["meta"]["total_items"] == 2
        assert [e["name"] for e in managers["items"]] == ["Mohan"]
        assert managers["items"][0]["role"] == "manager"

    def test_page_size_is_clamped(self, client, admin_headers):
        meta = client.get(
            f"{API}/admin/table/tenants",
            params={"page_size": 1000},
            headers=admin_headers,
        ).json()["data"]["meta"]
        assert meta["page_size"] == 100


class TestUsers:
    def test_create_and_list(self, client, admin_headers, make_user):
        make_user("sam", role="staff")
        body = client.get(f"{API}/admin/users", headers=admin_headers).json()["data"]

        by_name = {u["username"]: u for u in body["items"]}
        assert set(by_name) == {"admin", "sam"}
        assert by_name["sam"]["role_name"] == "staff"
        assert by_name["admin"]["is_admin"] is True

    def test_duplicate_user(self, client, admin_headers, make_user):
        make_user("sam")
        response = client.post(
            f"{API}/admin/users",
            json={"username": "SAM", "email": "other@hostel.io"},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_get_update_and_delete(self, client, admin_headers, make_user):
        user_id = make_user("sam")["X-User-Id"]

        fetched = client.get(f"{API}/admin/users/{user_id}", headers=admin_headers).json()["data"]
        assert fetched["username"] == "sam"

        updated = client.put(
            f"{API}/admin/users/{user_id}",
            json={"email": "samuel@hostel.io", "status": "inactive"},
            headers=admin_headers,
        ).json()["data"]
        assert updated["email"] == "samuel@hostel.io"
        assert updated["status"] == "inactive"
        assert updated["username"] == "sam"

        assert client.delete(f"{API}/admin/users/{user_id}", headers=admin_headers).status_code == 200
        missing = client.get(f"{API}/admin/users/{user_id}", headers=admin_headers)
        assert missing.json()["error_code"] == "USER_NOT_FOUND"

    def test_update_to_taken_username(self, client, admin_headers, make_user):
        make_user("sam")
        user_id = make_user("ria")["X-User-Id"]

        response = client.put(f"{API}/admin/users/{user_id}", json={"username": "Sam"}, headers=admin_headers)
        assert response.status_code == 409

    def test_cannot_delete_own_account(self, client, admin_headers):
        admin_id = admin_headers["X-User-Id"]
        response = client.delete(f"{API}/admin/users/{admin_id}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error_code"] == "BUSINESS_RULE_VIOLATION"

    def test_delete_removes_private_roles(self, client, admin_headers, make_user):
        owner = make_user("olga", role="owner")
        private = create_role(client, owner, name="night-shift").json()["data"]

        assert client.delete(f"{API}/admin/users/{owner['X-User-Id']}", headers=admin_headers).status_code == 200
        assert client.get(f"{API}/admin/role/{private['id']}", headers=admin_headers).status_code == 404

    def test_assign_role(self, client, admin_headers, make_user, role_id):
        user_id = make_user("sam")["X-User-Id"]

        assigned = client.put(
            f"{API}/admin/users/{user_id}/role",
            json={"roleId": role_id("manager")},
            headers=admin_headers,
        )
        assert assigned.json()["data"]["role_name"] == "manager"

        cleared = client.put(f"{API}/admin/users/{user_id}/role", json={"roleId": None}, headers=admin_headers)
        assert cleared.json()["data"]["user_role_id"] is None

    def test_assign_unknown_role(self, client, admin_headers, make_user):
        user_id = make_user("sam")["X-User-Id"]
        response = client.put(f"{API}/admin/users/{user_id}/role", json={"roleId": 999}, headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == "ROLE_NOT_FOUND"


class TestRolePrivacyOnAssignment:
    """A non-admin account manager may hand out global roles only."""

    def _account_desk(self, client, admin_headers, make_user):
        users = permission_ids(client, admin_headers, "users")
        grants = [users["view_list"], users["view_one"], users["create"], users["edit"]]
        assert create_role(client, admin_headers, name="account-desk", permissions=grants).status_code == 201
        return make_user("desk", role="account-desk")

    def _private_role(self, client, make_user):
        owner = make_user("olga", role="owner")
        response = create_role(client, owner, name="night-shift")
        assert response.status_code == 201
        return response.json()["data"]

    def test_cannot_assign_another_users_private_role(self, client, admin_headers, make_user):
        desk = self._account_desk(client, admin_headers, make_user)
        private = self._private_role(client, make_user)
        target = make_user("sam")["X-User-Id"]

        response = client.put(f"{API}/admin/users/{target}/role", json={"roleId": private["id"]}, headers=desk)
        stored = client.get(f"{API}/admin/users/{target}", headers=admin_headers).json()["data"]

        assert response.status_code == 403
        assert response.json()["error_code"] == "INSUFFICIENT_PERMISSIONS"
        assert stored["user_role_id"] is None

    def test_cannot_create_user_with_another_users_private_role(self, client, admin_headers, make_user):
        desk = self._account_desk(client, admin_headers, make_user)
        private = self._private_role(client, make_user)

        response = client.post(
            f"{API}/admin/users",
            json={"username": "sam", "email": "sam@hostel.io", "user_role_id": private["id"]},
            headers=desk,
        )
        assert response.status_code == 403

    def test_global_roles_remain_assignable(self, client, admin_headers, make_user, role_id):
        desk = self._account_desk(client, admin_headers, make_user)
        target = make_user("sam")["X-User-Id"]

        response = client.put(f"{API}/admin/users/{target}/role", json={"roleId": role_id("staff")}, headers=desk)

        assert response.status_code == 200
        assert response.json()["data"]["role_name"] == "staff"

    def test_admin_may_assign_private_roles(self, client, admin_headers, make_user):
        private = self._private_role(client, make_user)
        target = make_user("sam")["X-User-Id"]

        response = client.put(
            f"{API}/admin/users/{target}/role",
            json={"roleId": private["id"]},
            headers=admin_headers,
        )
        assert response.status_code == 200

    def test_non_admin_cannot_grant_admin(self, client, admin_headers, make_user):
        desk = self._account_desk(client, admin_headers, make_user)

        response = client.post(
            f"{API}/admin/users",
            json={"username": "sam", "email": "sam@hostel.io", "is_admin": True},
            headers=desk,
        )
        assert response.status_code == 403
