"""Tests for the hostel endpoints and the derived architecture."""

from tests.conftest import API


class TestHostelCrud:
    def test_create(self, client, make_hostel):
        hostel = make_hostel(floors=3, rooms=12, manager_name="Meera")

        assert hostel["name"] == "Green Valley"
        assert hostel["total_rooms"] == 36
        assert hostel["status"] == "active"

    def test_duplicate_name(self, client, admin_headers, make_hostel):
        make_hostel()
        response = client.post(
            f"{API}/admin/hostels",
            json={"name": "green valley", "city": "Goa", "total_floors": 1, "rooms_per_floor": 1},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_rooms_per_floor_is_capped(self, client, admin_headers):
        response = client.post(
            f"{API}/admin/hostels",
            json={"name": "Tower", "city": "Pune", "total_floors": 2, "rooms_per_floor": 100},
            headers=admin_headers,
        )
        body = response.json()

        assert response.status_code == 422
        assert body["success"] is False
        assert body["details"]["errors"][0]["field"] == "rooms_per_floor"

    def test_zero_floors_rejected(self, client, admin_headers):
        response = client.post(
            f"{API}/admin/hostels",
            json={"name": "Flat", "city": "Pune", "total_floors": 0, "rooms_per_floor": 2},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_update(self, client, admin_headers, make_hostel):
        hostel = make_hostel()
        response = client.put(
            f"{API}/admin/hostels/{hostel['id']}",
            json={"rooms_per_floor": 5, "notes": "Renovated"},
            headers=admin_headers,
        )
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["rooms_per_floor"] == 5
        assert data["total_rooms"] == 10
        assert data["notes"] == "Renovated"
        assert data["name"] == "Green Valley"

    def test_update_clears_optional_fields(self, client, admin_headers, make_hostel):
        hostel = make_hostel(manager_name="Ravi", notes="Corner plot")
        data = client.put(
            f"{API}/admin/hostels/{hostel['id']}",
            json={"manager_name": None, "notes": None},
            headers=admin_headers,
        ).json()["data"]

        assert data["manager_name"] is None
        assert data["notes"] is None
        assert data["city"] == "Pune"

    def test_update_rejects_null_required_field(self, client, admin_headers, make_hostel):
        hostel = make_hostel()
        response = client.put(
            f"{API}/admin/hostels/{hostel['id']}",
            json={"name": None},
            headers=admin_headers,
        )

        stored = client.get(f"{API}/admin/hostels/{hostel['id']}", headers=admin_headers).json()["data"]

        assert response.status_code == 422
        assert stored["name"] == "Green Valley"

    def test_delete_keeps_tenants(self, client, admin_headers, make_hostel, make_tenant):
        hostel = make_hostel()
        tenant = make_tenant("Asha", hostel_id=hostel["id"], room="101", bed="A")

        assert client.delete(f"{API}/admin/hostels/{hostel['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"{API}/admin/hostels/{hostel['id']}", headers=admin_headers).status_code == 404

        kept = client.get(f"{API}/admin/tenants/{tenant['id']}", headers=admin_headers).json()["data"]
        assert kept["hostel_id"] is None

    def test_not_found(self, client, admin_headers):
        response = client.get(f"{API}/admin/hostels/404", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error_code"] == "HOSTEL_NOT_FOUND"


class TestHostelSearch:
    def test_search_and_city_filter(self, client, admin_headers, make_hostel):
        make_hostel(name="Green Valley", city="Pune", manager_name="Meera")
        make_hostel(name="Blue Lagoon", city="Goa")
        make_hostel(name="Pune Central", city="Mumbai")

        def names(**params):
            body = client.get(f"{API}/admin/hostels", params=params, headers=admin_headers).json()
            return sorted(h["name"] for h in body["data"]["items"])

        assert names(search="PUNE") == ["Green Valley", "Pune Central"]
        assert names(search="meera") == ["Green Valley"]
        assert names(city="goa") == ["Blue Lagoon"]
        assert names(search="pune", city="Mumbai") == ["Pune Central"]
        assert names() == ["Blue Lagoon", "Green Valley", "Pune Central"]


class TestArchitecture:
    def test_occupancy_from_tenants(self, client, admin_headers, make_hostel, make_tenant):
        hostel = make_hostel(floors=2, rooms=2)
        asha = make_tenant("Asha", hostel_id=hostel["id"], room="101", bed="A")
        make_tenant("Bela", hostel_id=hostel["id"], room="102", bed="B", status="Inactive")
        ghost = make_tenant("Chirag", hostel_id=hostel["id"], room="305", bed="A")
        make_tenant("Elsewhere", room="201", bed="A")

        response = client.get(f"{API}/admin/hostels/{hostel['id']}/architecture", headers=admin_headers)
        data = response.json()["data"]

        assert response.status_code == 200
        assert data["hostel_id"] == hostel["id"]
        assert data["total_rooms"] == 4
        assert data["total_seats"] == 16
        assert data["occupied_seats"] == 1
        assert data["available_seats"] == 15
        assert data["unplaced_tenant_ids"] == [ghost["id"]]

        room = data["floors"][0]["rooms"][0]
        assert room["id"] == "1-01"
        assert room["occupied_seats"] == 1
        seat = room["seats"][0]
        assert seat == {
            "id": "1-01-A",
            "seat_number": "A",
            "is_occupied": True,
            "tenant_name": "Asha",
            "tenant_id": asha["id"],
        }

    def test_seat_conflicts_reported(self, client, admin_headers, make_hostel, make_tenant):
        hostel = make_hostel(floors=1, rooms=1)
        first = make_tenant("First", hostel_id=hostel["id"], room="101", bed="C")
        make_tenant("Second", hostel_id=hostel["id"], room="101", bed="c")

        data = client.get(f"{API}/admin/hostels/{hostel['id']}/architecture", headers=admin_headers).json()["data"]

        assert data["seat_conflicts"] == ["1-01-C"]
        assert data["floors"][0]["rooms"][0]["seats"][2]["tenant_id"] == first["id"]

    def test_missing_hostel(self, client, admin_headers):
        response = client.get(f"{API}/admin/hostels/99/architecture", headers=admin_headers)
        assert response.status_code == 404


class TestStats:
    def test_portfolio_stats(self, client, admin_headers, make_hostel, make_tenant):
        first = make_hostel(name="One", floors=1, rooms=2)
        make_hostel(name="Two", floors=2, rooms=1)
        make_tenant("Asha", hostel_id=first["id"], room="101", bed="A")
        make_tenant("Bela", hostel_id=first["id"], room="101", bed="B")

        stats = client.get(f"{API}/admin/hostels/stats", headers=admin_headers).json()["data"]

        assert stats == {
            "total_hostels": 2,
            "total_rooms": 4,
            "total_capacity": 4,
            "total_seats": 16,
            "occupied_rooms": 1,
            "occupied_seats": 2,
            "occupancy_rate": 12.5,
        }

    def test_empty_portfolio(self, client, admin_headers):
        stats = client.get(f"{API}/admin/hostels/stats", headers=admin_headers).json()["data"]
        assert stats["occupancy_rate"] == 0.0

    def test_total_capacity(self, client, admin_headers, make_hostel):
        make_hostel(name="One", floors=3, rooms=4)
        make_hostel(name="Two", floors=2, rooms=5)

        stats = client.get(f"{API}/admin/hostels/stats", headers=admin_headers).json()["data"]

        assert stats["total_capacity"] == 22
        assert stats["total_rooms"] == 22


class TestRequestTracking:
    def test_request_id_header(self, client, admin_headers):
        response = client.get(f"{API}/admin/hostels", headers={**admin_headers, "X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert "X-Process-Time" in response.headers

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "ok"
