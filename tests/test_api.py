"""HTTP-тесты эндпоинтов /health и /rides."""

import pytest
from sqlalchemy.exc import OperationalError

from ride_service.api.dependencies import get_ride_repository


class TestHealth:
    def test_returns_text(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Healthy"

    def test_response_has_request_id(self, client):
        response = client.get("/health")

        assert response.headers.get("X-Request-ID")


class TestListRides:
    def test_empty_store_returns_not_found(self, client):
        response = client.get("/rides")

        assert response.status_code == 404
        assert response.json()["error_code"] == "RESOURCE_NOT_FOUND"

    def test_returns_created_ride(self, client, create_rides):
        [created] = create_rides(1)

        response = client.get("/rides")

        assert response.status_code == 200
        body = response.json()
        assert body["data"][0]["rideId"] == created["rideId"]
        assert body["totalItems"] == 1

    @pytest.mark.parametrize(
        "params",
        [
            {"page": "abc", "size": "abc"},
            {"page": 0, "size": -1},
            {"page": 1, "size": 0},
            {"page": "1.5", "size": 10},
        ],
    )
    def test_invalid_page_and_size(self, client, params):
        response = client.get("/rides", params=params)

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["message"] == "page and size must be integer > 0"

    def test_validation_runs_before_store_access(self, client):
        # Хранилище пустое, но ответ - ошибка валидации, а не 404
        response = client.get("/rides", params={"page": "abc", "size": "abc"})

        assert response.status_code == 400

    def test_defaults_when_not_given(self, client, create_rides):
        create_rides(15)

        body = client.get("/rides").json()

        assert body["page"] == 1
        assert body["size"] == 10
        assert body["totalPages"] == 2
        assert len(body["data"]) <= body["size"]

    def test_single_parameter_is_not_validated(self, client, create_rides):
        create_rides(3)

        response = client.get("/rides", params={"page": "abc"})

        assert response.status_code == 200
        assert response.json()["page"] == 1

    def test_page_beyond_last_returns_last_page(self, client, create_rides):
        created = create_rides(15)

        body = client.get("/rides", params={"page": 99, "size": 10}).json()

        assert body["page"] == 2
        assert body["totalPages"] == 2
        assert [ride["rideId"] for ride in body["data"]] == [
            ride["rideId"] for ride in created[10:]
        ]

    def test_large_size_reports_row_count(self, client, create_rides):
        create_rides(15)

        body = client.get("/rides", params={"page": 1, "size": 200}).json()

        assert body["size"] == 15
        assert len(body["data"]) == 15
        assert body["totalPages"] == 1

    def test_keeps_insertion_order(self, client, create_rides):
        created = create_rides(5)

        body = client.get("/rides").json()

        assert [ride["rowId"] for ride in body["data"]] == [ride["rowId"] for ride in created]


class TestGetRideById:
    def test_round_trip(self, client, create_rides):
        [created] = create_rides(1)

        response = client.get(f"/rides/{created['rideId']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_unknown_id_returns_not_found(self, client, create_rides):
        create_rides(1)

        response = client.get("/rides/doesnotexist")

        assert response.status_code == 404
        assert response.json()["error_code"] == "RESOURCE_NOT_FOUND"

    def test_special_characters_are_stripped_from_id(self, client, create_rides):
        [created] = create_rides(1)

        response = client.get(f"/rides/{created['rideId']}'--")

        assert response.status_code == 200
        assert response.json()["rideId"] == created["rideId"]


class TestCreateRide:
    def test_creates_ride(self, client, ride_payload):
        response = client.post("/rides", json=ride_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["startLatitude"] == 70
        assert body["startLongitude"] == 100
        assert body["endLatitude"] == 75
        assert body["endLongitude"] == 110
        assert body["riderName"] == "Max"
        assert body["driverName"] == "John"
        assert body["driverVehicle"] == "Car"
        assert body["rideId"]
        assert body["rowId"] >= 1
        assert body["created"]

    def test_ride_ids_are_unique(self, client, create_rides):
        created = create_rides(10)

        assert len({ride["rideId"] for ride in created}) == 10
        assert len({ride["rowId"] for ride in created}) == 10

    def test_invalid_latitude(self, client, ride_payload):
        ride_payload["start_lat"] = 200

        response = client.post("/rides", json=ride_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert "latitude" in body["message"]

    def test_invalid_longitude(self, client, ride_payload):
        ride_payload["end_long"] = -181

        response = client.post("/rides", json=ride_payload)

        assert response.status_code == 400
        assert "longitude" in response.json()["message"]

    def test_fractional_coordinates_are_rejected(self, client, ride_payload):
        ride_payload["start_lat"] = 45.5

        response = client.post("/rides", json=ride_payload)

        assert response.status_code == 400

    def test_empty_vehicle(self, client, ride_payload):
        ride_payload["driver_vehicle"] = ""

        response = client.post("/rides", json=ride_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["message"] == (
            "riderName, driverName, driverVehicle must be String with length > 0"
        )

    def test_latitude_reported_before_other_errors(self, client, ride_payload):
        ride_payload.update(start_lat=500, start_long=500, rider_name="")

        response = client.post("/rides", json=ride_payload)

        assert "latitude" in response.json()["message"]

    def test_malformed_json(self, client):
        response = client.post(
            "/rides", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_sql_like_name_is_stored_sanitized(self, client, ride_payload):
        ride_payload["rider_name"] = "Robert'); DROP TABLE Rides;--"

        response = client.post("/rides", json=ride_payload)

        assert response.status_code == 201
        assert response.json()["riderName"] == "Robert DROP TABLE Rides"
        listing = client.get("/rides")
        assert listing.status_code == 200
        assert listing.json()["totalItems"] == 1

    def test_name_empty_after_sanitization_is_accepted(self, client, ride_payload):
        ride_payload["driver_name"] = "!!!"

        response = client.post("/rides", json=ride_payload)

        assert response.status_code == 201
        assert response.json()["driverName"] == ""


class FailingRideRepository:
    async def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT * FROM Rides", {}, Exception("database is locked"))

    get_all_rides = _fail
    get_ride_by_id = _fail
    get_ride_by_row_id = _fail
    create_ride = _fail


class TestServerErrors:
    @pytest.fixture
    def failing_client(self, app, client):
        app.dependency_overrides[get_ride_repository] = FailingRideRepository
        yield client
        app.dependency_overrides.clear()

    @pytest.mark.parametrize(
        "method, path",
        [("get", "/rides"), ("get", "/rides/abc123")],
    )
    def test_store_failure_on_read(self, failing_client, method, path):
        response = getattr(failing_client, method)(path)

        assert response.status_code == 500
        assert response.json() == {"error_code": "SERVER_ERROR", "message": "Unknown error"}

    def test_store_failure_on_create(self, failing_client, ride_payload):
        response = failing_client.post("/rides", json=ride_payload)

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "SERVER_ERROR"
        assert "locked" not in body["message"]
