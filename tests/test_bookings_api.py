"""
End-to-end tests for /api/Bookings through the FastAPI app.
"""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from dancesite.models import Booking, BookingStatus

# Valid ISO 8601, but past datetime.max once converted to UTC
OUT_OF_RANGE_DATE = "9999-12-31T23:00:00-05:00"


def _future(days: int = 2) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


def _past(days: int = 1) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()


def _booking_body(**overrides) -> dict:
    body = {
        "clientId": 1,
        "serviceOfferingId": 1,
        "preferredDateTime": _future(),
        "locationType": "OnSite",
        "locationDetails": "Studio 3, Stockholm",
        "message": "Test booking",
    }
    body.update(overrides)
    return body


def _assert_envelope(response, status_code: int):
    data = response.json()
    assert data["statusCode"] == status_code
    assert data["message"]
    assert data["traceId"]
    assert response.headers["X-Trace-Id"] == data["traceId"]
    return data


class TestCreateBooking:
    def test_create_then_get(self, client: TestClient, seeded_client, seeded_offering):
        response = client.post("/api/Bookings", json=_booking_body())

        assert response.status_code == 201
        created = response.json()
        assert created["id"] > 0
        assert created["status"] == "Pending"
        assert created["clientId"] == 1
        assert created["serviceOfferingId"] == 1
        assert response.headers["Location"].endswith(f"/api/Bookings/{created['id']}")

        fetched = client.get(f"/api/Bookings/{created['id']}")
        assert fetched.status_code == 200
        data = fetched.json()
        assert data["id"] == created["id"]
        assert data["clientId"] == 1
        assert data["serviceOfferingId"] == 1
        assert data["locationDetails"] == "Studio 3, Stockholm"

    def test_status_in_body_is_ignored(self, client: TestClient, seeded_client, seeded_offering):
        response = client.post("/api/Bookings", json=_booking_body(status="Completed"))

        assert response.status_code == 201
        assert response.json()["status"] == "Pending"

    def test_numeric_location_type(self, client: TestClient, seeded_client, seeded_offering):
        response = client.post("/api/Bookings", json=_booking_body(locationType=3))

        assert response.status_code == 201
        assert response.json()["locationType"] == "Online"

    def test_past_date(self, client: TestClient, seeded_client, seeded_offering):
        response = client.post("/api/Bookings", json=_booking_body(preferredDateTime=_past()))

        assert response.status_code == 400
        data = _assert_envelope(response, 400)
        assert "PreferredDateTime must be in the future" in data["message"]

    def test_unknown_client(self, client: TestClient, seeded_offering):
        response = client.post("/api/Bookings", json=_booking_body(clientId=999))

        assert response.status_code == 400
        assert _assert_envelope(response, 400)["message"] == "Client with ID 999 does not exist."

    def test_unknown_service_offering(self, client: TestClient, seeded_client):
        response = client.post("/api/Bookings", json=_booking_body(serviceOfferingId=999))

        assert response.status_code == 400
        assert _assert_envelope(response, 400)["message"] == (
            "Service offering with ID 999 does not exist."
        )

    def test_message_too_long(self, client: TestClient, seeded_client, seeded_offering):
        response = client.post("/api/Bookings", json=_booking_body(message="x" * 501))

        assert response.status_code == 400
        assert _assert_envelope(response, 400)["message"] == "Message cannot exceed 500 characters."

    def test_malformed_body(self, client: TestClient):
        response = client.post("/api/Bookings", json={"clientId": "abc"})

        assert response.status_code == 400
        data = _assert_envelope(response, 400)
        fields = {problem["field"] for problem in data["errors"]}
        assert "clientId" in fields
        assert "preferredDateTime" in fields

    def test_unknown_location_type(self, client: TestClient, seeded_client, seeded_offering):
        response = client.post("/api/Bookings", json=_booking_body(locationType="Moon"))

        assert response.status_code == 400
        assert "locationType" in response.json()["message"]

    def test_out_of_range_date(self, client: TestClient, seeded_client, seeded_offering):
        response = client.post(
            "/api/Bookings", json=_booking_body(preferredDateTime=OUT_OF_RANGE_DATE)
        )

        assert response.status_code == 400
        data = _assert_envelope(response, 400)
        assert "out of range" in data["message"]


class TestReadBookings:
    def test_list(self, client: TestClient, make_booking):
        first = make_booking()
        second = make_booking()

        response = client.get("/api/Bookings")

        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == [first.id, second.id]

    def test_unknown_id(self, client: TestClient):
        response = client.get("/api/Bookings/12345")

        assert response.status_code == 404
        assert _assert_envelope(response, 404)["message"] == "Booking with ID 12345 was not found."

    def test_get_is_idempotent(self, client: TestClient, make_booking):
        booking = make_booking(message="Same every time")

        first = client.get(f"/api/Bookings/{booking.id}").json()
        second = client.get(f"/api/Bookings/{booking.id}").json()

        assert first == second

    def test_times_are_serialized_as_utc(self, client: TestClient, make_booking):
        booking = make_booking()

        data = client.get(f"/api/Bookings/{booking.id}").json()

        parsed = datetime.fromisoformat(data["preferredDateTime"].replace("Z", "+00:00"))
        assert parsed.utcoffset() == timedelta(0)
        assert parsed.replace(tzinfo=None) == booking.preferred_date_time


class TestUpdateBooking:
    def test_confirm(self, client: TestClient, make_booking):
        booking = make_booking()

        response = client.put(f"/api/Bookings/{booking.id}", json={"status": "Confirmed"})

        assert response.status_code == 200
        assert response.json()["status"] == "Confirmed"

    def test_numeric_status(self, client: TestClient, make_booking):
        booking = make_booking()

        response = client.put(f"/api/Bookings/{booking.id}", json={"status": 1})

        assert response.status_code == 200
        assert response.json()["status"] == "Confirmed"

    def test_cancelled_is_locked(self, client: TestClient, make_booking):
        booking = make_booking(status=BookingStatus.CANCELLED)

        response = client.put(f"/api/Bookings/{booking.id}", json={"status": "Confirmed"})

        assert response.status_code == 409
        assert _assert_envelope(response, 409)["message"] == (
            "Cannot change status once the booking is 'Cancelled'."
        )

    def test_pending_to_completed(self, client: TestClient, make_booking):
        booking = make_booking()

        response = client.put(f"/api/Bookings/{booking.id}", json={"status": "Completed"})

        assert response.status_code == 409
        assert "'Pending' to 'Completed'" in response.json()["message"]

    def test_past_date(self, client: TestClient, make_booking):
        booking = make_booking()

        response = client.put(f"/api/Bookings/{booking.id}", json={"preferredDateTime": _past()})

        assert response.status_code == 400

    def test_invalid_status_name(self, client: TestClient, make_booking):
        booking = make_booking()

        response = client.put(f"/api/Bookings/{booking.id}", json={"status": "Archived"})

        assert response.status_code == 400

    def test_out_of_range_date(self, client: TestClient, make_booking):
        booking = make_booking()

        response = client.put(
            f"/api/Bookings/{booking.id}", json={"preferredDateTime": OUT_OF_RANGE_DATE}
        )

        assert response.status_code == 400

    def test_unknown_id(self, client: TestClient):
        response = client.put("/api/Bookings/999", json={"status": "Confirmed"})

        assert response.status_code == 404

    def test_partial_update_keeps_other_fields(self, client: TestClient, db: Session, make_booking):
        booking = make_booking(location_details="Studio A", message="Beginners")

        response = client.put(f"/api/Bookings/{booking.id}", json={"message": "Intermediate"})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Intermediate"
        assert data["locationDetails"] == "Studio A"
        assert data["status"] == "Pending"

        db.expire_all()
        assert db.get(Booking, booking.id).message == "Intermediate"


class TestDeleteBooking:
    def test_delete_then_get(self, client: TestClient, make_booking):
        booking = make_booking()

        response = client.delete(f"/api/Bookings/{booking.id}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/Bookings/{booking.id}").status_code == 404

    def test_delete_unknown(self, client: TestClient):
        response = client.delete("/api/Bookings/999")

        assert response.status_code == 404
        _assert_envelope(response, 404)


class TestSearchBookings:
    def test_status_filter_sorted_descending(self, client: TestClient, make_booking):
        make_booking(status=BookingStatus.PENDING, days_ahead=1)
        early = make_booking(status=BookingStatus.CONFIRMED, days_ahead=2)
        late = make_booking(status=BookingStatus.CONFIRMED, days_ahead=7)

        response = client.get(
            "/api/Bookings/search",
            params={"status": "Confirmed", "sortBy": "date", "descending": "true"},
        )

        assert response.status_code == 200
        results = response.json()
        assert [b["id"] for b in results] == [late.id, early.id]
        assert all(b["status"] == "Confirmed" for b in results)

    def test_client_filter(self, client: TestClient, make_booking, seeded_client):
        booking = make_booking()

        response = client.get("/api/Bookings/search", params={"clientId": seeded_client.id})

        assert [b["id"] for b in response.json()] == [booking.id]

    def test_date_range(self, client: TestClient, make_booking):
        make_booking(days_ahead=1)
        inside = make_booking(days_ahead=5)
        make_booking(days_ahead=20)

        response = client.get(
            "/api/Bookings/search",
            params={"fromDate": _future(3), "toDate": _future(10)},
        )

        assert [b["id"] for b in response.json()] == [inside.id]

    def test_invalid_status(self, client: TestClient):
        response = client.get("/api/Bookings/search", params={"status": "Archived"})

        assert response.status_code == 400
        _assert_envelope(response, 400)

    def test_out_of_range_bound(self, client: TestClient):
        response = client.get("/api/Bookings/search", params={"fromDate": OUT_OF_RANGE_DATE})

        assert response.status_code == 400
        data = _assert_envelope(response, 400)
        assert any(p["field"] == "fromDate" for p in data["errors"])

    def test_no_match_is_empty_list(self, client: TestClient, make_booking):
        make_booking(status=BookingStatus.PENDING)

        response = client.get("/api/Bookings/search", params={"status": "Completed"})

        assert response.status_code == 200
        assert response.json() == []


class TestTraceId:
    def test_success_carries_trace_header(self, client: TestClient):
        response = client.get("/api/Bookings")

        assert response.headers.get("X-Trace-Id")

    def test_incoming_request_id_is_reused(self, client: TestClient):
        response = client.get("/api/Bookings/404", headers={"X-Request-ID": "req-abc-123"})

        assert response.status_code == 404
        assert response.json()["traceId"] == "req-abc-123"
        assert response.headers["X-Trace-Id"] == "req-abc-123"
