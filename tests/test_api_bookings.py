import pytest

from conftest import booking_payload


def test_calculate_price_is_public(client, cruise):
    response = client.post("/api/calculate-price", json=booking_payload(cruise.id))

    assert response.status_code == 200
    body = response.json()
    assert body["totalPrice"] == pytest.approx(5250)
    assert body["breakdown"] == {
        "basePrice": pytest.approx(2750),
        "cabinUpgrade": pytest.approx(1650),
        "taxesFees": pytest.approx(600),
        "gratuities": pytest.approx(250),
    }


def test_calculate_price_does_not_create_a_booking(client, store, cruise):
    client.post("/api/calculate-price", json=booking_payload(cruise.id))
    assert store.bookings.list() == []


def test_calculate_price_unknown_cruise(client):
    response = client.post("/api/calculate-price", json=booking_payload(77))

    assert response.status_code == 404
    assert response.json() == {"message": "Cruise not found"}


@pytest.mark.parametrize("overrides,field", [
    ({"adults": 0}, "adults"),
    ({"children": 5}, "children"),
    ({"cabinType": "deck"}, "cabinType"),
    ({"cruiseId": "abc"}, "cruiseId"),
])
def test_calculate_price_validation(client, cruise, overrides, field):
    response = client.post("/api/calculate-price", json=booking_payload(cruise.id, **overrides))

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid booking data"
    assert [e["field"] for e in response.json()["errors"]] == [field]


def test_create_booking(client, cruise, customer, customer_headers):
    response = client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers)

    assert response.status_code == 201
    booking = response.json()
    assert booking["status"] == "pending"
    assert booking["userId"] == customer.id
    assert booking["cruiseId"] == cruise.id
    assert booking["cabinType"] == "balcony"
    assert booking["totalPrice"] == pytest.approx(5250)
    assert booking["departureDate"].startswith("2025-06-15")
    assert booking["createdAt"] == booking["updatedAt"]


def test_create_booking_ignores_client_status(client, cruise, customer_headers):
    payload = booking_payload(cruise.id, status="confirmed", totalPrice=1)
    booking = client.post("/api/bookings", json=payload, headers=customer_headers).json()

    assert booking["status"] == "pending"
    assert booking["totalPrice"] == pytest.approx(5250)


def test_create_booking_requires_login(client, cruise, store):
    response = client.post("/api/bookings", json=booking_payload(cruise.id))

    assert response.status_code == 401
    assert store.bookings.list() == []


def test_create_booking_with_bad_token(client, cruise):
    response = client.post(
        "/api/bookings",
        json=booking_payload(cruise.id),
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401


def test_create_booking_unknown_cruise(client, customer_headers, store):
    response = client.post("/api/bookings", json=booking_payload(5), headers=customer_headers)

    assert response.status_code == 404
    assert store.bookings.list() == []


def test_list_own_bookings(client, cruise, customer_headers, admin_headers):
    client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers)
    client.post("/api/bookings", json=booking_payload(cruise.id, cabinType="suite"), headers=admin_headers)

    mine = client.get("/api/bookings", headers=customer_headers)

    assert mine.status_code == 200
    assert [b["cabinType"] for b in mine.json()] == ["balcony"]
    assert client.get("/api/bookings").status_code == 401


def test_admin_lists_all_bookings(client, cruise, customer_headers, admin_headers):
    client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers)
    client.post("/api/bookings", json=booking_payload(cruise.id, cabinType="suite"), headers=admin_headers)

    response = client.get("/api/admin/bookings", headers=admin_headers)

    assert response.status_code == 200
    assert [b["cabinType"] for b in response.json()] == ["balcony", "suite"]
    assert client.get("/api/admin/bookings", headers=customer_headers).status_code == 403
    assert client.get("/api/admin/bookings").status_code == 401


def test_admin_updates_status(client, cruise, customer_headers, admin_headers):
    booking = client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers).json()

    response = client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "confirmed"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    assert client.get("/api/bookings", headers=customer_headers).json()[0]["status"] == "confirmed"


def test_update_status_rejects_unknown_value(client, cruise, customer_headers, admin_headers):
    booking = client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers).json()

    response = client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "archived"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid status value"}


def test_update_status_unknown_booking(client, admin_headers):
    response = client.patch("/api/bookings/31/status", json={"status": "cancelled"}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Booking not found"}


def test_update_status_requires_admin(client, cruise, customer_headers):
    booking = client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers).json()

    response = client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "confirmed"}, headers=customer_headers)

    assert response.status_code == 403


@pytest.mark.parametrize("body", [{}, {"status": None}, {"status": 3}, {"status": ["confirmed"]}])
def test_update_status_rejects_non_status_values(client, cruise, customer_headers, admin_headers, body):
    booking = client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers).json()

    response = client.patch(f"/api/bookings/{booking['id']}/status", json=body, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid status value"}


def test_bookings_survive_cruise_deletion(client, cruise, customer_headers, admin_headers):
    client.post("/api/bookings", json=booking_payload(cruise.id), headers=customer_headers)
    client.delete(f"/api/cruises/{cruise.id}", headers=admin_headers)

    response = client.get("/api/admin/bookings", headers=admin_headers)

    assert [b["cruiseId"] for b in response.json()] == [cruise.id]


def test_booking_validation_message_matches_service(client, cruise, customer_headers):
    response = client.post("/api/bookings", json=booking_payload(cruise.id, adults=9), headers=customer_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid booking data"
    assert [e["field"] for e in response.json()["errors"]] == ["adults"]

