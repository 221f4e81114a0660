import pytest


@pytest.fixture
def order_payload():
    return {
        "customer_name": "Ayesha Khan",
        "email": "ayesha@gmail.com",
        "phone": "03001234567",
        "address": "12 Mall Road",
        "city": "Lahore",
        "items": [{"product_id": "p1", "product_name": "Silk Serum", "quantity": 2, "price": 2500}],
    }


def test_place_and_track_order(client, order_payload):
    response = client.post("/api/orders", json=order_payload)

    assert response.status_code == 201
    order = response.json()["data"]
    assert order["total_amount"] == 5000 + 500 + 850

    tracked = client.get("/api/orders/track", params={"orderId": order["order_number"], "email": "ayesha@gmail.com"})
    assert tracked.status_code == 200
    assert tracked.json()["data"]["id"] == order["id"]

    by_email = client.get("/api/orders/track", params={"email": "ayesha@gmail.com"})
    assert by_email.json()["data"]["order_number"] == order["order_number"]


def test_track_requires_id_or_email(client):
    response = client.get("/api/orders/track")

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_track_unknown_order(client):
    assert client.get("/api/orders/track", params={"orderId": "ORD-0-1"}).status_code == 404


def test_invalid_order(client, order_payload):
    response = client.post("/api/orders", json={**order_payload, "items": []})

    assert response.status_code == 400


def test_admin_order_lifecycle(client, order_payload):
    order = client.post("/api/orders", json=order_payload).json()["data"]

    listed = client.get("/api/orders").json()
    assert listed["count"] == 1

    updated = client.put(f"/api/orders/{order['id']}", json={"status": "delivered"})
    assert updated.json()["data"]["status"] == "delivered"
    assert client.get("/api/orders", params={"status": "delivered"}).json()["count"] == 1

    assert client.get(f"/api/orders/{order['id']}").status_code == 200
    assert client.delete(f"/api/orders/{order['id']}").status_code == 200
    assert client.get(f"/api/orders/{order['id']}").status_code == 404
