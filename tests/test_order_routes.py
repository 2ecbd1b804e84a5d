from bson import ObjectId
from pymongo.errors import PyMongoError

from hubsy.services.order_service import OrderService


def test_create_order_returns_201_with_new_id(client, db):
    order = {"studentName": "Ada", "lessonIds": ["x"], "spaces": 1}

    response = client.post("/api/orders", json=order)

    assert response.status_code == 201
    body = response.json()
    assert body["acknowledged"] is True
    assert ObjectId.is_valid(body["insertedId"])

    stored = db["orders"].find_one({"_id": ObjectId(body["insertedId"])})
    stored.pop("_id")
    assert stored == order
    assert db["orders"].count_documents({}) == 1


def test_nested_order_stored_verbatim(client, db):
    order = {
        "name": "Grace",
        "phone": "07123456789",
        "items": [{"lessonId": "64b7f0c2a1b2c3d4e5f60718", "qty": 2}],
        "total": 200.5,
    }

    response = client.post("/api/orders", json=order)

    stored = db["orders"].find_one({"_id": ObjectId(response.json()["insertedId"])})
    assert stored["items"] == order["items"]
    assert stored["total"] == 200.5


def test_unknown_lesson_reference_accepted(client, db):
    response = client.post("/api/orders", json={"lessonIds": [str(ObjectId())], "spaces": 3})

    assert response.status_code == 201
    assert db["lessons"].count_documents({}) == 4


def test_each_order_gets_its_own_id(client):
    first = client.post("/api/orders", json={"studentName": "Ada"}).json()
    second = client.post("/api/orders", json={"studentName": "Ada"}).json()

    assert first["insertedId"] != second["insertedId"]


def test_non_object_body_rejected_before_handler(client, db):
    response = client.post("/api/orders", json=["not", "an", "object"])

    assert response.status_code == 422
    assert db["orders"].count_documents({}) == 0


def test_store_error_is_500_with_message(client, monkeypatch):
    def boom(self, order):
        raise PyMongoError("duplicate key error")

    monkeypatch.setattr(OrderService, "create", boom)

    response = client.post("/api/orders", json={"studentName": "Ada"})

    assert response.status_code == 500
    assert response.json() == {"message": "duplicate key error"}


def test_bodyless_order_inserts_empty_document(client, db):
    response = client.post("/api/orders")

    assert response.status_code == 201
    stored = db["orders"].find_one({"_id": ObjectId(response.json()["insertedId"])})
    assert list(stored) == ["_id"]


def test_client_supplied_id_echoed_unchanged(client, db):
    response = client.post("/api/orders", json={"_id": 5, "studentName": "Ada"})

    assert response.status_code == 201
    assert response.json()["insertedId"] == 5
    assert db["orders"].find_one({"_id": 5})["studentName"] == "Ada"
