from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from app.config import settings
from app.dependencies.orders import get_order_service
from app.exceptions import InvalidParameter, TransactionAborted
from app.main import app
from app.routes import orders
from app.schemas.order_schemas import OrderForm


@pytest.fixture
def client(engine, order_service):
    app.dependency_overrides[get_order_service] = lambda: order_service

    yield TestClient(app)

    app.dependency_overrides.clear()


def order_payload(customer_form, cart):
    return {
        "customer_form": customer_form.model_dump(),
        "cart": cart.model_dump(),
    }


def test_place_order_returns_details(client, catalog, customer_form, make_cart):
    first, second, _ = catalog
    cart = make_cart((first, 1), (second, 2))

    response = client.post("/orders", json=order_payload(customer_form, cart))

    assert response.status_code == 201
    body = response.json()
    assert body["order"]["amount"] == 1299 + 850 * 2 + settings.cart_surcharge
    assert [li["book_id"] for li in body["line_items"]] == [first.id, second.id]
    assert [book["title"] for book in body["books"]] == ["The Long Winter", "Harbour Lights"]
    assert body["customer"]["customer_name"] == "Ada Lovelace"
    assert "cc_number" not in body["customer"]


def test_get_order(client, catalog, customer_form, make_cart):
    created = client.post(
        "/orders", json=order_payload(customer_form, make_cart((catalog[2], 1)))
    ).json()

    response = client.get(f"/orders/{created['order']['id']}")

    assert response.status_code == 200
    assert response.json()["order"] == created["order"]


def test_invalid_form_is_bad_request(client, catalog, customer_form, make_cart):
    form = customer_form.model_copy(update={"email": "a@b."})

    response = client.post("/orders", json=order_payload(form, make_cart((catalog[0], 1))))

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid email field"}


def test_tampered_price_is_bad_request(client, catalog, customer_form, make_cart):
    payload = order_payload(customer_form, make_cart((catalog[0], 1)))
    payload["cart"]["items"][0]["book_form"]["price"] = 99

    response = client.post("/orders", json=payload)

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid price"}


def test_missing_order_is_not_found(client):
    response = client.get("/orders/12345")

    assert response.status_code == 404


def test_aborted_transaction_is_server_error(customer_form, make_cart, catalog):
    service = MagicMock()
    service.place_order.side_effect = TransactionAborted("Order was not placed")
    app.dependency_overrides[get_order_service] = lambda: service
    try:
        response = TestClient(app).post(
            "/orders", json=order_payload(customer_form, make_cart((catalog[0], 1)))
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Order could not be placed"}


def test_http_errors_keep_the_service_error_as_cause(customer_form, make_cart, catalog):
    error = InvalidParameter("Invalid price")
    service = MagicMock()
    service.place_order.side_effect = error
    form = OrderForm(customer_form=customer_form, cart=make_cart((catalog[0], 1)))

    with pytest.raises(HTTPException) as excinfo:
        orders.place_order(form, order_service=service)

    assert excinfo.value.status_code == 400
    assert excinfo.value.__cause__ is error
