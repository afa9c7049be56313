# tests/test_shipments.py
import json
import logging
import pytest
import requests
from prometheus_client import REGISTRY
from bigcommerce_client.api.models import Shipment, ShipmentAddress, ShipmentItem
from conftest import make_response, sent_request

SHIPMENT_PAYLOAD = {
    "id": 99,
    "order_id": 55,
    "customer_id": 3,
    "order_address_id": 8,
    "date_created": "Tue, 20 Nov 2012 00:00:00 +0000",
    "tracking_number": "1Z999",
    "merchant_shipping_cost": "0.0000",
    "shipping_method": "Free Shipping",
    "comments": None,
    "shipping_provider": "ups",
    "tracking_carrier": "ups",
    "billing_address": {"first_name": "Jane", "last_name": "Doe", "city": "Austin", "country_iso2": "US"},
    "shipping_address": {"first_name": "Jane", "last_name": "Doe", "zip": "78701", "email": "jane@example.com"},
    "items": [{"order_product_id": 10, "product_id": 77, "quantity": 2}]
}

SCENARIO_BODY = (
    b'{"tracking_number":"1Z999","merchant_shipping_cost":"","shipping_method":"","comments":"",'
    b'"shipping_provider":"","tracking_carrier":"","items":[{"order_product_id":10,"quantity":2}]}'
)

@pytest.fixture
def full_shipment():
    """Shipment with every read-only field populated."""
    return Shipment(
        id=99, order_id=55, customer_id=3, order_address_id=8, date_created="yesterday",
        tracking_number="1Z999", merchant_shipping_cost="12.00", shipping_method="Ground",
        comments="fragile", shipping_provider="ups", tracking_carrier="ups",
        billing_address=ShipmentAddress(first_name="Jane", city="Austin"),
        shipping_address=ShipmentAddress(first_name="Jane", zip="78701"),
        items=[ShipmentItem(order_product_id=10, product_id=77, quantity=2)]
    )

# Тесты для list_shipments
def test_list_shipments_success(client, session):
    session.send.return_value = make_response(200, [SHIPMENT_PAYLOAD, {"id": 100, "items": []}])
    shipments = client.shipments.list_shipments(55, {"limit": "10"})
    request = sent_request(session)
    assert request.method == "GET"
    assert request.url == "https://api.test/stores/abc123/v2/orders/55/shipments?limit=10"
    assert [s.id for s in shipments] == [99, 100]
    assert shipments[0].billing_address.city == "Austin"
    assert shipments[1].billing_address is None

def test_list_shipments_no_content(client, session):
    session.send.return_value = make_response(204)
    assert client.shipments.list_shipments(55) == []
    assert sent_request(session).url == "https://api.test/stores/abc123/v2/orders/55/shipments"

def test_list_shipments_expects_array(client, session):
    session.send.return_value = make_response(200, SHIPMENT_PAYLOAD)
    with pytest.raises(TypeError):
        client.shipments.list_shipments(55)

# Тесты для get_shipment
def test_get_shipment_success(client, session):
    session.send.return_value = make_response(200, SHIPMENT_PAYLOAD)
    shipment = client.shipments.get_shipment(55, 99)
    request = sent_request(session)
    assert request.method == "GET"
    assert request.url == "https://api.test/stores/abc123/v2/orders/55/shipments/99"
    assert request.body is None
    assert shipment.id == 99
    assert shipment.comments == ""
    assert shipment.shipping_address.email == "jane@example.com"
    assert shipment.items == [ShipmentItem(order_product_id=10, product_id=77, quantity=2)]

def test_get_shipment_no_content(client, session):
    session.send.return_value = make_response(204)
    assert client.shipments.get_shipment(55, 99) == Shipment()

def test_get_shipment_malformed_json(client, session):
    session.send.return_value = make_response(200, content=b'{"id": 99,')
    with pytest.raises(json.JSONDecodeError):
        client.shipments.get_shipment(55, 99)

def test_get_shipment_not_found(client, session):
    session.send.return_value = make_response(404, [{"status": 404, "message": "The requested resource was not found."}])
    with pytest.raises(requests.HTTPError):
        client.shipments.get_shipment(55, 99)

# Тесты для create_shipment
def test_create_shipment_scenario_body(client, session):
    session.send.return_value = make_response(201, SHIPMENT_PAYLOAD)
    shipment = Shipment(tracking_number="1Z999", items=[ShipmentItem(order_product_id=10, quantity=2)])
    client.shipments.create_shipment(55, shipment)
    request = sent_request(session)
    assert request.method == "POST"
    assert request.url == "https://api.test/stores/abc123/v2/orders/55/shipments"
    assert request.body == SCENARIO_BODY

def test_create_shipment_strips_read_only_fields(client, session, full_shipment):
    session.send.return_value = make_response(201, SHIPMENT_PAYLOAD)
    client.shipments.create_shipment(55, full_shipment)
    body = json.loads(sent_request(session).body)
    for name in ("id", "order_id", "customer_id", "date_created", "billing_address", "shipping_address"):
        assert name not in body
    assert body["merchant_shipping_cost"] == ""
    assert body["order_address_id"] == 8
    assert body["comments"] == "fragile"
    assert body["items"] == [{"order_product_id": 10, "product_id": 77, "quantity": 2}]
    # исходный объект не изменяется
    assert full_shipment.billing_address.city == "Austin"
    assert full_shipment.id == 99

def test_create_shipment_returns_server_state(client, session):
    session.send.return_value = make_response(201, SHIPMENT_PAYLOAD)
    shipment = Shipment(tracking_number="local", items=[ShipmentItem(order_product_id=10, quantity=2)])
    saved = client.shipments.create_shipment(55, shipment)
    assert saved.id == 99
    assert saved.tracking_number == "1Z999"
    assert saved.shipping_method == "Free Shipping"
    assert saved is not shipment

def test_create_shipment_no_content(client, session):
    session.send.return_value = make_response(204)
    assert client.shipments.create_shipment(55, Shipment(tracking_number="1Z999")) == Shipment()

# Тесты для update_shipment
def test_update_shipment_uses_shipment_id(client, session, full_shipment):
    session.send.return_value = make_response(200, SHIPMENT_PAYLOAD)
    client.shipments.update_shipment(55, full_shipment)
    request = sent_request(session)
    assert request.method == "PUT"
    assert request.url == "https://api.test/stores/abc123/v2/orders/55/shipments/99"
    body = json.loads(request.body)
    assert "id" not in body
    assert "billing_address" not in body
    assert body["tracking_number"] == "1Z999"

def test_update_shipment_no_content(client, session, full_shipment):
    session.send.return_value = make_response(204)
    assert client.shipments.update_shipment(55, full_shipment) == Shipment()

def test_update_shipment_http_error(client, session, full_shipment):
    session.send.return_value = make_response(400, [{"status": 400, "message": "Bad request"}])
    with pytest.raises(requests.HTTPError):
        client.shipments.update_shipment(55, full_shipment)

# Тесты для удаления
def test_delete_shipment_ignores_status(client, session):
    session.send.return_value = make_response(404, {"title": "Not Found"})
    assert client.shipments.delete_shipment(7, 99) is True
    request = sent_request(session)
    assert request.method == "DELETE"
    assert request.url == "https://api.test/stores/abc123/v2/orders/7/shipments/99"

def test_delete_all_shipments(client, session):
    session.send.return_value = make_response(204)
    assert client.shipments.delete_all_shipments(7) is True
    assert sent_request(session).url == "https://api.test/stores/abc123/v2/orders/7/shipments"

def test_delete_shipment_transport_error(client, session):
    session.send.side_effect = requests.Timeout("timed out")
    with pytest.raises(requests.Timeout):
        client.shipments.delete_shipment(7, 99)

def test_delete_shipment_strict(strict_client, session):
    session.send.return_value = make_response(404, {"title": "Not Found"})
    with pytest.raises(requests.HTTPError):
        strict_client.shipments.delete_shipment(7, 99)

def test_delete_all_shipments_strict_success(strict_client, session):
    session.send.return_value = make_response(204)
    assert strict_client.shipments.delete_all_shipments(7) is True

# Тесты для неожиданного формата ответа
def _errors_total() -> float:
    return REGISTRY.get_sample_value("bigcommerce_api_errors_total", {"resource": "shipments"}) or 0.0

def test_get_shipment_item_without_order_product_id(client, session, caplog):
    payload = dict(SHIPMENT_PAYLOAD, items=[{"product_id": 77, "quantity": 2}])
    session.send.return_value = make_response(200, payload)
    before = _errors_total()
    with caplog.at_level(logging.ERROR, logger="bigcommerce_client"):
        with pytest.raises(ValueError, match="order_product_id"):
            client.shipments.get_shipment(55, 99)
    assert _errors_total() == before + 1
    assert "unexpected payload" in caplog.text

def test_list_shipments_wrong_shape_is_counted(client, session, caplog):
    session.send.return_value = make_response(200, SHIPMENT_PAYLOAD)
    before = _errors_total()
    with caplog.at_level(logging.ERROR, logger="bigcommerce_client"):
        with pytest.raises(TypeError):
            client.shipments.list_shipments(55)
    assert _errors_total() == before + 1
    assert "GET /v2/orders/55/shipments" in caplog.text
