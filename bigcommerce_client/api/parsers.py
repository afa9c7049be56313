# bigcommerce_client/api/parsers.py
import json
from dataclasses import fields
from typing import Any, Dict, List
from bigcommerce_client.api.models import (
    Identity, InventorySettings, Inventory, Links, Pagination, Meta, InventoryResource,
    ShipmentAddress, ShipmentItem, Shipment
)

# Поля отгрузки, которые не отправляются, если пустые
OMIT_EMPTY_SHIPMENT_FIELDS = ("id", "order_id", "customer_id", "order_address_id", "date_created")

def _expect_object(data: Any, what: str) -> Dict:
    if not isinstance(data, dict):
        raise TypeError(f"Expected JSON object for {what}, got {type(data).__name__}")
    return data

def _flat(cls, data: Dict):
    """Build a flat dataclass from the keys it knows, skipping nulls."""
    data = _expect_object(data, cls.__name__)
    return cls(**{f.name: data[f.name] for f in fields(cls) if data.get(f.name) is not None})

class Parser:
    """Base class for parsing API payloads."""
    def parse(self, data: Any):
        raise NotImplementedError("Subclasses must implement parse method")

class InventoryParser(Parser):
    """Parser for /v3/inventory/locations/{id}/items responses."""
    def parse(self, data: Any) -> InventoryResource:
        data = _expect_object(data, "inventory resource")
        inventories = []
        for item in data.get("data") or []:
            item = _expect_object(item, "inventory")
            inventories.append(Inventory(
                identity=_flat(Identity, item.get("identity") or {}),
                available_to_sell=item.get("available_to_sell") or 0,
                total_inventory_onhand=item.get("total_inventory_onhand") or 0,
                settings=_flat(InventorySettings, item.get("settings") or {})
            ))
        pagination_data = _expect_object(data.get("meta") or {}, "meta").get("pagination") or {}
        pagination = _flat(Pagination, {k: v for k, v in pagination_data.items() if k != "links"})
        pagination.links = _flat(Links, pagination_data.get("links") or {})
        return InventoryResource(inventories=inventories, meta=Meta(pagination=pagination))

class ShipmentParser(Parser):
    """Parser for /v2/orders/{id}/shipments responses."""
    def parse(self, data: Any) -> Shipment:
        data = _expect_object(data, "shipment")
        shipment = _flat(Shipment, {k: v for k, v in data.items()
                                    if k not in ("billing_address", "shipping_address", "items")})
        if data.get("billing_address") is not None:
            shipment.billing_address = _flat(ShipmentAddress, data["billing_address"])
        if data.get("shipping_address") is not None:
            shipment.shipping_address = _flat(ShipmentAddress, data["shipping_address"])
        shipment.items = [self.parse_item(item) for item in data.get("items") or []]
        return shipment

    def parse_item(self, data: Any) -> ShipmentItem:
        data = _expect_object(data, "shipment item")
        if data.get("order_product_id") is None:
            raise ValueError("Shipment item is missing required field order_product_id")
        return _flat(ShipmentItem, data)

    def parse_many(self, data: Any) -> List[Shipment]:
        if not isinstance(data, list):
            raise TypeError(f"Expected JSON array of shipments, got {type(data).__name__}")
        return [self.parse(item) for item in data]

def serialize_item(item: ShipmentItem) -> Dict:
    payload = {"order_product_id": item.order_product_id}
    if item.product_id:
        payload["product_id"] = item.product_id
    payload["quantity"] = item.quantity
    return payload

def serialize_address(address: ShipmentAddress) -> Dict:
    return {f.name: getattr(address, f.name) for f in fields(ShipmentAddress)}

def serialize_shipment(shipment: Shipment) -> Dict:
    """Convert a shipment to its JSON payload.

    Store-assigned ids and date_created are dropped when empty, addresses when
    unset. The text fields and items are always present.
    """
    payload = {}
    for f in fields(Shipment):
        value = getattr(shipment, f.name)
        if f.name in OMIT_EMPTY_SHIPMENT_FIELDS and not value:
            continue
        if f.name in ("billing_address", "shipping_address"):
            if value is not None:
                payload[f.name] = serialize_address(value)
            continue
        if f.name == "items":
            value = [serialize_item(item) for item in value]
        payload[f.name] = value
    return payload

def encode_payload(payload: Dict) -> bytes:
    """Encode a payload as compact JSON bytes."""
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")
