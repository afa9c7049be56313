from typing import List, Optional
from dataclasses import dataclass, field

@dataclass
class Identity:
    """Идентификатор товара в остатках."""
    sku: str = ""
    variant_id: int = 0
    product_id: int = 0

@dataclass
class InventorySettings:
    """Настройки остатков, заданные в магазине."""
    safety_stock: int = 0
    is_in_stock: bool = False
    warning_level: int = 0
    bin_picking_number: str = ""

@dataclass
class Inventory:
    """Остаток одного товара на складе."""
    identity: Identity = field(default_factory=Identity)
    available_to_sell: int = 0
    total_inventory_onhand: int = 0
    settings: InventorySettings = field(default_factory=InventorySettings)

@dataclass
class Links:
    previous: str = ""
    current: str = ""
    next: str = ""

@dataclass
class Pagination:
    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    links: Links = field(default_factory=Links)

@dataclass
class Meta:
    pagination: Pagination = field(default_factory=Pagination)

@dataclass
class InventoryResource:
    """Страница остатков для склада вместе с данными пагинации."""
    inventories: List[Inventory] = field(default_factory=list)
    meta: Meta = field(default_factory=Meta)

@dataclass
class ShipmentAddress:
    """Модель адреса (billing или shipping)."""
    first_name: str = ""
    last_name: str = ""
    company: str = ""
    street_1: str = ""
    street_2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""
    country_iso2: str = ""
    phone: str = ""
    email: str = ""

@dataclass
class ShipmentItem:
    """Модель товара в отгрузке."""
    order_product_id: int
    product_id: int = 0
    quantity: int = 0

# Поля, которые API принимает при создании и обновлении отгрузки
WRITABLE_SHIPMENT_FIELDS = (
    "order_address_id",
    "tracking_number",
    "shipping_method",
    "comments",
    "shipping_provider",
    "tracking_carrier",
    "items",
)

@dataclass
class Shipment:
    """Модель отгрузки заказа.

    id, order_id, customer_id, date_created and both addresses are assigned
    by the store and are only ever read, never sent.
    """
    id: int = 0
    order_id: int = 0
    customer_id: int = 0
    order_address_id: int = 0
    date_created: str = ""
    tracking_number: str = ""
    merchant_shipping_cost: str = ""
    shipping_method: str = ""
    comments: str = ""
    shipping_provider: str = ""
    tracking_carrier: str = ""
    billing_address: Optional[ShipmentAddress] = None
    shipping_address: Optional[ShipmentAddress] = None
    items: List[ShipmentItem] = field(default_factory=list)

    def writable(self) -> "Shipment":
        """Return a fresh shipment holding only the fields the API accepts on write."""
        values = {name: getattr(self, name) for name in WRITABLE_SHIPMENT_FIELDS}
        values["items"] = list(self.items)
        return Shipment(**values)
