# bigcommerce_client/api/shipments.py
from typing import Dict, List, Optional
import requests
from bigcommerce_client.api.base_client import ApiResource, RequestDispatcher
from bigcommerce_client.api.decoder import build_query
from bigcommerce_client.api.exceptions import NoContent
from bigcommerce_client.api.models import Shipment
from bigcommerce_client.api.parsers import ShipmentParser, serialize_shipment, encode_payload
from bigcommerce_client.utils.logging import logger
from bigcommerce_client.utils.metrics import API_ERRORS_TOTAL

class ShipmentManager(ApiResource):
    """Shipments of an order (v2 API).

    Creating or updating a shipment that does not cover every line item makes
    the store mark the order as partially shipped.
    """

    name = "shipments"

    def __init__(self, dispatcher: RequestDispatcher, strict_deletes: bool = False):
        """Initialize the shipment manager.

        Args:
            dispatcher (RequestDispatcher): Transport for API requests.
            strict_deletes (bool): Raise on non-2xx DELETE responses instead of ignoring the status.
        """
        super().__init__(dispatcher)
        self.strict_deletes = strict_deletes
        self.parser = ShipmentParser()

    def _path(self, order_id: int, shipment_id: Optional[int] = None) -> str:
        path = f"/v2/orders/{order_id}/shipments"
        if shipment_id is not None:
            path += f"/{shipment_id}"
        return path

    def list_shipments(self, order_id: int, filters: Optional[Dict[str, str]] = None) -> List[Shipment]:
        """Fetch all shipments of an order.

        Returns:
            List[Shipment]: Shipments, or an empty list on 204.
        """
        try:
            return self._fetch("GET", self._path(order_id) + build_query(filters), self.parser.parse_many)
        except NoContent:
            logger.warning(f"[shipments] No shipments for order #{order_id}")
            return []

    def get_shipment(self, order_id: int, shipment_id: int) -> Shipment:
        """Fetch a single shipment.

        A 204 gives an empty Shipment(), which callers cannot tell apart from
        a missing shipment.
        """
        try:
            return self._fetch("GET", self._path(order_id, shipment_id), self.parser.parse)
        except NoContent:
            logger.warning(f"[shipments] No content for shipment #{shipment_id} of order #{order_id}")
            return Shipment()

    def create_shipment(self, order_id: int, shipment: Shipment) -> Shipment:
        """Create a shipment for an order.

        Only writable fields are sent, see Shipment.writable().

        Returns:
            Shipment: The shipment as stored by the API, or Shipment() on 204.
        """
        return self._write("POST", self._path(order_id), order_id, shipment)

    def update_shipment(self, order_id: int, shipment: Shipment) -> Shipment:
        """Update the shipment identified by shipment.id.

        Returns:
            Shipment: The shipment as stored by the API, or Shipment() on 204.
        """
        return self._write("PUT", self._path(order_id, shipment.id), order_id, shipment)

    def _write(self, method: str, path: str, order_id: int, shipment: Shipment) -> Shipment:
        body = encode_payload(serialize_shipment(shipment.writable()))
        try:
            saved = self._fetch(method, path, self.parser.parse, body)
        except NoContent:
            logger.warning(f"[shipments] {method} {path} returned no content")
            return Shipment()
        logger.info(f"[shipments] Saved shipment #{saved.id} for order #{order_id}")
        return saved

    def delete_shipment(self, order_id: int, shipment_id: int) -> bool:
        """Delete a single shipment of an order."""
        return self._delete(self._path(order_id, shipment_id))

    def delete_all_shipments(self, order_id: int) -> bool:
        """Delete ALL shipments of an order."""
        return self._delete(self._path(order_id))

    def _delete(self, path: str) -> bool:
        """Send a DELETE and discard the body.

        Without strict_deletes any HTTP status counts as success once the
        request went through.

        Raises:
            requests.RequestException: On transport errors, and on non-2xx statuses with strict_deletes.
        """
        request = self.dispatcher.build_request("DELETE", path)
        try:
            with self.dispatcher.execute(request) as response:
                if not response.ok:
                    if self.strict_deletes:
                        response.raise_for_status()
                    logger.warning(f"[shipments] DELETE {path} answered HTTP {response.status_code}, ignored")
        except requests.exceptions.RequestException as e:
            logger.error(f"[shipments] DELETE {path} failed: {str(e)}")
            API_ERRORS_TOTAL.labels(resource=self.name).inc()
            raise
        logger.info(f"[shipments] Deleted {path}")
        return True
