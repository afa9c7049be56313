# bigcommerce_client/api/inventory.py
from typing import Dict, Optional
from bigcommerce_client.api.base_client import ApiResource
from bigcommerce_client.api.decoder import build_query
from bigcommerce_client.api.exceptions import NoContent
from bigcommerce_client.api.models import InventoryResource
from bigcommerce_client.api.parsers import InventoryParser
from bigcommerce_client.utils.logging import logger

class InventoryReader(ApiResource):
    """Read access to location inventory (v3 API)."""

    name = "inventory"

    def __init__(self, dispatcher):
        super().__init__(dispatcher)
        self.parser = InventoryParser()

    def get_inventory_for_location(self, location_id: int, filters: Optional[Dict[str, str]] = None) -> InventoryResource:
        """Fetch one page of inventory items for a location.

        Pagination is not followed: pass "page"/"limit" filters and read
        resource.meta.pagination to move between pages.

        Args:
            location_id (int): Location ID.
            filters (Optional[Dict[str, str]]): Query filters, used verbatim.

        Returns:
            InventoryResource: Items and pagination meta; empty on 204.

        Raises:
            requests.RequestException: If the request fails.
            json.JSONDecodeError: If the body is not valid JSON.
        """
        path = f"/v3/inventory/locations/{location_id}/items{build_query(filters)}"
        try:
            resource = self._fetch("GET", path, self.parser.parse)
        except NoContent:
            logger.warning(f"[inventory] No content for location #{location_id}")
            return InventoryResource()
        logger.debug(f"[inventory] Fetched {len(resource.inventories)} items for location #{location_id}")
        return resource
