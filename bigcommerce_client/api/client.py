import requests
from typing import Optional
from bigcommerce_client.api.base_client import RequestDispatcher
from bigcommerce_client.api.inventory import InventoryReader
from bigcommerce_client.api.shipments import ShipmentManager
from bigcommerce_client.config.settings import DEFAULT_API_URL, Settings, settings as default_settings
from bigcommerce_client.utils.logging import logger
from bigcommerce_client.utils.metrics import API_REQUESTS_TOTAL

class SessionDispatcher(RequestDispatcher):
    """Dispatcher sending requests through a requests.Session with store API token headers."""

    def __init__(self, store_hash: str, access_token: str, client_id: Optional[str] = None,
                 base_url: str = DEFAULT_API_URL, timeout: float = 30.0,
                 session: Optional[requests.Session] = None):
        """Initialize the dispatcher.

        Args:
            store_hash (str): Store hash from the API account.
            access_token (str): API account access token.
            client_id (Optional[str]): API account client ID, sent when given.
            base_url (str): API host, without the /stores/{hash} part.
            timeout (float): Timeout in seconds for every request.
            session (Optional[requests.Session]): Session to reuse; a new one is created otherwise.
        """
        self.store_hash = store_hash
        self.base_url = f"{base_url.rstrip('/')}/stores/{store_hash}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "X-Auth-Token": access_token,
            "Accept": "application/json",
            "Content-Type": "application/json"
        }
        if client_id:
            self.headers["X-Auth-Client"] = client_id

    def build_request(self, method: str, path: str, body: Optional[bytes] = None) -> requests.PreparedRequest:
        request = requests.Request(method, f"{self.base_url}{path}", headers=self.headers, data=body)
        return self.session.prepare_request(request)

    def execute(self, request: requests.PreparedRequest) -> requests.Response:
        logger.debug(f"Sending {request.method} {request.url}")
        API_REQUESTS_TOTAL.labels(method=request.method).inc()
        return self.session.send(request, timeout=self.timeout)

    def close(self) -> None:
        self.session.close()

class BigCommerceClient:
    """Client for the BigCommerce store API.

    Example:
        with BigCommerceClient.from_settings() as client:
            resource = client.inventory.get_inventory_for_location(1, {"sku:in": "A,B"})
            shipments = client.shipments.list_shipments(55)
    """

    def __init__(self, dispatcher: RequestDispatcher, strict_deletes: bool = False):
        self.dispatcher = dispatcher
        self.inventory = InventoryReader(dispatcher)
        self.shipments = ShipmentManager(dispatcher, strict_deletes=strict_deletes)

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "BigCommerceClient":
        """Build a client from environment settings.

        Raises:
            ConfigurationError: If required settings are missing.
        """
        settings.validate()
        logger.setLevel(settings.LOG_LEVEL.upper())
        dispatcher = SessionDispatcher(
            settings.BIGCOMMERCE_STORE_HASH, settings.BIGCOMMERCE_ACCESS_TOKEN,
            client_id=settings.BIGCOMMERCE_CLIENT_ID, base_url=settings.BIGCOMMERCE_API_URL,
            timeout=settings.BIGCOMMERCE_TIMEOUT
        )
        logger.info(f"BigCommerce client configured for store {settings.BIGCOMMERCE_STORE_HASH}")
        return cls(dispatcher, strict_deletes=settings.BIGCOMMERCE_STRICT_DELETES)

    def close(self) -> None:
        close = getattr(self.dispatcher, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "BigCommerceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
