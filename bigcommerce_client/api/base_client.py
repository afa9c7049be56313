# bigcommerce_client/api/base_client.py
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional
import requests
from bigcommerce_client.api.decoder import decode_json
from bigcommerce_client.utils.logging import logger
from bigcommerce_client.utils.metrics import API_ERRORS_TOTAL

class RequestDispatcher(ABC):
    """Abstract transport used by the inventory and shipment facades."""

    @abstractmethod
    def build_request(self, method: str, path: str, body: Optional[bytes] = None) -> requests.PreparedRequest:
        """Build an authenticated request for a path relative to the store API root."""
        pass

    @abstractmethod
    def execute(self, request: requests.PreparedRequest) -> requests.Response:
        """Send a prepared request and return the response."""
        pass

class ApiResource:
    """Base class for facades over one API resource."""

    name = "api"

    def __init__(self, dispatcher: RequestDispatcher):
        self.dispatcher = dispatcher

    def _fetch_json(self, method: str, path: str, body: Optional[bytes] = None) -> Any:
        """Issue one request and decode its JSON body.

        Raises:
            NoContent: If the API answered 204.
            requests.RequestException: On transport errors and non-2xx statuses.
            json.JSONDecodeError: If the body is not valid JSON.
        """
        request = self.dispatcher.build_request(method, path, body)
        try:
            with self.dispatcher.execute(request) as response:
                return decode_json(response)
        except requests.exceptions.RequestException as e:
            if e.response is not None:
                logger.error(f"[{self.name}] {method} {path} failed: HTTP {e.response.status_code} - {e.response.text}")
            else:
                logger.error(f"[{self.name}] {method} {path} failed (no response): {str(e)}")
            API_ERRORS_TOTAL.labels(resource=self.name).inc()
            raise
        except ValueError as e:
            logger.error(f"[{self.name}] {method} {path} returned malformed JSON: {str(e)}")
            API_ERRORS_TOTAL.labels(resource=self.name).inc()
            raise

    def _fetch(self, method: str, path: str, parse: Callable[[Any], Any], body: Optional[bytes] = None) -> Any:
        """Issue one request and parse the decoded JSON with parse.

        Raises:
            TypeError, ValueError: If the payload does not have the expected shape.
        """
        data = self._fetch_json(method, path, body)
        try:
            return parse(data)
        except (TypeError, ValueError) as e:
            logger.error(f"[{self.name}] {method} {path} returned an unexpected payload: {str(e)}")
            API_ERRORS_TOTAL.labels(resource=self.name).inc()
            raise
