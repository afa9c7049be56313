# bigcommerce_client/api/decoder.py
import json
from typing import Any, Dict, Optional
import requests
from bigcommerce_client.api.exceptions import NoContent

def build_query(filters: Optional[Dict[str, str]]) -> str:
    """Build a query string from filters.

    Keys and values are used verbatim, in insertion order. An empty mapping
    gives an empty string, otherwise the result starts with "?".

    Args:
        filters (Optional[Dict[str, str]]): Filter name to value, e.g. {"sku:in": "A,B"}.

    Returns:
        str: Query string to append to the path.
    """
    if not filters:
        return ""
    return "?" + "&".join(f"{key}={value}" for key, value in filters.items())

def read_body(response: requests.Response) -> bytes:
    """Return the raw response body.

    Raises:
        NoContent: If the API answered 204.
        requests.HTTPError: If the status is not 2xx.
    """
    if response.status_code == requests.codes.no_content:
        raise NoContent(response)
    response.raise_for_status()
    return response.content

def decode_json(response: requests.Response) -> Any:
    """Read the body and decode it as JSON.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON.
    """
    return json.loads(read_body(response))
