# bigcommerce_client/api/exceptions.py

class BigCommerceError(Exception):
    """Base class for errors raised by the client itself."""

class ConfigurationError(BigCommerceError):
    """Raised when client settings are missing or invalid."""

class NoContent(BigCommerceError):
    """Raised by the decoder when the API answered 204 No Content."""

    def __init__(self, response):
        super().__init__(f"No content returned for {response.url}")
        self.response = response
