# bigcommerce_client/config/settings.py
from dotenv import load_dotenv
import os

from bigcommerce_client.api.exceptions import ConfigurationError

load_dotenv()

DEFAULT_API_URL = "https://api.bigcommerce.com"

class Settings:
    """Client configuration settings."""
    BIGCOMMERCE_STORE_HASH: str = os.getenv("BIGCOMMERCE_STORE_HASH")
    BIGCOMMERCE_ACCESS_TOKEN: str = os.getenv("BIGCOMMERCE_ACCESS_TOKEN")
    BIGCOMMERCE_CLIENT_ID: str = os.getenv("BIGCOMMERCE_CLIENT_ID")
    BIGCOMMERCE_API_URL: str = os.getenv("BIGCOMMERCE_API_URL", DEFAULT_API_URL)
    # Разбирается в validate()
    BIGCOMMERCE_TIMEOUT: float = os.getenv("BIGCOMMERCE_TIMEOUT", "30")
    # Старое поведение: DELETE не проверяет статус ответа
    BIGCOMMERCE_STRICT_DELETES: bool = os.getenv("BIGCOMMERCE_STRICT_DELETES", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def validate(self) -> None:
        """Validate that all required environment variables are set."""
        required = {
            "BIGCOMMERCE_STORE_HASH": self.BIGCOMMERCE_STORE_HASH,
            "BIGCOMMERCE_ACCESS_TOKEN": self.BIGCOMMERCE_ACCESS_TOKEN
        }
        for name, value in required.items():
            if not value:
                raise ConfigurationError(f"Environment variable {name} is not set!")
        try:
            self.BIGCOMMERCE_TIMEOUT = float(self.BIGCOMMERCE_TIMEOUT)
        except (TypeError, ValueError):
            raise ConfigurationError(f"BIGCOMMERCE_TIMEOUT must be a number, got {self.BIGCOMMERCE_TIMEOUT!r}")
        if self.BIGCOMMERCE_TIMEOUT <= 0:
            raise ConfigurationError("BIGCOMMERCE_TIMEOUT must be positive!")

settings = Settings()
