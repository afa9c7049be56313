# bigcommerce_client/utils/logging.py
import logging
import os
import colorlog
from colorlog.escape_codes import escape_codes

LEVEL_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'bold_red',
}

# Цвет по префиксу ресурса в сообщении
RESOURCE_COLORS = {
    "[inventory]": "purple",
    "[shipments]": "blue",
}

class ResourceColorFilter(logging.Filter):
    """Set record.resource_color from the resource prefix of the message.

    Warnings and errors keep their level color. NO_COLOR disables it like
    the level colors.
    """
    def filter(self, record):
        record.resource_color = ""
        if "NO_COLOR" in os.environ and "FORCE_COLOR" not in os.environ:
            return True
        if record.levelno < logging.WARNING:
            message = str(record.msg)
            for prefix, color in RESOURCE_COLORS.items():
                if prefix in message:
                    record.resource_color = escape_codes[color]
                    break
        return True

def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure colored logging for the client.

    Args:
        level (str): Logging level name.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger("bigcommerce_client")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(
            '%(log_color)s%(resource_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            log_colors=LEVEL_COLORS
        ))
        handler.addFilter(ResourceColorFilter())
        logger.addHandler(handler)
    return logger

logger = setup_logging()
