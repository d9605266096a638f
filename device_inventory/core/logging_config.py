# Standard library imports
import logging
import re

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_CREDENTIALS_IN_URI = re.compile(r"//([^:/@]+):([^@]+)@")


def configure_logging(level: str) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def mask_uri(uri: str) -> str:
    """Hide user and password of a connection URI before it is logged."""
    return _CREDENTIALS_IN_URI.sub("//***:***@", uri)
