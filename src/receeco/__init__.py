"""Python client for the Receeco digital receipt API."""

from receeco.clients.ReceecoClient import ClientConfig, ReceecoClient
from receeco.errors import ErrorCode, SDKError
from receeco.factory import create_client
from receeco.utils.tokens import generate_receipt_token, generate_short_code

__version__ = "1.0.0"

__all__ = [
    "ClientConfig",
    "ErrorCode",
    "ReceecoClient",
    "SDKError",
    "create_client",
    "generate_receipt_token",
    "generate_short_code",
]
