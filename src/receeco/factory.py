import os
import logging
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from receeco.clients.ReceecoClient import ReceecoClient
from receeco.constants import ENV_API_KEY, ENV_BASE_URL
from receeco.transport.base import Transport

logger = logging.getLogger("receeco-factory")


def create_client(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    transport: Optional[Transport] = None,
) -> ReceecoClient:
    """
    Factory function to create a client configured from the environment

    Args:
        api_key: API key (defaults to RECEECO_API_KEY)
        base_url: API base URL (defaults to RECEECO_BASE_URL, then production)
        transport: Optional transport to send requests with

    Returns:
        A ReceecoClient instance

    Raises:
        SDKError: API_KEY_REQUIRED if no key is given or configured
    """
    # .env is looked up from the caller's working directory
    load_dotenv(find_dotenv(usecwd=True))

    api_key = api_key or os.environ.get(ENV_API_KEY)
    base_url = base_url or os.environ.get(ENV_BASE_URL)

    if not api_key:
        logger.warning(f"Missing Receeco API key. Set {ENV_API_KEY} or pass api_key.")

    return ReceecoClient(api_key=api_key, base_url=base_url, transport=transport)
