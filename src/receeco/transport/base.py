from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypedDict


class TransportResponse(TypedDict):
    status_code: int
    body: str


class TransportError(Exception):
    """Raised when a request could not be completed (connection, timeout, ...)."""


class Transport(ABC):
    def __init__(self, base_url: str, headers: Dict[str, str], timeout: float):
        self.base_url = base_url
        self.headers = dict(headers)
        self.timeout = timeout

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    @abstractmethod
    def send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> TransportResponse:
        """Send one request and return its raw status and body.

        Args:
            method: HTTP method (GET, POST, ...)
            endpoint: Procedure name appended to the base URL
            params: Query string parameters
            json: Body to send as JSON

        Returns:
            The response status code and undecoded body. Error statuses are
            returned as well; they are not raised.

        Raises:
            TransportError: If no response was received
        """
        pass
