import logging
from typing import Any, Dict, Optional

import requests

from receeco.transport.base import Transport, TransportError, TransportResponse

logger = logging.getLogger("receeco-transport")


class RequestsTransport(Transport):
    def __init__(
        self,
        base_url: str,
        headers: Dict[str, str],
        timeout: float,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(base_url, headers, timeout)
        self._session = session or requests.Session()
        self._session.headers.update(self.headers)

    def send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> TransportResponse:
        url = self.build_url(endpoint)
        logger.info(f"[send] {method} {url}")

        try:
            response = self._session.request(
                method, url, params=params, json=json, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            raise TransportError(str(e)) from e

        logger.info(f"[send] {method} {url} -> {response.status_code}")
        return {"status_code": response.status_code, "body": response.text}

    def close(self) -> None:
        self._session.close()
