import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from receeco.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CURRENCY,
    ENDPOINT_CREATE_RECEIPT,
    ENDPOINT_GET_RECEIPT,
    ENDPOINT_UPDATE_RECEIPT_CONTACT,
    RECEIPT_STATUS_COMPLETED,
    RECEIPT_WEB_URL,
    REQUEST_TIMEOUT_SECONDS,
)
from receeco.errors import ErrorCode, SDKError
from receeco.schemas.contact import ContactUpdateInput
from receeco.schemas.receipt import ReceiptInput
from receeco.transport.base import Transport, TransportError
from receeco.transport.requests_transport import RequestsTransport
from receeco.utils.response import normalize_response
from receeco.utils.tokens import generate_receipt_token, generate_short_code
from receeco.utils.validation import (
    validate_contact_update_input,
    validate_create_receipt_input,
)

logger = logging.getLogger("receeco-client")


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = REQUEST_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        return f"ClientConfig(base_url={self.base_url!r}, timeout={self.timeout!r})"


class ReceecoClient:
    """
    Client for creating and managing Receeco digital receipts.

    Every public method performs at most one request. Failures are raised as
    SDKError and are never retried.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize the Receeco client

        Args:
            api_key: Receeco API key, sent as a bearer token
            base_url: tRPC base URL (defaults to the production endpoint)
            transport: Transport to send requests with (defaults to requests)

        Raises:
            SDKError: API_KEY_REQUIRED if api_key is empty
        """
        if not api_key:
            raise SDKError(ErrorCode.API_KEY_REQUIRED, "api_key is required")

        self.config = ClientConfig(api_key=api_key, base_url=base_url or DEFAULT_BASE_URL)
        self.transport = transport or RequestsTransport(
            self.config.base_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.config.api_key}",
            },
            timeout=self.config.timeout,
        )

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any], transport: Optional[Transport] = None
    ) -> "ReceecoClient":
        """Build a client from an options mapping with api_key and optional base_url."""
        return cls(
            api_key=options.get("api_key"),
            base_url=options.get("base_url"),
            transport=transport,
        )

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def create_receipt(self, input_data: ReceiptInput) -> Any:
        """
        Create a digital receipt from transaction data

        Args:
            input_data: Receipt creation data

        Returns:
            Created receipt, including its id and token

        Raises:
            SDKError: If validation fails or the API request fails
        """
        validate_create_receipt_input(input_data)

        payload = self._build_receipt_payload(input_data)
        logger.info(
            f"[create_receipt] merchant {payload['merchant_string_id']} "
            f"token {payload['token']}"
        )
        return self._post(ENDPOINT_CREATE_RECEIPT, payload)

    def get_receipt(self, token_or_code: str) -> Any:
        """
        Get a receipt by its token or short code

        Args:
            token_or_code: Receipt token or 6 character short code

        Returns:
            Complete receipt data

        Raises:
            SDKError: If the receipt is not found or the API request fails
        """
        return self._get(ENDPOINT_GET_RECEIPT, {"token": token_or_code})

    def update_receipt_contact(self, input_data: ContactUpdateInput) -> Any:
        """
        Update the email and/or phone attached to a receipt

        Args:
            input_data: Receipt token with optional email and phone

        Returns:
            Success status, e.g. {"success": True}

        Raises:
            SDKError: If the token is missing or the API request fails
        """
        validate_contact_update_input(input_data)
        return self._post(ENDPOINT_UPDATE_RECEIPT_CONTACT, dict(input_data))

    @staticmethod
    def receipt_url(token: str) -> str:
        """Public web page of a receipt."""
        return f"{RECEIPT_WEB_URL}/{token}"

    def _build_receipt_payload(self, input_data: ReceiptInput) -> Dict[str, Any]:
        transaction_date = input_data.get("transaction_date")
        if transaction_date is None:
            transaction_date = datetime.now().astimezone().isoformat(timespec="seconds")

        currency = input_data.get("currency")

        # Unset optional fields are sent as null
        return {
            "token": generate_receipt_token(),
            "short_code": generate_short_code(),
            "merchant_string_id": input_data["merchant_string_id"],
            "merchant_name": input_data.get("merchant_name"),
            "merchant_logo": input_data.get("merchant_logo"),
            "accent_color": input_data.get("accent_color"),
            "customer_email": input_data.get("customer_email"),
            "customer_phone": input_data.get("customer_phone"),
            "total_amount": input_data["total_amount"],
            "currency": DEFAULT_CURRENCY if currency is None else currency,
            "transaction_date": transaction_date,
            "items": input_data["items"],
            "category": input_data["category"],
            "payment_method": input_data.get("payment_method"),
            "location": input_data.get("location"),
            "status": RECEIPT_STATUS_COMPLETED,
        }

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        query = {}
        if params:
            query["input"] = json.dumps(params, separators=(",", ":"))
        return self._send("GET", endpoint, params=query)

    def _post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        return self._send("POST", endpoint, json=data)

    def _send(self, method: str, endpoint: str, **kwargs) -> Any:
        try:
            response = self.transport.send(method, endpoint, **kwargs)
        except TransportError as e:
            logger.error(f"[{endpoint}] request failed: {str(e)}")
            raise SDKError(ErrorCode.REQUEST_FAILED, str(e)) from e

        return normalize_response(response["status_code"], response["body"])
