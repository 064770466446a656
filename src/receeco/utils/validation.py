import logging
from typing import Any, Mapping

from receeco.errors import ErrorCode, SDKError
from receeco.schemas.contact import update_receipt_contact_schema
from receeco.schemas.receipt import create_receipt_schema, receipt_item_schema

logger = logging.getLogger("receeco-validation")

RECEIPT_REQUIRED_FIELDS = create_receipt_schema["required"]
ITEM_REQUIRED_FIELDS = receipt_item_schema["items"]["required"]
CONTACT_REQUIRED_FIELDS = update_receipt_contact_schema["required"]


def _is_set(data: Any, field: str) -> bool:
    # A key holding None counts as missing
    return isinstance(data, Mapping) and data.get(field) is not None


def _invalid(message: str) -> SDKError:
    logger.error(f"Invalid input: {message}")
    return SDKError(ErrorCode.INVALID_INPUT, message)


def validate_create_receipt_input(input_data: Mapping[str, Any]) -> None:
    """
    Validate the input of ReceecoClient.create_receipt

    Required fields are checked in schema order, then every item in list
    order. The first problem found is raised; unknown keys are ignored.

    Args:
        input_data: Receipt creation data

    Raises:
        SDKError: INVALID_INPUT naming the missing field (and item index)
    """
    for field in RECEIPT_REQUIRED_FIELDS:
        if not _is_set(input_data, field):
            raise _invalid(f"Field '{field}' is required")

    items = input_data["items"]
    if not isinstance(items, (list, tuple)) or not items:
        raise _invalid("items must be a non-empty array")

    for index, item in enumerate(items):
        for field in ITEM_REQUIRED_FIELDS:
            if not _is_set(item, field):
                raise _invalid(f"Item {index}: field '{field}' is required")


def validate_contact_update_input(input_data: Mapping[str, Any]) -> None:
    """Check that a contact update names the receipt token."""
    for field in CONTACT_REQUIRED_FIELDS:
        if not isinstance(input_data, Mapping) or not input_data.get(field):
            raise _invalid(f"{field} is required")
