from receeco.utils.response import normalize_response
from receeco.utils.tokens import generate_receipt_token, generate_short_code
from receeco.utils.validation import (
    validate_contact_update_input,
    validate_create_receipt_input,
)

__all__ = [
    "generate_receipt_token",
    "generate_short_code",
    "normalize_response",
    "validate_contact_update_input",
    "validate_create_receipt_input",
]
