import secrets

from receeco.constants import (
    RECEIPT_TOKEN_ALPHABET,
    RECEIPT_TOKEN_SEGMENT_LENGTH,
    SHORT_CODE_ALPHABET,
    SHORT_CODE_LENGTH,
)


def _random_string(alphabet: str, length: int) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_receipt_token() -> str:
    """Generate a 26 character lowercase alphanumeric receipt token.

    The token is two independently drawn 13 character segments. Uniqueness is
    not checked locally; the receipt service rejects collisions.
    """
    first = _random_string(RECEIPT_TOKEN_ALPHABET, RECEIPT_TOKEN_SEGMENT_LENGTH)
    second = _random_string(RECEIPT_TOKEN_ALPHABET, RECEIPT_TOKEN_SEGMENT_LENGTH)
    return first + second


def generate_short_code() -> str:
    """Generate a 6 character uppercase alphanumeric short code."""
    return _random_string(SHORT_CODE_ALPHABET, SHORT_CODE_LENGTH)
