import json
import logging
from typing import Any, Mapping

from receeco.errors import ErrorCode, SDKError

logger = logging.getLogger("receeco-response")

DEFAULT_ERROR_MESSAGE = "Unknown error occurred"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant {name}")


def _get(data: Any, key: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(key)
    return None


def _first_set(*values: Any) -> Any:
    return next((value for value in values if value is not None), None)


def _extract_error(error_info: Any) -> SDKError:
    code = _first_set(
        _get(_get(error_info, "data"), "code"),
        _get(error_info, "code"),
        ErrorCode.UNKNOWN,
    )
    message = _first_set(_get(error_info, "message"), DEFAULT_ERROR_MESSAGE)
    return SDKError(str(code), str(message))


def normalize_response(status_code: int, body: str) -> Any:
    """
    Turn a tRPC response into its result value or raise its error

    Success (HTTP 200) unwraps ``result.data``, then ``result``, and otherwise
    returns the whole document. Anything else is read as an error envelope.
    The outcome depends only on the arguments.

    Args:
        status_code: HTTP status of the response
        body: Raw response body

    Returns:
        The unwrapped result value

    Raises:
        SDKError: INVALID_RESPONSE, UNKNOWN_ERROR or the remote error code
    """
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        logger.error(f"Invalid JSON response from API (status {status_code})")
        raise SDKError(ErrorCode.INVALID_RESPONSE, "Invalid JSON response from API")

    if status_code == 200:
        result = _get(data, "result")
        nested = _get(result, "data")
        if nested is not None:
            return nested
        if result is not None:
            return result
        return data

    error_info = _get(data, "error")
    if error_info is not None:
        error = _extract_error(error_info)
        logger.error(f"API returned error {error.code} (status {status_code}): {error.message}")
        raise error

    logger.warning(f"Unexpected response format (status {status_code})")
    raise SDKError(ErrorCode.UNKNOWN_ERROR, "Unexpected response format")
