"""
Error types and the HTTP error classifier for Business Central responses.
"""

import json
from typing import Any, Optional

from .constants import RETRYABLE_STATUS_CODES


class BcMcpError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(BcMcpError):
    """Missing or invalid setup, e.g. no company selected. Never retried."""


class AuthenticationError(BcMcpError):
    """OAuth failure: provider error, state mismatch, timeout or token endpoint failure."""


class ToolNameCollisionError(BcMcpError):
    """Two distinct entities generated the same tool name."""


class BcError(BcMcpError):
    """A classified error response from the Business Central API."""

    def __init__(self, status_code: int, code: str, message: str, user_message: str,
                 is_retryable: bool, retry_after_ms: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.user_message = user_message
        self.is_retryable = is_retryable
        self.retry_after_ms = retry_after_ms

    def __repr__(self) -> str:
        return f"BcError(status_code={self.status_code}, code={self.code!r}, retryable={self.is_retryable})"


def _stringify(body: Any) -> str:
    if isinstance(body, str):
        return body
    try:
        return json.dumps(body, default=str)
    except (TypeError, ValueError):
        return repr(body)


def parse_bc_error(status_code: int, body: Any, retry_after_ms: Optional[int] = None) -> BcError:
    """Classify an HTTP error response. Never raises, whatever the body looks like."""
    error_obj = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error_obj, dict):
        error_obj = {}

    code = error_obj.get("code")
    if not code or not isinstance(code, str):
        code = f"HTTP_{status_code}"

    message = error_obj.get("message")
    if not message or not isinstance(message, str):
        message = _stringify(body)

    if status_code == 400:
        user_message = f"Validation error: {message}"
    elif status_code == 401:
        user_message = "Authentication failed. Please re-authenticate with Business Central."
    elif status_code == 403:
        user_message = "Access denied. Your account does not have permission for this operation."
    elif status_code == 404:
        user_message = f"Resource not found: {message}. Verify the ID exists and you have access."
    elif status_code == 409:
        user_message = (f"Concurrency conflict: The record was modified by another user. "
                        f"Please re-fetch and try again. Details: {message}")
    elif status_code == 429:
        user_message = "Rate limit exceeded. The request will be retried automatically."
    elif status_code == 504:
        user_message = "Request timed out. Try a smaller query with $filter or $top to reduce data."
    else:
        user_message = f"Business Central error ({status_code}): {message}"

    return BcError(
        status_code=status_code,
        code=code,
        message=message,
        user_message=user_message,
        is_retryable=status_code in RETRYABLE_STATUS_CODES,
        retry_after_ms=retry_after_ms,
    )
