"""Builders for the `ResponseData` envelope returned by record handlers."""

import logging
from typing import Any, Optional

from ..schemas import ResponseData

logger = logging.getLogger("portfolio.api")

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_ERROR = 500


class ApiResponseBuilder:
    """Static helpers producing success, error and validation envelopes."""

    @staticmethod
    def create_success_response(data: Any) -> ResponseData:
        """Wrap `data` (a payload or an informational string) in a 200 envelope."""
        if data is None:
            raise ValueError("success responses need a payload; use a message string for empty results")
        return ResponseData(status=HTTP_OK, data=data)

    @staticmethod
    def create_error_response(error: Exception, message: str, status: int = HTTP_INTERNAL_ERROR) -> ResponseData:
        """Log `error` and return an envelope carrying only the static `message`.

        The exception text is kept out of the envelope so storage details
        never reach clients.
        """
        logger.error("%s: %s", message, error, exc_info=error)
        return ResponseData(status=status, error=message)

    @staticmethod
    def validate_string(value: Any, field_name: str) -> Optional[ResponseData]:
        """Return a 400 envelope when `value` is not a non-empty string, else `None`."""
        if not isinstance(value, str) or not value.strip():
            return ResponseData(
                status=HTTP_BAD_REQUEST,
                error=f"Invalid {field_name}: must be a non-empty string",
            )
        return None
