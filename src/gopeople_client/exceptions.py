"""Error taxonomy for gopeople-client.

Errors are returned inside :class:`~gopeople_client.result.Err` rather than
raised; ``Err.unwrap()`` raises them for callers that prefer exceptions.
"""

from __future__ import annotations

import json
from typing import Any


class GoPeopleError(Exception):
    """Base class for every failure the client reports."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(GoPeopleError):
    """Carrier credentials are missing or could not be loaded."""


class MissingConfigurationError(ConfigurationError):
    """A required configuration value is absent."""


class CredentialsNotFoundError(ConfigurationError):
    """The credential store holds no configuration for the carrier."""


class ValidationError(GoPeopleError):
    """Booking parameters violate a carrier business rule."""


class UnparsableShiftError(ValidationError):
    pass


class ShiftOutOfWindowError(ValidationError):
    pass


class EmptyTimeError(ValidationError):
    pass


class TimeFormatError(ValidationError):
    pass


class TimeOutOfRangeError(ValidationError):
    pass


class HoursTooShortError(ValidationError):
    pass


class TransportError(GoPeopleError):
    """The request never produced a decodable carrier response."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation!r} API request error: {cause}")


class CarrierError(GoPeopleError):
    """The carrier answered with a non-zero ``errorCode``."""

    def __init__(
        self,
        error_code: Any,
        carrier_message: str,
        result_json: str,
    ) -> None:
        self.error_code = error_code
        self.carrier_message = carrier_message
        self.result_json = result_json
        if not isinstance(error_code, str):
            # null, false and numbers read as they do in the envelope
            error_code = json.dumps(error_code)
        super().__init__(
            f"Error code: {error_code}, message: {carrier_message}, "
            f"result: {result_json}"
        )


class DecodeError(GoPeopleError):
    """A well-formed envelope lacks the fields an operation expects."""
