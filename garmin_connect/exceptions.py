"""Exception hierarchy for the Garmin Connect client."""

from typing import Optional


class GarminConnectError(Exception):
    """Base exception for all Garmin Connect errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GarminPreconditionError(GarminConnectError):
    """A call was rejected before any network interaction."""


class GarminCredentialsError(GarminPreconditionError):
    """Username or password missing."""


class GarminInvalidFormatError(GarminPreconditionError):
    """File format selector outside the allowed set."""


class GarminTokenNotFoundError(GarminConnectError):
    """No OAuth token pair is held by the client."""


class GarminAuthError(GarminConnectError):
    """Authentication failed or the client is not logged in."""


class GarminAPIError(GarminConnectError):
    """Garmin Connect returned an error response or the request failed."""


class GarminDataError(GarminConnectError):
    """The response is missing a field the operation depends on."""
