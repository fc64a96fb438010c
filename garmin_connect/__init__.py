"""Async client for the Garmin Connect API."""

from garmin_connect.config import GarminConfig
from garmin_connect.exceptions import (
    GarminAPIError,
    GarminAuthError,
    GarminConnectError,
    GarminCredentialsError,
    GarminDataError,
    GarminInvalidFormatError,
    GarminPreconditionError,
    GarminTokenNotFoundError,
)
from garmin_connect.models.workout import BuiltWorkout, RawWorkout
from garmin_connect.services.garmin_service import GarminConnect
from garmin_connect.services.http_client import HttpClient
from garmin_connect.urls import GarminUrls
from garmin_connect.workouts.running import RunningWorkout

__version__ = "0.1.0"

__all__ = [
    "GarminConfig",
    "GarminConnect",
    "GarminUrls",
    "HttpClient",
    "BuiltWorkout",
    "RawWorkout",
    "RunningWorkout",
    "GarminAPIError",
    "GarminAuthError",
    "GarminConnectError",
    "GarminCredentialsError",
    "GarminDataError",
    "GarminInvalidFormatError",
    "GarminPreconditionError",
    "GarminTokenNotFoundError",
]
