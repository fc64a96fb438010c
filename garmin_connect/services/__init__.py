"""Garmin Connect services."""

from .garmin_service import GarminConnect
from .http_client import HttpClient

__all__ = ["GarminConnect", "HttpClient"]
