"""Pydantic models for Garmin Connect activities."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from garmin_connect.models.base import GarminModel

GCActivityId = Union[int, str]


class ActivityType(GarminModel):
    """Activity type descriptor (running, cycling, ...)."""
    type_id: Optional[int] = None
    type_key: Optional[str] = None
    parent_type_id: Optional[int] = None
    is_hidden: Optional[bool] = None
    restricted: Optional[bool] = None
    trimmable: Optional[bool] = None


class Activity(GarminModel):
    """Garmin Connect activity summary."""
    activity_id: int
    activity_name: Optional[str] = None
    description: Optional[str] = None
    start_time_local: Optional[str] = None
    start_time_gmt: Optional[str] = Field(default=None, alias="startTimeGMT")
    activity_type: Optional[ActivityType] = None
    event_type: Optional[Dict[str, Any]] = None
    distance: Optional[float] = None
    duration: Optional[float] = None
    elapsed_duration: Optional[float] = None
    moving_duration: Optional[float] = None
    elevation_gain: Optional[float] = None
    elevation_loss: Optional[float] = None
    average_speed: Optional[float] = None
    max_speed: Optional[float] = None
    start_latitude: Optional[float] = None
    start_longitude: Optional[float] = None
    calories: Optional[float] = None
    average_hr: Optional[float] = Field(default=None, alias="averageHR")
    max_hr: Optional[float] = Field(default=None, alias="maxHR")
    steps: Optional[int] = None
    owner_id: Optional[int] = None
    owner_display_name: Optional[str] = None
    device_id: Optional[int] = None
    manufacturer: Optional[str] = None


class ActivityStats(GarminModel):
    """One aggregation bucket of the fitness stats service."""
    date: Optional[str] = None
    count_of_activities: Optional[int] = None
    stats: Optional[Dict[str, Any]] = None


CountActivities = List[ActivityStats]


class UploadFileType(str, Enum):
    """File formats accepted by the upload service."""
    FIT = "fit"
    GPX = "gpx"
    TCX = "tcx"


class ExportFileType(str, Enum):
    """Formats an activity can be downloaded in. ZIP holds the original file."""
    ZIP = "zip"
    GPX = "gpx"
    TCX = "tcx"
    KML = "kml"
