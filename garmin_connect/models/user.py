"""Pydantic models for the Garmin Connect user."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from garmin_connect.models.base import GarminModel


class UserSettings(GarminModel):
    id: Optional[int] = None
    user_data: Optional[Dict[str, Any]] = None
    user_sleep: Optional[Dict[str, Any]] = None
    connect_date: Optional[str] = None
    source_type: Optional[str] = None


class SocialProfile(GarminModel):
    id: Optional[int] = None
    profile_id: int
    garmin_guid: Optional[str] = Field(default=None, alias="garminGUID")
    display_name: Optional[str] = None
    full_name: Optional[str] = None
    user_name: Optional[str] = None
    profile_image_url_large: Optional[str] = None
    profile_image_url_medium: Optional[str] = None
    profile_image_url_small: Optional[str] = None
    location: Optional[str] = None
    facebook_url: Optional[str] = None
    twitter_url: Optional[str] = None
    personal_website: Optional[str] = None
    motivation: Optional[Any] = None
    bio: Optional[str] = None
    primary_activity: Optional[str] = None
    favorite_activity_types: List[Any] = Field(default_factory=list)
    running_training_speed: Optional[float] = None
    cycling_training_speed: Optional[float] = None
    user_level: Optional[int] = None
    level_point_threshold: Optional[int] = None
    user_point: Optional[int] = None
