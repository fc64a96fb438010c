"""Pydantic models for Garmin Connect courses."""

from typing import Any, List, Optional

from pydantic import Field

from garmin_connect.models.activity import ActivityType
from garmin_connect.models.base import GarminModel


class PrivacyRule(GarminModel):
    type_id: Optional[int] = None
    type_key: Optional[str] = None


class Course(GarminModel):
    """Course as listed for the owner or in favourites."""
    course_id: int
    user_profile_id: Optional[int] = None
    display_name: Optional[str] = None
    user_group_id: Optional[Any] = None
    geo_route_pk: Optional[Any] = None
    activity_type: Optional[ActivityType] = None
    course_name: Optional[str] = None
    course_description: Optional[Any] = None
    created_date: Optional[int] = None
    updated_date: Optional[int] = None
    privacy_rule: Optional[PrivacyRule] = None
    distance_in_meters: Optional[float] = None
    elevation_gain_in_meters: Optional[float] = None
    elevation_loss_in_meters: Optional[float] = None
    start_latitude: Optional[float] = None
    start_longitude: Optional[float] = None
    speed_in_meters_per_second: Optional[float] = None
    source_type_id: Optional[int] = None
    source_pk: Optional[Any] = None
    elapsed_seconds: Optional[Any] = None
    coordinate_system: Optional[str] = None
    original_coordinate_system: Optional[str] = None
    consumer: Optional[str] = None
    elevation_source: Optional[int] = None
    has_shareable_event: Optional[bool] = None
    has_pace_band: Optional[bool] = None
    has_power_guide: Optional[bool] = None
    favorite: Optional[bool] = None
    has_turn_detection_disabled: Optional[bool] = None
    curated_course_id: Optional[Any] = None
    created_date_formatted: Optional[str] = None
    updated_date_formatted: Optional[str] = None
    is_public: Optional[bool] = Field(default=None, alias="public")
    activity_type_id: Optional[ActivityType] = None
    application_name: Optional[str] = None
    company_name: Optional[str] = None
    company_website: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageURL")


class CoursesForUser(GarminModel):
    courses_for_user: List[Course] = Field(default_factory=list)


class LatLng(GarminModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class StartPoint(LatLng):
    elevation: Optional[float] = None
    distance: Optional[Any] = None
    timestamp: Optional[Any] = None


class GeoPoint(LatLng):
    elevation: Optional[float] = None
    distance: Optional[float] = None
    timestamp: Optional[int] = None


class BoundingBox(GarminModel):
    center: Optional[Any] = None
    lower_left: Optional[LatLng] = None
    upper_right: Optional[LatLng] = None
    lower_left_lat_is_set: Optional[bool] = None
    lower_left_long_is_set: Optional[bool] = None
    upper_right_lat_is_set: Optional[bool] = None
    upper_right_long_is_set: Optional[bool] = None


class CourseLine(GarminModel):
    course_id: Optional[int] = None
    sort_order: Optional[int] = None
    number_of_points: Optional[int] = None
    distance_in_meters: Optional[float] = None
    bearing: Optional[float] = None
    points: Optional[Any] = None
    coordinate_system: Optional[Any] = None
    original_coordinate_system: Optional[Any] = None


class CourseDetail(GarminModel):
    """Full course including its track."""
    course_id: Optional[int] = None
    course_name: Optional[str] = None
    description: Optional[str] = None
    open_street_map: Optional[bool] = None
    matched_to_segments: Optional[bool] = None
    user_profile_pk: Optional[int] = None
    user_group_pk: Optional[Any] = None
    rule_pk: Optional[int] = Field(default=None, alias="rulePK")
    first_name: Optional[str] = None
    last_name: Optional[Any] = None
    display_name: Optional[str] = None
    geo_route_pk: Optional[int] = None
    source_type_id: Optional[int] = None
    source_pk: Optional[Any] = None
    distance_meter: Optional[float] = None
    elevation_gain_meter: Optional[float] = None
    elevation_loss_meter: Optional[float] = None
    start_point: Optional[StartPoint] = None
    geo_points: List[GeoPoint] = Field(default_factory=list)
    course_points: Optional[Any] = None
    bounding_box: Optional[BoundingBox] = None
    has_shareable_event: Optional[bool] = None
    has_turn_detection_disabled: Optional[bool] = None
    activity_type_pk: Optional[int] = None
    virtual_partner_id: Optional[int] = None
    include_laps: Optional[bool] = None
    elapsed_seconds: Optional[Any] = None
    speed_meter_per_second: Optional[Any] = None
    create_date: Optional[str] = None
    update_date: Optional[str] = None
    course_lines: List[CourseLine] = Field(default_factory=list)
    coordinate_system: Optional[str] = None
    target_coordinate_system: Optional[str] = None
    original_coordinate_system: Optional[str] = None
    consumer: Optional[Any] = None
    elevation_source: Optional[int] = None
    has_pace_band: Optional[bool] = None
    has_power_guide: Optional[bool] = None
    favorite: Optional[bool] = None
    curated_course_pk: Optional[Any] = None
