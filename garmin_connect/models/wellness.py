"""Pydantic models for daily wellness data: steps, sleep, weight, hydration, heart rate."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from garmin_connect.models.base import GarminModel


class DailySteps(GarminModel):
    calendar_date: str
    total_steps: Optional[int] = None
    total_distance: Optional[float] = None
    step_goal: Optional[int] = None


class DailySleep(GarminModel):
    """Nightly sleep summary. Timestamps are epoch milliseconds."""
    id: Optional[int] = None
    user_profile_pk: Optional[int] = Field(default=None, alias="userProfilePK")
    calendar_date: Optional[str] = None
    sleep_time_seconds: Optional[int] = None
    nap_time_seconds: Optional[int] = None
    sleep_window_confirmed: Optional[bool] = None
    sleep_start_timestamp_gmt: Optional[int] = Field(default=None, alias="sleepStartTimestampGMT")
    sleep_end_timestamp_gmt: Optional[int] = Field(default=None, alias="sleepEndTimestampGMT")
    sleep_start_timestamp_local: Optional[int] = None
    sleep_end_timestamp_local: Optional[int] = None
    deep_sleep_seconds: Optional[int] = None
    light_sleep_seconds: Optional[int] = None
    rem_sleep_seconds: Optional[int] = None
    awake_sleep_seconds: Optional[int] = None
    average_respiration_value: Optional[float] = None
    avg_sleep_stress: Optional[float] = None
    sleep_scores: Optional[Dict[str, Any]] = None


class SleepData(GarminModel):
    daily_sleep_dto: Optional[DailySleep] = Field(default=None, alias="dailySleepDTO")
    sleep_movement: Optional[List[Dict[str, Any]]] = None
    rem_sleep_data: Optional[bool] = None
    sleep_levels: Optional[List[Dict[str, Any]]] = None
    resting_heart_rate: Optional[int] = None
    avg_overnight_hrv: Optional[float] = None


class SleepDuration(BaseModel):
    hours: int
    minutes: int


class WeightAverage(GarminModel):
    """Average body composition over a period. Weight is in grams."""
    from_date: Optional[int] = Field(default=None, alias="from")
    until: Optional[int] = None
    weight: Optional[float] = None
    bmi: Optional[float] = None
    body_fat: Optional[float] = None
    body_water: Optional[float] = None
    bone_mass: Optional[float] = None
    muscle_mass: Optional[float] = None
    physique_rating: Optional[float] = None
    visceral_fat: Optional[float] = None
    metabolic_age: Optional[float] = None


class WeightData(GarminModel):
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    date_weight_list: List[Dict[str, Any]] = Field(default_factory=list)
    total_average: Optional[WeightAverage] = None


class UpdateWeight(GarminModel):
    """Response of a weigh-in upload. Garmin usually answers with an empty body."""


class HydrationData(GarminModel):
    user_id: Optional[int] = None
    calendar_date: Optional[str] = None
    value_in_ml: Optional[float] = Field(default=None, alias="valueInML")
    goal_in_ml: Optional[float] = Field(default=None, alias="goalInML")
    daily_average_in_ml: Optional[float] = Field(default=None, alias="dailyAverageinML")
    last_entry_timestamp_local: Optional[str] = None
    sweat_loss_in_ml: Optional[float] = Field(default=None, alias="sweatLossInML")
    activity_intake_in_ml: Optional[float] = Field(default=None, alias="activityIntakeInML")


class WaterIntake(GarminModel):
    user_id: Optional[int] = None
    calendar_date: Optional[str] = None
    value_in_ml: Optional[float] = Field(default=None, alias="valueInML")
    goal_in_ml: Optional[float] = Field(default=None, alias="goalInML")
    daily_average_in_ml: Optional[float] = Field(default=None, alias="dailyAverageinML")
    last_entry_timestamp_local: Optional[str] = None
    sweat_loss_in_ml: Optional[float] = Field(default=None, alias="sweatLossInML")
    activity_intake_in_ml: Optional[float] = Field(default=None, alias="activityIntakeInML")


class HeartRate(GarminModel):
    user_profile_pk: Optional[int] = Field(default=None, alias="userProfilePK")
    calendar_date: Optional[str] = None
    start_timestamp_gmt: Optional[str] = Field(default=None, alias="startTimestampGMT")
    end_timestamp_gmt: Optional[str] = Field(default=None, alias="endTimestampGMT")
    start_timestamp_local: Optional[str] = None
    end_timestamp_local: Optional[str] = None
    max_heart_rate: Optional[int] = None
    min_heart_rate: Optional[int] = None
    resting_heart_rate: Optional[int] = None
    last_seven_days_avg_resting_heart_rate: Optional[int] = None
    heart_rate_value_descriptors: Optional[List[Dict[str, Any]]] = None
    heart_rate_values: Optional[List[List[Optional[int]]]] = None
