"""Pydantic models for workouts, schedules and the training calendar."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from garmin_connect.models.base import GarminModel
from garmin_connect.workouts.running import RunningWorkout


class SportType(GarminModel):
    sport_type_id: Optional[int] = None
    sport_type_key: Optional[str] = None
    display_order: Optional[int] = None


class WorkoutSegment(GarminModel):
    segment_order: Optional[int] = None
    sport_type: Optional[SportType] = None
    workout_steps: List[Dict[str, Any]] = Field(default_factory=list)


class Workout(GarminModel):
    """Workout as listed by the workout service."""
    workout_id: Optional[int] = None
    owner_id: Optional[int] = None
    workout_name: Optional[str] = None
    description: Optional[str] = None
    updated_date: Optional[str] = None
    created_date: Optional[str] = None
    sport_type: Optional[SportType] = None
    training_plan_id: Optional[int] = None
    author: Optional[Dict[str, Any]] = None
    estimated_duration_in_secs: Optional[int] = None
    estimated_distance_in_meters: Optional[float] = None
    estimate_type: Optional[str] = None
    pool_length: Optional[float] = None
    pool_length_unit: Optional[Dict[str, Any]] = None
    shared: Optional[bool] = None


class WorkoutDetail(Workout):
    """Workout including its segments and steps."""
    workout_segments: Optional[List[WorkoutSegment]] = None


class ScheduleWorkout(GarminModel):
    """Result of scheduling a workout on a calendar date."""
    workout_schedule_id: Optional[int] = None
    workout: Optional[Workout] = None
    calendar_date: Optional[str] = None
    created_date: Optional[str] = None
    owner_id: Optional[int] = None
    new_name: Optional[str] = None


class Calendar(GarminModel):
    """One month of the training calendar. `month` is zero-based."""
    start_day_of_month: Optional[int] = None
    num_of_days_in_month: Optional[int] = None
    num_of_days_in_prev_month: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None
    calendar_items: List[Dict[str, Any]] = Field(default_factory=list)


class BuiltWorkout(BaseModel):
    """A workout assembled with a workout builder."""
    kind: Literal["built"] = "built"
    workout: RunningWorkout


class RawWorkout(BaseModel):
    """A workout supplied as a full workout detail record."""
    kind: Literal["raw"] = "raw"
    detail: WorkoutDetail


WorkoutSubmission = Annotated[Union[BuiltWorkout, RawWorkout], Field(discriminator="kind")]
