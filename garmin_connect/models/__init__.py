"""Data models for Garmin Connect API integration."""

from .activity import (
    Activity,
    ActivityStats,
    ActivityType,
    CountActivities,
    ExportFileType,
    GCActivityId,
    UploadFileType,
)
from .course import BoundingBox, Course, CourseDetail, CourseLine, CoursesForUser, GeoPoint
from .golf import GolfScorecard, GolfSummary
from .tokens import GarminTokens, OAuth1Token, OAuth2Token
from .user import SocialProfile, UserSettings
from .wellness import (
    DailySteps,
    HeartRate,
    HydrationData,
    SleepData,
    SleepDuration,
    UpdateWeight,
    WaterIntake,
    WeightData,
)
from .workout import BuiltWorkout, Calendar, RawWorkout, ScheduleWorkout, Workout, WorkoutDetail, WorkoutSubmission

__all__ = [
    "Activity", "ActivityStats", "ActivityType", "CountActivities", "ExportFileType", "GCActivityId",
    "UploadFileType",
    "BoundingBox", "Course", "CourseDetail", "CourseLine", "CoursesForUser", "GeoPoint",
    "GolfScorecard", "GolfSummary",
    "GarminTokens", "OAuth1Token", "OAuth2Token",
    "SocialProfile", "UserSettings",
    "DailySteps", "HeartRate", "HydrationData", "SleepData", "SleepDuration",
    "UpdateWeight", "WaterIntake", "WeightData",
    "BuiltWorkout", "Calendar", "RawWorkout", "ScheduleWorkout", "Workout", "WorkoutDetail",
    "WorkoutSubmission",
]
