"""Garmin Connect service exposing one method per remote operation."""

import functools
import logging
import os
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from garmin_connect.config import GarminConfig
from garmin_connect.exceptions import (
    GarminConnectError,
    GarminCredentialsError,
    GarminDataError,
    GarminInvalidFormatError,
    GarminPreconditionError,
    GarminTokenNotFoundError,
)
from garmin_connect.models.activity import (
    Activity,
    ActivityStats,
    CountActivities,
    ExportFileType,
    GCActivityId,
    UploadFileType,
)
from garmin_connect.models.course import Course, CourseDetail, CoursesForUser
from garmin_connect.models.golf import GolfScorecard, GolfSummary
from garmin_connect.models.tokens import GarminTokens, OAuth1Token, OAuth2Token
from garmin_connect.models.user import SocialProfile, UserSettings
from garmin_connect.models.wellness import (
    DailySteps,
    HeartRate,
    HydrationData,
    SleepData,
    SleepDuration,
    UpdateWeight,
    WaterIntake,
    WeightData,
)
from garmin_connect.models.workout import (
    BuiltWorkout,
    Calendar,
    ScheduleWorkout,
    Workout,
    WorkoutDetail,
    WorkoutSubmission,
)
from garmin_connect.services.http_client import HttpClient
from garmin_connect.urls import GarminUrls
from garmin_connect.utils.conversions import convert_ml_to_ounces, convert_ounces_to_ml, grams_to_pounds
from garmin_connect.utils.date_utils import (
    calculate_time_difference,
    get_local_timestamp,
    to_date_string,
    to_gmt_timestamp,
)
from garmin_connect.utils.file_utils import check_is_directory, ensure_directory, read_file, read_text_file, write_to_file
from garmin_connect.workouts.running import RunningWorkout

logger = logging.getLogger(__name__)

OAUTH1_TOKEN_FILE = "oauth1_token.json"
OAUTH2_TOKEN_FILE = "oauth2_token.json"
DEFAULT_WORKOUT_DESCRIPTION = "Added by garmin-connect for Python"

# Fields Garmin assigns itself and rejects on creation
WORKOUT_SERVER_FIELDS = frozenset({"workoutId", "ownerId", "updatedDate", "createdDate", "author"})
COURSE_SERVER_FIELDS = frozenset({
    "courseId",
    "matchedToSegments",
    "userProfilePk",
    "userGroupPk",
    "firstName",
    "lastName",
    "displayName",
    "geoRoutePk",
    "sourcePk",
    "hasShareableEvent",
    "virtualPartnerId",
    "includeLaps",
    "speedMeterPerSecond",
    "createDate",
    "updateDate",
    "targetCoordinateSystem",
    "originalCoordinateSystem",
    "consumer",
    "elevationSource",
    "hasPaceBand",
    "hasPowerGuide",
    "favorite",
    "curatedCoursePk",
})

_submission_adapter = TypeAdapter(WorkoutSubmission)
_course_list_adapter = TypeAdapter(List[Course])

T = TypeVar("T")

DateLike = Union[date, datetime]


def wrap_errors(operation: str):
    """Re-raise failures of an operation prefixed with its name.

    Precondition errors pass through untouched, since they are raised before
    any network or file access.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except GarminPreconditionError:
                raise
            except GarminConnectError as e:
                raise type(e)(f"Error in {operation}: {e}", status_code=e.status_code) from e
            except ValidationError as e:
                raise GarminDataError(f"Error in {operation}: unexpected response shape: {e}") from e
            except OSError as e:
                raise GarminConnectError(f"Error in {operation}: {e}") from e
        return wrapper
    return decorator


def _require(value: Any, name: str) -> None:
    if not value:
        raise GarminPreconditionError(f"Missing {name}")


def unique_by(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Drop items whose key was already seen, keeping the first occurrence and order."""
    seen = set()
    unique = []
    for item in items:
        value = key(item)
        if value in seen:
            continue
        seen.add(value)
        unique.append(item)
    return unique


class GarminConnect:
    """Client for the Garmin Connect API.

    Every remote call goes through the HTTP client, which owns the OAuth token
    pair. Methods taking an identifier reject a missing one before any request
    is made.
    """

    def __init__(self, config: Optional[GarminConfig] = None, client: Optional[HttpClient] = None):
        self.config = config or GarminConfig()
        if not self.config.username or not self.config.password:
            raise GarminCredentialsError("Missing credentials")

        self.domain = self.config.domain
        self.url = GarminUrls(self.domain)
        self.client = client or HttpClient(self.url, self.config)

    # Session

    async def login(self, username: Optional[str] = None, password: Optional[str] = None) -> "GarminConnect":
        """Log in with the configured credentials, or with new ones when both are given."""
        if username and password:
            self.config.username = username
            self.config.password = password
        await self.client.login(self.config.username, self.config.password)
        return self

    def export_token(self) -> GarminTokens:
        """Return the current token pair, e.g. to store it in a database."""
        tokens = self.client.tokens
        if tokens is None:
            raise GarminTokenNotFoundError("export_token: Token not found")
        return tokens

    def load_token(
        self,
        oauth1: Union[OAuth1Token, Dict[str, Any]],
        oauth2: Union[OAuth2Token, Dict[str, Any]],
    ) -> None:
        """Install a previously exported token pair."""
        self.client.set_tokens(GarminTokens(oauth1=oauth1, oauth2=oauth2))

    def clear_token(self) -> None:
        self.client.clear_tokens()

    @wrap_errors("export_token_to_file")
    async def export_token_to_file(self, dir_path: Union[str, os.PathLike]) -> None:
        """Write the token pair as two JSON files in dir_path."""
        tokens = self.export_token()
        await ensure_directory(dir_path)
        await write_to_file(Path(dir_path) / OAUTH1_TOKEN_FILE, tokens.oauth1.model_dump_json())
        await write_to_file(Path(dir_path) / OAUTH2_TOKEN_FILE, tokens.oauth2.model_dump_json())
        logger.info("Exported Garmin tokens to %s", dir_path)

    @wrap_errors("load_token_by_file")
    async def load_token_by_file(self, dir_path: Union[str, os.PathLike]) -> None:
        """Load a token pair written by export_token_to_file."""
        if not await check_is_directory(dir_path):
            raise GarminConnectError(f"Directory not found: {dir_path}")

        oauth1_data = await read_text_file(Path(dir_path) / OAUTH1_TOKEN_FILE)
        oauth2_data = await read_text_file(Path(dir_path) / OAUTH2_TOKEN_FILE)
        try:
            oauth1 = OAuth1Token.model_validate_json(oauth1_data)
            oauth2 = OAuth2Token.model_validate_json(oauth2_data)
        except ValidationError as e:
            raise GarminConnectError(f"Invalid token file in {dir_path}: {e}") from e

        self.client.set_tokens(GarminTokens(oauth1=oauth1, oauth2=oauth2))
        logger.info("Loaded Garmin tokens from %s", dir_path)

    # User

    @wrap_errors("get_user_settings")
    async def get_user_settings(self) -> UserSettings:
        data = await self.client.get(self.url.user_settings)
        return UserSettings.model_validate(data)

    @wrap_errors("get_user_profile")
    async def get_user_profile(self) -> SocialProfile:
        data = await self.client.get(self.url.user_profile)
        return SocialProfile.model_validate(data)

    # Activities

    @wrap_errors("get_activities")
    async def get_activities(
        self,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        activity_type: Optional[str] = None,
        sub_activity_type: Optional[str] = None,
    ) -> List[Activity]:
        """List activities, newest first, optionally filtered by type."""
        params = {
            "start": start,
            "limit": limit,
            "activityType": activity_type,
            "subActivityType": sub_activity_type,
        }
        data = await self.client.get(self.url.activities, params=params)
        return [Activity.model_validate(item) for item in data or []]

    @wrap_errors("get_activity")
    async def get_activity(self, activity_id: GCActivityId) -> Activity:
        _require(activity_id, "activityId")
        data = await self.client.get(f"{self.url.activity}{activity_id}")
        return Activity.model_validate(data)

    @wrap_errors("count_activities")
    async def count_activities(self) -> CountActivities:
        """Lifetime activity statistics."""
        params = {
            "aggregation": "lifetime",
            "startDate": "1970-01-01",
            "endDate": to_date_string(date.today()),
            "metric": "duration",
        }
        data = await self.client.get(self.url.stat_activities, params=params)
        return [ActivityStats.model_validate(item) for item in data or []]

    @wrap_errors("download_wellness_data")
    async def download_wellness_data(self, day: DateLike, dir_path: Union[str, os.PathLike]) -> str:
        """Download the wellness archive of a day to ``<dir_path>/<YYYY-MM-DD>.zip``."""
        date_str = to_date_string(day)
        await ensure_directory(dir_path)
        content = await self.client.get(f"{self.url.download_wellness}{date_str}", binary=True)

        file_path = str(Path(dir_path) / f"{date_str}.zip")
        await write_to_file(file_path, content)
        logger.info("Saved wellness data for %s to %s", date_str, file_path)
        return file_path

    @wrap_errors("download_original_activity_data")
    async def download_original_activity_data(
        self,
        activity_id: GCActivityId,
        dir_path: Union[str, os.PathLike],
        file_type: Union[ExportFileType, str] = ExportFileType.ZIP,
    ) -> str:
        """Download an activity to ``<dir_path>/<activity_id>.<file_type>``.

        ``zip`` returns the file originally recorded by the device; the other
        types are exports generated by Garmin.
        """
        _require(activity_id, "activityId")
        try:
            export_type = ExportFileType(file_type)
        except ValueError:
            raise GarminInvalidFormatError(f"Invalid type: {file_type}")

        base_urls = {
            ExportFileType.ZIP: self.url.download_zip,
            ExportFileType.TCX: self.url.download_tcx,
            ExportFileType.GPX: self.url.download_gpx,
            ExportFileType.KML: self.url.download_kml,
        }
        await ensure_directory(dir_path)
        content = await self.client.get(f"{base_urls[export_type]}{activity_id}", binary=True)

        file_path = str(Path(dir_path) / f"{activity_id}.{export_type.value}")
        await write_to_file(file_path, content)
        logger.info("Saved activity %s to %s", activity_id, file_path)
        return file_path

    @wrap_errors("upload_activity")
    async def upload_activity(
        self,
        file: Union[str, os.PathLike],
        file_format: Optional[Union[UploadFileType, str]] = UploadFileType.FIT,
    ) -> Any:
        """Upload an activity file. Without a format the file extension is used."""
        if isinstance(file_format, UploadFileType):
            file_format = file_format.value
        detected = (file_format or Path(file).suffix.lstrip(".")).lower()
        try:
            upload_type = UploadFileType(detected)
        except ValueError:
            raise GarminInvalidFormatError(f"Invalid format: {file_format or detected}")

        content = await read_file(file)
        logger.info("Uploading %s as %s", file, upload_type.value)
        return await self.client.post(
            f"{self.url.upload}/.{upload_type.value}",
            files={"userfile": (Path(file).name, content)},
        )

    @wrap_errors("delete_activity")
    async def delete_activity(self, activity_id: GCActivityId) -> None:
        _require(activity_id, "activityId")
        await self.client.delete(f"{self.url.activity}{activity_id}")

    # Workouts

    @wrap_errors("get_workouts")
    async def get_workouts(self, start: int, limit: int) -> List[Workout]:
        data = await self.client.get(self.url.workouts, params={"start": start, "limit": limit})
        return [Workout.model_validate(item) for item in data or []]

    @wrap_errors("get_workout_detail")
    async def get_workout_detail(self, workout_id: Union[int, str]) -> WorkoutDetail:
        _require(workout_id, "workoutId")
        data = await self.client.get(self.url.workout(workout_id))
        return WorkoutDetail.model_validate(data)

    @wrap_errors("add_workout")
    async def add_workout(self, submission: Union[WorkoutSubmission, Dict[str, Any]]) -> WorkoutDetail:
        """Create a workout from a BuiltWorkout or a RawWorkout.

        A built workout is sent as generated when valid. Anything else must
        carry ``workoutSegments``; server-assigned fields are stripped.
        """
        _require(submission, "workout")
        if isinstance(submission, dict):
            try:
                submission = _submission_adapter.validate_python(submission)
            except ValidationError as e:
                raise GarminPreconditionError(f"Invalid workout submission: {e}") from e

        detail = None
        if submission.kind == "built":
            if submission.workout.is_valid():
                payload = submission.workout.to_payload()
                if not payload.get("description"):
                    payload["description"] = DEFAULT_WORKOUT_DESCRIPTION
                data = await self.client.post(self.url.workout(), payload)
                return WorkoutDetail.model_validate(data)
        else:
            detail = submission.detail

        if detail is None or detail.workout_segments is None:
            raise GarminPreconditionError("Missing workoutSegments, please use WorkoutDetail, not Workout.")

        payload = {
            key: value for key, value in detail.to_payload().items()
            if key not in WORKOUT_SERVER_FIELDS
        }
        if not payload.get("description"):
            payload["description"] = DEFAULT_WORKOUT_DESCRIPTION
        data = await self.client.post(self.url.workout(), payload)
        return WorkoutDetail.model_validate(data)

    async def add_running_workout(self, name: str, meters: float, description: str = "") -> WorkoutDetail:
        """Create a single-step running workout covering ``meters``."""
        running = RunningWorkout(name=name, distance=meters, description=description)
        return await self.add_workout(BuiltWorkout(workout=running))

    @wrap_errors("delete_workout")
    async def delete_workout(self, workout_id: Union[int, str]) -> Any:
        _require(workout_id, "workoutId")
        return await self.client.delete(self.url.workout(workout_id))

    @wrap_errors("schedule_workout")
    async def schedule_workout(self, workout_id: Union[int, str], day: Optional[DateLike] = None) -> ScheduleWorkout:
        """Put a workout on the calendar, today by default."""
        _require(workout_id, "workoutId")
        date_str = to_date_string(day or date.today())
        data = await self.client.post(f"{self.url.schedule_workouts}{workout_id}", {"date": date_str})
        return ScheduleWorkout.model_validate(data)

    @wrap_errors("get_calendar")
    async def get_calendar(self, year: Optional[int] = None, month: Optional[int] = None) -> Calendar:
        """Training calendar of a month. Months are zero-based, as Garmin counts them."""
        today = date.today()
        if year is None:
            year = today.year
        if month is None:
            month = today.month - 1
        data = await self.client.get(self.url.calendar(year, month))
        return Calendar.model_validate(data)

    # Wellness

    @wrap_errors("get_steps")
    async def get_steps(self, day: Optional[DateLike] = None) -> int:
        date_str = to_date_string(day or date.today())
        data = await self.client.get(f"{self.url.daily_steps}{date_str}/{date_str}")
        days = [DailySteps.model_validate(item) for item in data or []]

        day_stats = next((d for d in days if d.calendar_date == date_str), None)
        if day_stats is None or day_stats.total_steps is None:
            raise GarminDataError("Can't find daily steps for this date.")
        return day_stats.total_steps

    @wrap_errors("get_sleep_data")
    async def get_sleep_data(self, day: Optional[DateLike] = None) -> SleepData:
        date_str = to_date_string(day or date.today())
        data = await self.client.get(self.url.daily_sleep, params={"date": date_str})
        if not data:
            raise GarminDataError("Invalid or empty sleep data response.")
        return SleepData.model_validate(data)

    @wrap_errors("get_sleep_duration")
    async def get_sleep_duration(self, day: Optional[DateLike] = None) -> SleepDuration:
        """Time between falling asleep and waking up."""
        sleep_data = await self.get_sleep_data(day)
        sleep = sleep_data.daily_sleep_dto
        if sleep is None or sleep.sleep_start_timestamp_gmt is None or sleep.sleep_end_timestamp_gmt is None:
            raise GarminDataError("Invalid or missing sleep data for the specified date.")

        hours, minutes = calculate_time_difference(sleep.sleep_start_timestamp_gmt, sleep.sleep_end_timestamp_gmt)
        return SleepDuration(hours=hours, minutes=minutes)

    @wrap_errors("get_daily_weight_data")
    async def get_daily_weight_data(self, day: Optional[DateLike] = None) -> WeightData:
        date_str = to_date_string(day or date.today())
        data = await self.client.get(f"{self.url.daily_weight}/{date_str}")
        if not data:
            raise GarminDataError("Invalid or empty weight data response.")
        return WeightData.model_validate(data)

    @wrap_errors("get_daily_weight_in_pounds")
    async def get_daily_weight_in_pounds(self, day: Optional[DateLike] = None) -> float:
        weight_data = await self.get_daily_weight_data(day)
        average = weight_data.total_average
        if average is None or average.weight is None:
            raise GarminDataError("Can't find valid daily weight for this date.")
        return grams_to_pounds(average.weight)

    @wrap_errors("get_daily_hydration")
    async def get_daily_hydration(self, day: Optional[DateLike] = None) -> float:
        """Water intake of a day in ounces."""
        date_str = to_date_string(day or date.today())
        data = await self.client.get(f"{self.url.daily_hydration}/{date_str}")
        hydration = HydrationData.model_validate(data) if data else None
        if hydration is None or not hydration.value_in_ml:
            raise GarminDataError("Invalid or empty hydration data response.")
        return convert_ml_to_ounces(hydration.value_in_ml)

    @wrap_errors("update_weight")
    async def update_weight(self, lbs: float, tz_name: str, when: Optional[datetime] = None) -> UpdateWeight:
        """Record a weigh-in in pounds. ``tz_name`` is an IANA zone such as ``Europe/Paris``."""
        when = when or datetime.now(timezone.utc)
        data = await self.client.post(
            self.url.update_weight,
            {
                "dateTimestamp": get_local_timestamp(when, tz_name),
                "gmtTimestamp": to_gmt_timestamp(when),
                "unitKey": "lbs",
                "value": lbs,
            },
        )
        return UpdateWeight.model_validate(data or {})

    @wrap_errors("update_hydration_log_ounces")
    async def update_hydration_log_ounces(self, value_in_oz: float, when: Optional[datetime] = None) -> WaterIntake:
        when = when or datetime.now().astimezone()
        profile = await self.get_user_profile()
        data = await self.client.put(
            self.url.hydration_log,
            {
                "calendarDate": to_date_string(when),
                "valueInML": convert_ounces_to_ml(value_in_oz),
                "userProfileId": profile.profile_id,
                "timestampLocal": to_gmt_timestamp(when),
            },
        )
        return WaterIntake.model_validate(data or {})

    @wrap_errors("get_heart_rate")
    async def get_heart_rate(self, day: Optional[DateLike] = None) -> HeartRate:
        date_str = to_date_string(day or date.today())
        data = await self.client.get(self.url.daily_heart_rate, params={"date": date_str})
        return HeartRate.model_validate(data or {})

    # Golf

    @wrap_errors("get_golf_summary")
    async def get_golf_summary(self) -> GolfSummary:
        data = await self.client.get(self.url.golf_scorecard_summary)
        if not data:
            raise GarminDataError("Invalid or empty golf summary data response.")
        return GolfSummary.model_validate(data)

    @wrap_errors("get_golf_scorecard")
    async def get_golf_scorecard(self, scorecard_id: int) -> GolfScorecard:
        _require(scorecard_id, "scorecardId")
        data = await self.client.get(self.url.golf_scorecard_detail, params={"scorecard-ids": scorecard_id})
        if not data:
            raise GarminDataError("Invalid or empty golf scorecard data response.")
        return GolfScorecard.model_validate(data)

    # Courses

    @wrap_errors("get_courses")
    async def get_courses(self) -> List[Course]:
        """Owned and favourite courses, each course listed once."""
        owned = CoursesForUser.model_validate(await self.client.get(self.url.course_owner) or {})
        favorites = _course_list_adapter.validate_python(await self.client.get(self.url.course_favorite) or [])

        return unique_by(owned.courses_for_user + favorites, key=lambda course: course.course_id)

    @wrap_errors("get_course")
    async def get_course(self, course_id: int) -> CourseDetail:
        _require(course_id, "courseId")
        data = await self.client.get(self.url.course(course_id))
        return CourseDetail.model_validate(data)

    @wrap_errors("create_course")
    async def create_course(self, course: Union[CourseDetail, Dict[str, Any]]) -> CourseDetail:
        """Create a copy of a course. Server-owned fields are dropped from the body."""
        _require(course, "course")
        payload = {
            key: value for key, value in CourseDetail.model_validate(course).to_payload().items()
            if key not in COURSE_SERVER_FIELDS
        }
        data = await self.client.post(self.url.course(), payload)
        return CourseDetail.model_validate(data)

    # Misc

    @wrap_errors("consent_grant")
    async def consent_grant(self) -> None:
        """Grant the upload consent Garmin requires before accepting activity files."""
        await self.client.post(
            self.url.consent_grant,
            {
                "consentTypeId": "DI_CONNECT_UPLOAD",
                "consentLocale": "en-US",
                "consentVersion": "59",
            },
        )

    async def get(self, url: str, **kwargs: Any) -> Any:
        """Authenticated GET against any Garmin Connect URL."""
        return await self.client.get(url, **kwargs)

    async def post(self, url: str, data: Any = None) -> Any:
        return await self.client.post(url, data)

    async def put(self, url: str, data: Any = None) -> Any:
        return await self.client.put(url, data)
