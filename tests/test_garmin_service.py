"""Tests for the GarminConnect service."""

from datetime import date, datetime, timezone

import pytest

from garmin_connect.config import GarminConfig
from garmin_connect.exceptions import (
    GarminAPIError,
    GarminCredentialsError,
    GarminDataError,
    GarminInvalidFormatError,
    GarminPreconditionError,
)
from garmin_connect.models.workout import BuiltWorkout, RawWorkout, WorkoutDetail
from garmin_connect.services.garmin_service import GarminConnect, unique_by
from garmin_connect.workouts.running import RunningWorkout

T0 = 1_700_000_000_000


def test_missing_credentials_fail_on_construction():
    """Test that an empty username or password is rejected."""
    with pytest.raises(GarminCredentialsError, match="Missing credentials"):
        GarminConnect(GarminConfig(_env_file=None, username="", password="secret"))
    with pytest.raises(GarminCredentialsError):
        GarminConnect(GarminConfig(_env_file=None, username="me", password=""))


def test_domain_override(fake_client):
    gc = GarminConnect(GarminConfig(_env_file=None, username="a", password="b", domain="garmin.cn"), client=fake_client)
    assert gc.domain == "garmin.cn"
    assert gc.url.gc_api == "https://connectapi.garmin.cn"


@pytest.mark.asyncio
async def test_login_updates_credentials(gc, fake_client):
    result = await gc.login("other@example.com", "pw2")
    assert result is gc
    assert fake_client.calls == [("LOGIN", "other@example.com", "pw2")]
    assert gc.config.username == "other@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize("call", [
    lambda gc: gc.get_activity(None),
    lambda gc: gc.get_activity(0),
    lambda gc: gc.delete_activity(""),
    lambda gc: gc.download_original_activity_data(None, "never-created"),
    lambda gc: gc.get_workout_detail(""),
    lambda gc: gc.delete_workout(None),
    lambda gc: gc.schedule_workout(""),
    lambda gc: gc.get_course(0),
    lambda gc: gc.create_course({}),
    lambda gc: gc.get_golf_scorecard(None),
    lambda gc: gc.add_workout({}),
])
async def test_missing_identifier_fails_before_network(gc, fake_client, call):
    """Test that a falsy identifier is rejected without touching the client."""
    with pytest.raises(GarminPreconditionError, match="Missing"):
        await call(gc)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_get_activities_passes_query_parameters(gc, fake_client):
    fake_client.responses[gc.url.activities] = [
        {"activityId": 11, "activityName": "Morning Run", "activityType": {"typeKey": "running"}},
        {"activityId": 12, "activityName": "Ride"},
    ]

    activities = await gc.get_activities(0, 2, "running")

    assert [a.activity_id for a in activities] == [11, 12]
    assert activities[0].activity_type.type_key == "running"
    method, url, kwargs = fake_client.calls[0]
    assert kwargs["params"] == {"start": 0, "limit": 2, "activityType": "running", "subActivityType": None}


@pytest.mark.asyncio
async def test_get_activity(gc, fake_client):
    fake_client.responses[f"{gc.url.activity}42"] = {"activityId": 42, "averageHR": 151}
    activity = await gc.get_activity(42)
    assert activity.activity_id == 42
    assert activity.average_hr == 151


@pytest.mark.asyncio
async def test_count_activities_uses_lifetime_aggregation(gc, fake_client):
    fake_client.responses[gc.url.stat_activities] = [{"date": "1970-01-01", "countOfActivities": 321}]

    stats = await gc.count_activities()

    assert stats[0].count_of_activities == 321
    params = fake_client.calls[0][2]["params"]
    assert params["aggregation"] == "lifetime"
    assert params["startDate"] == "1970-01-01"
    assert params["endDate"] == date.today().strftime("%Y-%m-%d")


@pytest.mark.asyncio
async def test_upstream_error_is_wrapped_with_operation_name(gc, fake_client):
    fake_client.responses[gc.url.user_settings] = GarminAPIError("API request failed: 500 - boom", status_code=500)

    with pytest.raises(GarminAPIError, match="Error in get_user_settings: API request failed: 500") as exc_info:
        await gc.get_user_settings()
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_calendar_month_is_zero_based(gc, fake_client):
    """Test that month 0 is passed through as January, not shifted."""
    fake_client.responses[gc.url.calendar(2024, 0)] = {"year": 2024, "month": 0, "calendarItems": []}

    calendar = await gc.get_calendar(2024, 0)

    assert fake_client.calls[0][1].endswith("/calendar-service/year/2024/month/0")
    assert calendar.month == 0


@pytest.mark.asyncio
async def test_get_steps_picks_matching_day(gc, fake_client):
    day = date(2024, 3, 5)
    fake_client.responses[f"{gc.url.daily_steps}2024-03-05/2024-03-05"] = [
        {"calendarDate": "2024-03-04", "totalSteps": 1},
        {"calendarDate": "2024-03-05", "totalSteps": 12345},
    ]
    assert await gc.get_steps(day) == 12345


@pytest.mark.asyncio
async def test_get_steps_without_matching_day(gc, fake_client):
    fake_client.responses[f"{gc.url.daily_steps}2024-03-05/2024-03-05"] = []
    with pytest.raises(GarminDataError, match="Can't find daily steps"):
        await gc.get_steps(date(2024, 3, 5))


@pytest.mark.asyncio
async def test_heart_rate_for_day(gc, fake_client):
    fake_client.responses[gc.url.daily_heart_rate] = {
        "calendarDate": "2024-03-05",
        "restingHeartRate": 52,
        "userProfilePK": 42,
    }
    heart_rate = await gc.get_heart_rate(date(2024, 3, 5))

    assert heart_rate.resting_heart_rate == 52
    assert heart_rate.user_profile_pk == 42
    method, url, kwargs = fake_client.calls[-1]
    assert kwargs["params"] == {"date": "2024-03-05"}


@pytest.mark.asyncio
async def test_sleep_duration(gc, fake_client):
    """Test that 8h30m of sleep in epoch milliseconds gives 8 hours 30 minutes."""
    fake_client.responses[gc.url.daily_sleep] = {
        "dailySleepDTO": {
            "sleepStartTimestampGMT": T0,
            "sleepEndTimestampGMT": T0 + (8 * 60 + 30) * 60 * 1000,
        }
    }

    duration = await gc.get_sleep_duration(date(2024, 1, 1))

    assert (duration.hours, duration.minutes) == (8, 30)
    assert fake_client.calls[0][2]["params"] == {"date": "2024-01-01"}


@pytest.mark.asyncio
async def test_sleep_duration_missing_timestamps(gc, fake_client):
    fake_client.responses[gc.url.daily_sleep] = {"dailySleepDTO": {"calendarDate": "2024-01-01"}}
    with pytest.raises(GarminDataError, match="Invalid or missing sleep data"):
        await gc.get_sleep_duration(date(2024, 1, 1))


@pytest.mark.asyncio
async def test_empty_sleep_response(gc, fake_client):
    with pytest.raises(GarminDataError, match="Error in get_sleep_data: Invalid or empty sleep data response"):
        await gc.get_sleep_data(date(2024, 1, 1))


@pytest.mark.asyncio
async def test_daily_weight_in_pounds(gc, fake_client):
    fake_client.responses[f"{gc.url.daily_weight}/2024-02-01"] = {"totalAverage": {"weight": 72574.7792}}

    pounds = await gc.get_daily_weight_in_pounds(date(2024, 2, 1))

    assert pounds == pytest.approx(160.0, abs=1e-6)


@pytest.mark.asyncio
async def test_daily_weight_without_average(gc, fake_client):
    fake_client.responses[f"{gc.url.daily_weight}/2024-02-01"] = {"startDate": "2024-02-01", "totalAverage": None}
    with pytest.raises(GarminDataError, match="Can't find valid daily weight"):
        await gc.get_daily_weight_in_pounds(date(2024, 2, 1))


@pytest.mark.asyncio
async def test_daily_hydration_in_ounces(gc, fake_client):
    fake_client.responses[f"{gc.url.daily_hydration}/2024-02-01"] = {"valueInML": 29.5735295625 * 16}
    assert await gc.get_daily_hydration(date(2024, 2, 1)) == pytest.approx(16.0, abs=1e-6)


@pytest.mark.asyncio
async def test_update_weight_body(gc, fake_client):
    when = datetime(2024, 6, 1, 6, 30, tzinfo=timezone.utc)

    await gc.update_weight(165.5, "Europe/Paris", when)

    method, url, kwargs = fake_client.calls[0]
    assert (method, url) == ("POST", gc.url.update_weight)
    assert kwargs["data"] == {
        "dateTimestamp": "2024-06-01T08:30:00.000",
        "gmtTimestamp": "2024-06-01T06:30:00.000",
        "unitKey": "lbs",
        "value": 165.5,
    }


@pytest.mark.asyncio
async def test_update_hydration_log_uses_profile_id(gc, fake_client):
    fake_client.responses[gc.url.user_profile] = {"profileId": 987, "displayName": "runner"}
    fake_client.responses[gc.url.hydration_log] = {"calendarDate": "2024-06-01", "valueInML": 236.588}
    when = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    intake = await gc.update_hydration_log_ounces(8, when)

    assert intake.value_in_ml == 236.588
    method, url, kwargs = fake_client.calls[1]
    assert method == "PUT"
    assert kwargs["data"]["userProfileId"] == 987
    assert kwargs["data"]["calendarDate"] == "2024-06-01"
    assert kwargs["data"]["valueInML"] == pytest.approx(236.588236, abs=1e-6)


@pytest.mark.asyncio
async def test_update_weight_rejects_unknown_timezone(gc, fake_client):
    with pytest.raises(GarminPreconditionError, match="Invalid timezone: Not/AZone"):
        await gc.update_weight(150, "Not/AZone", datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_update_hydration_log_defaults_to_local_day(gc, fake_client):
    fake_client.responses[gc.url.user_profile] = {"profileId": 987}

    await gc.update_hydration_log_ounces(8)

    data = fake_client.calls[1][2]["data"]
    assert data["calendarDate"] == datetime.now().astimezone().strftime("%Y-%m-%d")


@pytest.mark.asyncio
async def test_golf_scorecard_params(gc, fake_client):
    fake_client.responses[gc.url.golf_scorecard_detail] = {"scorecardDetails": [{"scorecard": {"id": 5}}]}
    scorecard = await gc.get_golf_scorecard(5)
    assert scorecard.scorecard_details[0]["scorecard"]["id"] == 5
    assert fake_client.calls[0][2]["params"] == {"scorecard-ids": 5}


@pytest.mark.asyncio
async def test_empty_golf_summary(gc, fake_client):
    with pytest.raises(GarminDataError, match="Error in get_golf_summary"):
        await gc.get_golf_summary()


# Courses

def test_unique_by_keeps_first_occurrence_and_order():
    items = [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}, {"id": 1, "v": "c"}, {"id": 3, "v": "d"}]
    assert unique_by(items, key=lambda item: item["id"]) == [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}, {"id": 3, "v": "d"}]


@pytest.mark.asyncio
async def test_get_courses_merges_and_deduplicates(gc, fake_client):
    fake_client.responses[gc.url.course_owner] = {
        "coursesForUser": [
            {"courseId": 1, "courseName": "River loop"},
            {"courseId": 2, "courseName": "Hill repeats"},
        ]
    }
    fake_client.responses[gc.url.course_favorite] = [
        {"courseId": 2, "courseName": "Hill repeats (favourite copy)"},
        {"courseId": 3, "courseName": "Track"},
    ]

    courses = await gc.get_courses()

    assert [c.course_id for c in courses] == [1, 2, 3]
    assert courses[1].course_name == "Hill repeats"


@pytest.mark.asyncio
async def test_get_courses_with_unexpected_owner_shape(gc, fake_client):
    """Test that a list where an object is expected is reported as a data error."""
    fake_client.responses[gc.url.course_owner] = [{"courseId": 1}]

    with pytest.raises(GarminDataError, match="Error in get_courses"):
        await gc.get_courses()


@pytest.mark.asyncio
async def test_create_course_strips_server_fields(gc, fake_client):
    fake_client.responses[gc.url.course()] = {"courseId": 77, "courseName": "Loop"}
    course = {
        "courseId": 5,
        "courseName": "Loop",
        "userProfilePk": 9,
        "favorite": True,
        "activityTypePk": 1,
        "geoPoints": [{"latitude": 48.1, "longitude": 11.5}],
    }

    created = await gc.create_course(course)

    assert created.course_id == 77
    payload = fake_client.calls[0][2]["data"]
    assert payload == {
        "courseName": "Loop",
        "activityTypePk": 1,
        "geoPoints": [{"latitude": 48.1, "longitude": 11.5}],
    }


# Workouts

@pytest.mark.asyncio
async def test_add_built_running_workout(gc, fake_client):
    fake_client.responses[gc.url.workout()] = {"workoutId": 1001, "workoutName": "5k"}

    detail = await gc.add_running_workout("5k", 5000, "")

    assert detail.workout_id == 1001
    method, url, kwargs = fake_client.calls[0]
    assert (method, url) == ("POST", gc.url.workout())
    assert kwargs["data"]["workoutName"] == "5k"
    assert kwargs["data"]["description"] == "Added by garmin-connect for Python"
    step = kwargs["data"]["workoutSegments"][0]["workoutSteps"][0]
    assert step["endConditionValue"] == 5000


@pytest.mark.asyncio
async def test_invalid_built_workout_is_rejected(gc, fake_client):
    with pytest.raises(GarminPreconditionError, match="Missing workoutSegments"):
        await gc.add_workout(BuiltWorkout(workout=RunningWorkout(name="", distance=5000)))
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_raw_workout_without_segments_is_rejected(gc, fake_client):
    with pytest.raises(GarminPreconditionError, match="Missing workoutSegments"):
        await gc.add_workout(RawWorkout(detail=WorkoutDetail(workout_name="Intervals")))
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_raw_workout_strips_server_fields(gc, fake_client):
    fake_client.responses[gc.url.workout()] = {"workoutId": 2002}
    submission = {
        "kind": "raw",
        "detail": {
            "workoutId": 55,
            "ownerId": 9,
            "author": {"displayName": "coach"},
            "workoutName": "Intervals",
            "description": "6x800",
            "sportType": {"sportTypeId": 1, "sportTypeKey": "running"},
            "workoutSegments": [{"segmentOrder": 1, "workoutSteps": [{"stepOrder": 1}]}],
        },
    }

    await gc.add_workout(submission)

    payload = fake_client.calls[0][2]["data"]
    assert "workoutId" not in payload
    assert "ownerId" not in payload
    assert "author" not in payload
    assert payload["workoutName"] == "Intervals"
    assert payload["description"] == "6x800"
    assert payload["workoutSegments"][0]["workoutSteps"] == [{"stepOrder": 1}]


@pytest.mark.asyncio
async def test_schedule_workout(gc, fake_client):
    fake_client.responses[f"{gc.url.schedule_workouts}55"] = {"workoutScheduleId": 3, "calendarDate": "2024-05-01"}

    scheduled = await gc.schedule_workout(55, date(2024, 5, 1))

    assert scheduled.workout_schedule_id == 3
    assert fake_client.calls[0][2]["data"] == {"date": "2024-05-01"}


# Files

@pytest.mark.asyncio
async def test_upload_rejects_unknown_format(gc, fake_client, tmp_path):
    activity_file = tmp_path / "run.exe"
    activity_file.write_bytes(b"MZ")

    with pytest.raises(GarminInvalidFormatError, match="Invalid format: exe"):
        await gc.upload_activity(str(activity_file), "exe")
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_upload_fit_file(gc, fake_client, tmp_path):
    activity_file = tmp_path / "run.fit"
    activity_file.write_bytes(b"\x0e\x10FIT")
    fake_client.responses[f"{gc.url.upload}/.fit"] = {"detailedImportResult": {"uploadId": 1}}

    result = await gc.upload_activity(str(activity_file), "fit")

    assert result == {"detailedImportResult": {"uploadId": 1}}
    method, url, kwargs = fake_client.calls[0]
    assert url.endswith("/upload-service/upload/.fit")
    assert kwargs["files"] == {"userfile": ("run.fit", b"\x0e\x10FIT")}


@pytest.mark.asyncio
async def test_upload_detects_format_from_extension(gc, fake_client, tmp_path):
    activity_file = tmp_path / "ride.GPX"
    activity_file.write_bytes(b"<gpx/>")

    await gc.upload_activity(activity_file, None)

    assert fake_client.calls[0][1].endswith("/upload/.gpx")


@pytest.mark.asyncio
async def test_download_activity_creates_directory(gc, fake_client, tmp_path):
    target = tmp_path / "exports" / "gpx"
    fake_client.responses[f"{gc.url.download_gpx}123"] = b"<gpx></gpx>"

    path = await gc.download_original_activity_data(123, target, "gpx")

    assert path == str(target / "123.gpx")
    assert (target / "123.gpx").read_bytes() == b"<gpx></gpx>"
    assert fake_client.calls[0][2]["binary"] is True


@pytest.mark.asyncio
async def test_download_rejects_unknown_type(gc, fake_client, tmp_path):
    with pytest.raises(GarminInvalidFormatError, match="Invalid type: pdf"):
        await gc.download_original_activity_data(123, tmp_path, "pdf")
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_download_wellness_data(gc, fake_client, tmp_path):
    fake_client.responses[f"{gc.url.download_wellness}2024-01-02"] = b"PK\x03\x04"

    path = await gc.download_wellness_data(date(2024, 1, 2), tmp_path / "wellness")

    assert (tmp_path / "wellness" / "2024-01-02.zip").read_bytes() == b"PK\x03\x04"
    assert path.endswith("2024-01-02.zip")


@pytest.mark.asyncio
async def test_consent_grant(gc, fake_client):
    await gc.consent_grant()
    method, url, kwargs = fake_client.calls[0]
    assert (method, url) == ("POST", gc.url.consent_grant)
    assert kwargs["data"]["consentTypeId"] == "DI_CONNECT_UPLOAD"
