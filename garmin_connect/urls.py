"""Garmin Connect endpoint table."""

from typing import Optional, Union

from garmin_connect.config import GarminDomain

OAUTH_CONSUMER_URL = "https://thegarth.s3.amazonaws.com/oauth_consumer.json"


class GarminUrls:
    """Endpoint paths for one Garmin Connect domain.

    Static endpoints are properties. Endpoints that take an identifier are
    methods returning the full URL.
    """

    def __init__(self, domain: GarminDomain = "garmin.com"):
        self.domain = domain
        self.gc_modern = f"https://connect.{domain}/modern"
        self.garmin_sso_origin = f"https://sso.{domain}"
        self.gc_api = f"https://connectapi.{domain}"

    # SSO and OAuth
    @property
    def garmin_sso(self) -> str:
        return f"{self.garmin_sso_origin}/sso"

    @property
    def garmin_sso_embed(self) -> str:
        return f"{self.garmin_sso_origin}/sso/embed"

    @property
    def signin_url(self) -> str:
        return f"{self.garmin_sso}/signin"

    @property
    def oauth_url(self) -> str:
        return f"{self.gc_api}/oauth-service/oauth"

    @property
    def oauth_preauthorized(self) -> str:
        return f"{self.oauth_url}/preauthorized"

    @property
    def oauth_exchange(self) -> str:
        return f"{self.oauth_url}/exchange/user/2.0"

    # User
    @property
    def user_settings(self) -> str:
        return f"{self.gc_api}/userprofile-service/userprofile/user-settings/"

    @property
    def user_profile(self) -> str:
        return f"{self.gc_api}/userprofile-service/socialProfile"

    # Activities
    @property
    def activities(self) -> str:
        return f"{self.gc_api}/activitylist-service/activities/search/activities"

    @property
    def activity(self) -> str:
        return f"{self.gc_api}/activity-service/activity/"

    @property
    def stat_activities(self) -> str:
        return f"{self.gc_api}/fitnessstats-service/activity"

    @property
    def download_zip(self) -> str:
        return f"{self.gc_api}/download-service/files/activity/"

    @property
    def download_gpx(self) -> str:
        return f"{self.gc_api}/download-service/export/gpx/activity/"

    @property
    def download_tcx(self) -> str:
        return f"{self.gc_api}/download-service/export/tcx/activity/"

    @property
    def download_kml(self) -> str:
        return f"{self.gc_api}/download-service/export/kml/activity/"

    @property
    def download_wellness(self) -> str:
        return f"{self.gc_api}/download-service/files/wellness/"

    @property
    def upload(self) -> str:
        return f"{self.gc_api}/upload-service/upload"

    # Workouts and calendar
    @property
    def workouts(self) -> str:
        return f"{self.gc_api}/workout-service/workouts"

    def workout(self, workout_id: Optional[Union[int, str]] = None) -> str:
        if workout_id:
            return f"{self.gc_api}/workout-service/workout/{workout_id}"
        return f"{self.gc_api}/workout-service/workout"

    @property
    def schedule_workouts(self) -> str:
        return f"{self.gc_api}/workout-service/schedule/"

    def calendar(self, year: int, month: int) -> str:
        # Garmin counts months from 0
        return f"{self.gc_api}/calendar-service/year/{year}/month/{month}"

    # Wellness
    @property
    def daily_steps(self) -> str:
        return f"{self.gc_api}/usersummary-service/stats/steps/daily/"

    @property
    def daily_sleep(self) -> str:
        return f"{self.gc_api}/sleep-service/sleep/dailySleepData"

    @property
    def daily_weight(self) -> str:
        return f"{self.gc_api}/weight-service/weight/dayview"

    @property
    def update_weight(self) -> str:
        return f"{self.gc_api}/weight-service/user-weight"

    @property
    def daily_hydration(self) -> str:
        return f"{self.gc_api}/usersummary-service/usersummary/hydration/allData"

    @property
    def hydration_log(self) -> str:
        return f"{self.gc_api}/usersummary-service/usersummary/hydration/log"

    @property
    def daily_heart_rate(self) -> str:
        return f"{self.gc_api}/wellness-service/wellness/dailyHeartRate"

    # Golf
    @property
    def golf_scorecard_summary(self) -> str:
        return f"{self.gc_api}/gcs-golfcommunity/api/v2/scorecard/summary"

    @property
    def golf_scorecard_detail(self) -> str:
        return f"{self.gc_api}/gcs-golfcommunity/api/v2/scorecard/detail"

    # Courses
    def course(self, course_id: Optional[Union[int, str]] = None) -> str:
        if course_id:
            return f"{self.gc_api}/course-service/course/{course_id}"
        return f"{self.gc_api}/course-service/course"

    @property
    def course_owner(self) -> str:
        return f"{self.gc_api}/web-gateway/course/owner/"

    @property
    def course_favorite(self) -> str:
        return f"{self.gc_api}/course-service/course/favorites"

    # Consent
    @property
    def consent_grant(self) -> str:
        return f"{self.gc_api}/consent-service/consent/grant"
