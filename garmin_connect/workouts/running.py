"""Single-step running workout builder."""

from typing import Any, Dict

from pydantic import BaseModel, Field

RUNNING_SPORT_TYPE = {"sportTypeId": 1, "sportTypeKey": "running"}


class RunningWorkout(BaseModel):
    """A running workout made of one interval that ends after a distance."""

    name: str = Field(default="", description="Workout name")
    distance: float = Field(default=0, description="Distance in meters")
    description: str = Field(default="", description="Workout description")

    def is_valid(self) -> bool:
        """Check that every field needed by Garmin is populated."""
        return bool(self.name) and self.distance > 0

    def to_payload(self) -> Dict[str, Any]:
        """Build the workout detail body for the workout service."""
        return {
            "sportType": dict(RUNNING_SPORT_TYPE),
            "workoutName": self.name,
            "description": self.description,
            "workoutSegments": [
                {
                    "segmentOrder": 1,
                    "sportType": dict(RUNNING_SPORT_TYPE),
                    "workoutSteps": [
                        {
                            "type": "ExecutableStepDTO",
                            "stepOrder": 1,
                            "stepType": {"stepTypeId": 3, "stepTypeKey": "interval"},
                            "endCondition": {"conditionTypeId": 3, "conditionTypeKey": "distance"},
                            "endConditionValue": self.distance,
                            "preferredEndConditionUnit": {"unitKey": "kilometer"},
                            "targetType": {"workoutTargetTypeId": 1, "workoutTargetTypeKey": "no.target"},
                        }
                    ],
                }
            ],
        }
