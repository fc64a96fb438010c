"""Workout builders."""

from .running import RunningWorkout

__all__ = ["RunningWorkout"]
