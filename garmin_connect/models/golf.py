"""Pydantic models for golf scorecards."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from garmin_connect.models.base import GarminModel


class GolfSummary(GarminModel):
    page_number: Optional[int] = None
    rows_per_page: Optional[int] = None
    total_rows: Optional[int] = None
    scorecard_summaries: List[Dict[str, Any]] = Field(default_factory=list)


class GolfScorecard(GarminModel):
    scorecard_details: List[Dict[str, Any]] = Field(default_factory=list)
