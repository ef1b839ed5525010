from typing import List, Optional

from pydantic import BaseModel, Field


class BlindSpot(BaseModel):
    """A dimension whose latest score is under the blind-spot threshold."""

    dimension: str
    label: str
    score: float


class DimensionTrend(BaseModel):
    """First vs. latest score for one dimension."""

    dimension: str
    label: str
    first: float
    last: float
    diff: float


class MentorSummary(BaseModel):
    """Aggregated view of a founder's submissions over time."""

    total_ideas: int = Field(..., ge=0)
    first_average: Optional[float] = None
    last_average: Optional[float] = None
    improvement: Optional[float] = Field(
        default=None,
        description="last_average - first_average; only set with 2+ ideas",
    )
    trends: List[DimensionTrend] = Field(default_factory=list)
    blind_spots: List[BlindSpot] = Field(default_factory=list)
    message: str
