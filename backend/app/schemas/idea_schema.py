from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .analysis_schema import AnalysisSource
from .lean_canvas_schema import LeanCanvas
from .score_schema import ScoreVector


class Answers(BaseModel):
    """Founder's free-text answers to the seven intake questions.

    Every field is optional; a missing or blank answer means
    "no information provided" and is normalised to ``None``.
    """

    problem: Optional[str] = None
    target_customer: Optional[str] = None
    existing_alternatives: Optional[str] = None
    solution: Optional[str] = None
    revenue_model: Optional[str] = None
    tech_stack_thoughts: Optional[str] = None
    biggest_risks: Optional[str] = None

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class IdeaCreate(BaseModel):
    """Request body for submitting a new idea."""

    founder_name: Optional[str] = Field(default=None, max_length=255)
    idea_title: Optional[str] = Field(default=None, max_length=255)
    answers: Answers = Field(default_factory=Answers)

    @field_validator("founder_name", "idea_title")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip()


class IdeaRecord(BaseModel):
    """A stored idea with its analysis."""

    id: UUID
    founder_name: Optional[str] = None
    idea_title: Optional[str] = None
    answers: Answers
    scores: ScoreVector
    lean_canvas: LeanCanvas
    analysis_source: AnalysisSource
    created_at: datetime
    updated_at: Optional[datetime] = None
