from pydantic import BaseModel, Field


class ScoreVector(BaseModel):
    """Six insight scores for one startup idea.

    Every field is clamped between 0 and 100 and computed independently
    from exactly one answer field. ``risk_uncertainty`` is an *awareness*
    score: a founder who articulates risks scores higher than one who
    stays silent.
    """

    problem_validation: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Clarity, urgency and realism of the problem statement",
    )
    market_maturity: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Clarity of the target customer segment and market",
    )
    competition: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Depth of the competitive analysis and alternatives awareness",
    )
    differentiation: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Strength of the solution's differentiation",
    )
    tech_feasibility: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Technical feasibility of the proposed stack",
    )
    risk_uncertainty: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Risk awareness (higher awareness = higher score)",
    )
