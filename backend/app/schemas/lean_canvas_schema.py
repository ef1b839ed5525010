from pydantic import BaseModel, Field


class LeanCanvas(BaseModel):
    """Nine-field Lean Canvas. Every field is free text and may be empty."""

    problem: str = ""
    solution: str = ""
    unique_value_prop: str = Field(default="", description="Single-sentence value proposition")
    customer_segments: str = ""
    channels: str = ""
    revenue_streams: str = ""
    cost_structure: str = ""
    key_metrics: str = ""
    unfair_advantage: str = ""
