# Schemas package
from .analysis_schema import AiStatusResponse, AnalysisResult
from .idea_schema import Answers, IdeaCreate, IdeaRecord
from .lean_canvas_schema import LeanCanvas
from .mentor_schema import BlindSpot, DimensionTrend, MentorSummary
from .score_schema import ScoreVector

__all__ = [
    "Answers",
    "IdeaCreate",
    "IdeaRecord",
    "ScoreVector",
    "LeanCanvas",
    "AnalysisResult",
    "AiStatusResponse",
    "BlindSpot",
    "DimensionTrend",
    "MentorSummary",
]
