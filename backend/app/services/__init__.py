from .idea_service import create_idea, get_idea, list_ideas, to_record
from .lean_canvas_service import build_lean_canvas
from .mentor_insights import build_mentor_summary, find_blind_spots
from .scoring_engine import compute_scores
from .text_scorer import ScoringOptions, score_answer

__all__ = [
    "create_idea",
    "get_idea",
    "list_ideas",
    "to_record",
    "build_lean_canvas",
    "build_mentor_summary",
    "find_blind_spots",
    "compute_scores",
    "ScoringOptions",
    "score_answer",
]
