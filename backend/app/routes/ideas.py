"""Idea routes: submit, list and retrieve analyzed ideas.

Endpoints:
  POST /ideas/                : Analyze and store a new idea
  GET  /ideas/                : List ideas, oldest first
  GET  /ideas/mentor/summary  : Score trends and blind spots for mentors
  GET  /ideas/ai/status       : AI availability probe
  POST /ideas/ai/test         : Run the analysis on a sample idea
  GET  /ideas/{idea_id}       : Get a single idea
"""

from __future__ import annotations

import json
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..agents.idea_analysis import AnalysisOrchestrator
from ..config import get_ai_config
from ..database import get_db
from ..schemas.analysis_schema import AiStatusResponse
from ..schemas.idea_schema import Answers, IdeaCreate, IdeaRecord
from ..schemas.mentor_schema import MentorSummary
from ..services.idea_service import create_idea, get_idea, list_ideas, to_record
from ..services.mentor_insights import build_mentor_summary

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/ideas",
    tags=["Ideas"],
)

SAMPLE_ANSWERS = Answers(
    problem=(
        "Accounting and financial management is complex and time-consuming for small "
        "businesses. Manual bookkeeping carries a high risk of errors and existing "
        "software is expensive for small teams."
    ),
    target_customer=(
        "Small and medium-sized businesses (SMB), especially companies with 5-50 "
        "employees, freelancers and consultants."
    ),
    existing_alternatives=(
        "Existing alternatives include international platforms like QuickBooks, Xero "
        "and Sage. Local competitors exist but are usually expensive and complex."
    ),
    solution=(
        "An AI-powered, cloud-based accounting platform with automated invoice "
        "processing, smart categorization, real-time reporting and compliance with "
        "local accounting standards."
    ),
    revenue_model=(
        "Monthly subscription (SaaS): Basic plan, Pro plan and custom Enterprise "
        "pricing, plus integration and consulting services."
    ),
    tech_stack_thoughts=(
        "Backend: Python + FastAPI + Postgres. Frontend: React. AI: an LLM API. "
        "Cloud: AWS or Azure. Scalable microservices architecture on Docker."
    ),
    biggest_risks=(
        "Competition, customer acquisition cost, data security and compliance "
        "requirements, and the need to adapt quickly to regulatory changes."
    ),
)


def get_orchestrator() -> AnalysisOrchestrator:
    """Dependency: orchestrator bound to the process-wide AI config."""
    return AnalysisOrchestrator(get_ai_config())


# ── Routes ───────────────────────────────────────────────────────────────

@router.post(
    "/",
    response_model=IdeaRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a Startup Idea",
    response_description="The stored idea with scores and Lean Canvas",
)
async def submit_idea(
    payload: IdeaCreate,
    db: Session = Depends(get_db),
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
) -> IdeaRecord:
    """Analyze the answers (AI with heuristic fallback) and store the idea."""
    logger.info("Creating new idea: %s", payload.idea_title)

    analysis = await orchestrator.analyze(payload.answers)
    logger.info("Analysis completed. Source: %s", analysis.source)

    try:
        idea = create_idea(db, payload, analysis)
    except Exception as exc:
        logger.exception("Failed to store idea")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to store idea: {exc}",
        ) from exc

    logger.info("Idea saved with ID %s (source=%s)", idea.id, idea.analysis_source)
    return to_record(idea)


@router.get(
    "/",
    response_model=List[IdeaRecord],
    summary="List Ideas",
)
def get_ideas(db: Session = Depends(get_db)) -> List[IdeaRecord]:
    """All ideas sorted by creation time, oldest first."""
    return [to_record(idea) for idea in list_ideas(db)]


@router.get(
    "/mentor/summary",
    response_model=MentorSummary,
    summary="Mentor Summary",
    response_description="Score trend between first and latest idea, plus blind spots",
)
def get_mentor_summary(db: Session = Depends(get_db)) -> MentorSummary:
    """Aggregate every stored idea's scores for the mentor dashboard."""
    history = [json.loads(idea.scores_json or "{}") for idea in list_ideas(db)]
    return build_mentor_summary(history)


@router.get(
    "/ai/status",
    response_model=AiStatusResponse,
    summary="AI Availability",
)
def get_ai_status(
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
) -> AiStatusResponse:
    """Report whether the AI path would be attempted. Never exposes the key."""
    config = orchestrator.config
    return AiStatusResponse(
        available=orchestrator.is_available(),
        enabled=config.enabled,
        endpoint_configured=bool(config.api_url),
        credential_configured=bool(config.api_key),
        model=config.model,
        structured_output=config.capabilities.supports_structured_output,
    )


@router.post(
    "/ai/test",
    summary="Test AI Analysis",
    response_description="Analysis of a fixed sample idea",
)
async def test_ai_analysis(
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
):
    """Run the orchestrator on a sample idea without storing anything."""
    sample = SAMPLE_ANSWERS.model_dump()

    if not orchestrator.is_available():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "AI is not available",
                "message": "Please set AI_API_URL and AI_API_KEY environment variables",
                "test_answers": sample,
            },
        )

    result = await orchestrator.analyze(SAMPLE_ANSWERS)
    return {
        "success": True,
        "ai_available": True,
        "analysis_source": result.source,
        "scores": result.scores.model_dump(),
        "lean_canvas": result.lean_canvas.model_dump(),
        "test_answers": sample,
        "message": (
            "AI analysis completed successfully!"
            if result.source == "ai"
            else "AI analysis failed, used heuristic fallback"
        ),
    }


@router.get(
    "/{idea_id}",
    response_model=IdeaRecord,
    summary="Get Idea",
)
def get_idea_by_id(idea_id: UUID, db: Session = Depends(get_db)) -> IdeaRecord:
    idea = get_idea(db, idea_id)
    if idea is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Idea not found",
        )
    return to_record(idea)
