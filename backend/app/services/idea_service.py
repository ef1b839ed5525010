import json
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from ..models.idea import Idea
from ..schemas.analysis_schema import AnalysisResult
from ..schemas.idea_schema import Answers, IdeaCreate, IdeaRecord
from ..schemas.lean_canvas_schema import LeanCanvas
from ..schemas.score_schema import ScoreVector


def create_idea(db: Session, payload: IdeaCreate, analysis: AnalysisResult) -> Idea:
    """Persist a submitted idea together with its analysis.

    Scores and canvas are stored without provenance; the source lives
    only on the record's ``analysis_source`` column.
    """
    scores, lean_canvas = analysis.payload()
    idea = Idea(
        founder_name=payload.founder_name,
        idea_title=payload.idea_title,
        answers_json=json.dumps(payload.answers.model_dump()),
        scores_json=json.dumps(scores),
        lean_canvas_json=json.dumps(lean_canvas),
        analysis_source=analysis.source,
    )
    db.add(idea)
    db.commit()
    db.refresh(idea)
    return idea


def list_ideas(db: Session) -> List[Idea]:
    """All ideas, oldest first."""
    return db.query(Idea).order_by(Idea.created_at.asc()).all()


def get_idea(db: Session, idea_id: UUID) -> Optional[Idea]:
    return db.query(Idea).filter(Idea.id == idea_id).first()


def to_record(idea: Idea) -> IdeaRecord:
    """Convert an Idea ORM instance to an IdeaRecord response."""
    return IdeaRecord(
        id=idea.id,
        founder_name=idea.founder_name,
        idea_title=idea.idea_title,
        answers=Answers(**json.loads(idea.answers_json or "{}")),
        scores=ScoreVector(**json.loads(idea.scores_json)),
        lean_canvas=LeanCanvas(**json.loads(idea.lean_canvas_json or "{}")),
        analysis_source=idea.analysis_source or "heuristic",
        created_at=idea.created_at,
        updated_at=idea.updated_at,
    )
