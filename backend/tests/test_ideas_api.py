"""Idea API tests: submission, persistence without provenance markers, listing, mentor summary."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import uuid

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.agents.idea_analysis import AiAnalyzer, AnalysisOrchestrator
from app.config import AiConfig
from app.database import Base, get_db
from app.main import app
from app.models.idea import Idea
from app.routes.ideas import get_orchestrator

# ---------------------------------------------------------------------------
# Test database setup
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite:///./test_ideas.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

HEURISTIC_CONFIG = AiConfig(api_key="")
AI_CONFIG = AiConfig(
    api_url="https://llm.test/v1/chat/completions",
    api_key="sk-test-secret",
    model="llama3-70b-8192",
)

AI_SCORES = {
    "problem_validation": 81,
    "market_maturity": 72,
    "competition": 64,
    "differentiation": 90,
    "tech_feasibility": 77,
    "risk_uncertainty": 58,
}


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def heuristic_orchestrator():
    return AnalysisOrchestrator(HEURISTIC_CONFIG)


def _ai_handler(request):
    body = json.loads(request.content)
    user_prompt = body["messages"][1]["content"]
    if "Lean Canvas" in user_prompt:
        content = {"problem": "AI problem", "unique_value_prop": "AI value"}
    else:
        content = AI_SCORES
    return httpx.Response(200, json={"choices": [{"message": {"content": json.dumps(content)}}]})


def ai_orchestrator():
    analyzer = AiAnalyzer(AI_CONFIG, transport=httpx.MockTransport(_ai_handler))
    return AnalysisOrchestrator(AI_CONFIG, analyzer=analyzer)


def failing_ai_orchestrator():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "down"}))
    return AnalysisOrchestrator(AI_CONFIG, analyzer=AiAnalyzer(AI_CONFIG, transport=transport))


client = TestClient(app)


@pytest.fixture(autouse=True)
def setup_db():
    """Create tables before each test, drop after."""
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_orchestrator] = heuristic_orchestrator
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.pop(get_db, None)
    app.dependency_overrides.pop(get_orchestrator, None)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _submit(answers=None, title="Invoice Chaser"):
    data = {
        "founder_name": "  Sam Founder ",
        "idea_title": title,
        "answers": answers if answers is not None else {
            "problem": "Freelancers lose hours chasing unpaid invoices which is slow and costly pain.",
            "target_customer": "Freelance designers and developers in the SMB segment",
            "existing_alternatives": "Spreadsheet reminders and manual email follow ups",
            "solution": "Automated reminders with unique escrow payment links",
            "revenue_model": "",
            "tech_stack_thoughts": "Python api with postgres on docker",
            "biggest_risks": "Adoption risk and churn",
        },
    }
    res = client.post("/ideas/", json=data)
    assert res.status_code == 201, f"Idea creation failed: {res.text}"
    return res.json()


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestSubmitIdea:
    def test_heuristic_submission(self):
        data = _submit()
        assert data["analysis_source"] == "heuristic"
        assert data["founder_name"] == "Sam Founder"
        assert set(data["scores"]) == {
            "problem_validation",
            "market_maturity",
            "competition",
            "differentiation",
            "tech_feasibility",
            "risk_uncertainty",
        }
        for value in data["scores"].values():
            assert 0 <= value <= 100
        # blank revenue model falls back to the default revenue streams text
        assert data["answers"]["revenue_model"] is None
        assert data["lean_canvas"]["revenue_streams"]
        assert data["lean_canvas"]["customer_segments"].startswith("Freelance designers")

    def test_empty_answers(self):
        data = _submit(answers={})
        assert data["scores"]["problem_validation"] == 0
        assert data["scores"]["risk_uncertainty"] == 10
        assert data["analysis_source"] == "heuristic"

    def test_ai_submission(self):
        app.dependency_overrides[get_orchestrator] = ai_orchestrator
        data = _submit()
        assert data["analysis_source"] == "ai"
        assert data["scores"]["differentiation"] == 90
        assert data["lean_canvas"]["unique_value_prop"] == "AI value"
        assert data["lean_canvas"]["channels"] == ""

    def test_ai_failure_is_transparent(self):
        app.dependency_overrides[get_orchestrator] = failing_ai_orchestrator
        data = _submit()
        assert data["analysis_source"] == "heuristic"

    def test_stored_payload_has_no_source_marker(self):
        app.dependency_overrides[get_orchestrator] = ai_orchestrator
        data = _submit()

        db = TestingSessionLocal()
        idea = db.query(Idea).filter(Idea.id == uuid.UUID(data["id"])).first()
        db.close()

        assert idea.analysis_source == "ai"
        scores = json.loads(idea.scores_json)
        canvas = json.loads(idea.lean_canvas_json)
        for payload in (scores, canvas):
            assert "source" not in payload
            assert "_source" not in payload

    def test_invalid_body(self):
        res = client.post("/ideas/", json={"answers": {"problem": 42}})
        assert res.status_code == 422

    def test_unknown_answer_key_is_rejected(self):
        res = client.post("/ideas/", json={"answers": {"targetCustomer": "Freelancers"}})
        assert res.status_code == 422


class TestGetIdeas:
    def test_list_is_oldest_first(self):
        first = _submit(title="First")
        second = _submit(title="Second")

        res = client.get("/ideas/")
        assert res.status_code == 200
        ids = [item["id"] for item in res.json()]
        assert ids == [first["id"], second["id"]]

    def test_get_by_id(self):
        created = _submit()
        res = client.get(f"/ideas/{created['id']}")
        assert res.status_code == 200
        assert res.json()["idea_title"] == "Invoice Chaser"
        assert res.json()["scores"] == created["scores"]

    def test_unknown_id(self):
        res = client.get(f"/ideas/{uuid.uuid4()}")
        assert res.status_code == 404


class TestMentorSummary:
    def test_empty(self):
        res = client.get("/ideas/mentor/summary")
        assert res.status_code == 200
        assert res.json()["total_ideas"] == 0

    def test_trend_across_submissions(self):
        _submit(answers={})
        _submit()
        res = client.get("/ideas/mentor/summary")
        assert res.status_code == 200
        data = res.json()
        assert data["total_ideas"] == 2
        assert data["improvement"] > 0
        assert len(data["trends"]) == 6


class TestAiEndpoints:
    def test_status_never_exposes_key(self):
        app.dependency_overrides[get_orchestrator] = ai_orchestrator
        res = client.get("/ideas/ai/status")
        assert res.status_code == 200
        data = res.json()
        assert data["available"] is True
        assert data["structured_output"] is True
        assert "sk-test-secret" not in res.text

    def test_status_unavailable(self):
        res = client.get("/ideas/ai/status")
        assert res.json()["available"] is False
        assert res.json()["credential_configured"] is False

    def test_ai_test_requires_configuration(self):
        res = client.post("/ideas/ai/test")
        assert res.status_code == 400
        assert res.json()["error"] == "AI is not available"
        assert "problem" in res.json()["test_answers"]

    def test_ai_test_runs_analysis(self):
        app.dependency_overrides[get_orchestrator] = ai_orchestrator
        res = client.post("/ideas/ai/test")
        assert res.status_code == 200
        assert res.json()["analysis_source"] == "ai"
        assert res.json()["message"] == "AI analysis completed successfully!"

    def test_ai_test_reports_fallback(self):
        app.dependency_overrides[get_orchestrator] = failing_ai_orchestrator
        res = client.post("/ideas/ai/test")
        assert res.status_code == 200
        assert res.json()["analysis_source"] == "heuristic"
        assert "fallback" in res.json()["message"]


class TestHealth:
    def test_health(self):
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json()["status"] == "healthy"
