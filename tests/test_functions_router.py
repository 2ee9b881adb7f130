from datetime import datetime, timezone
from types import SimpleNamespace

import talenthub.routers.functions as functions_mod
from talenthub.core.errors import NotFoundError, UnauthorizedError, UpstreamFailureError
from talenthub.dependencies import get_sender
from talenthub.main import app
from talenthub.services.notifications import LoggingNotificationSender


def test_ai_analysis_returns_success_payload(recruiter_client, monkeypatch):
    seen = {}

    def _run(db, job_id, applicant_id, recruiter_id=None):
        seen.update(job_id=job_id, applicant_id=applicant_id, recruiter_id=recruiter_id)
        return {
            "match_score": 85,
            "analysis": "Candidate shows 85% compatibility with the role. Strong match based on skills and experience.",
            "criteria": {"skills_match": 50, "experience_match": 100, "requirements_match": 50, "overall_fit": 85},
            "skill_improvements": ["Node.js"],
            "assessment_questions": {"work_ethics": [], "technical": []},
        }

    monkeypatch.setattr(functions_mod, "run_match_analysis", _run)
    resp = recruiter_client.post(
        "/functions/ai-analysis",
        json={"applicationId": "app-1", "jobId": "job-1", "applicantId": "appl-1"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["match_score"] == 85
    assert seen == {"job_id": "job-1", "applicant_id": "appl-1", "recruiter_id": "recruiter-1"}


def test_ai_analysis_unknown_job_maps_to_404(recruiter_client, monkeypatch):
    def _missing(*args, **kwargs):
        raise NotFoundError("Job not found")

    monkeypatch.setattr(functions_mod, "run_match_analysis", _missing)
    resp = recruiter_client.post("/functions/ai-analysis", json={"jobId": "nope", "applicantId": "appl-1"})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Job not found"}


def test_ai_analysis_requires_job_and_applicant(recruiter_client):
    resp = recruiter_client.post("/functions/ai-analysis", json={"applicantId": "appl-1"})
    assert resp.status_code == 422
    assert resp.json() == {"success": False, "error": "jobId: Field required"}


def test_generate_assessment_without_application_id(recruiter_client):
    resp = recruiter_client.post("/functions/generate-assessment", json={})
    assert resp.status_code == 422
    data = resp.json()
    assert data["success"] is False
    assert data["error"].startswith("applicationId")


def test_ai_analysis_is_recruiter_only(applicant_client):
    resp = applicant_client.post("/functions/ai-analysis", json={"jobId": "job-1", "applicantId": "appl-1"})
    assert resp.status_code == 403
    assert resp.json() == {"success": False, "error": "Recruiter access required"}


def test_generate_assessment(recruiter_client, monkeypatch):
    expires = datetime(2025, 8, 27, 12, 0, tzinfo=timezone.utc)
    seen = {}

    def _generate(db, application_id, questions=None, recruiter_id=None):
        seen.update(application_id=application_id, questions=questions, recruiter_id=recruiter_id)
        return SimpleNamespace(id="asm-1", assessment_url="http://localhost:5173/assessment/asm-1", expires_at=expires)

    monkeypatch.setattr(functions_mod, "generate_assessment", _generate)
    resp = recruiter_client.post(
        "/functions/generate-assessment",
        json={"applicationId": "app-1", "questions": {"technical": ["t1"], "work_ethics": ["w1"]}},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["assessmentId"] == "asm-1"
    assert data["assessmentUrl"].endswith("/assessment/asm-1")
    assert data["expiresAt"] == expires.isoformat()
    assert seen["questions"] == {"technical": ["t1"], "work_ethics": ["w1"]}
    assert seen["recruiter_id"] == "recruiter-1"


def test_generate_assessment_defaults_questions_to_none(recruiter_client, monkeypatch):
    seen = {}

    def _generate(db, application_id, questions=None, recruiter_id=None):
        seen["questions"] = questions
        return SimpleNamespace(id="asm-2", assessment_url="u", expires_at=datetime(2025, 1, 1, tzinfo=timezone.utc))

    monkeypatch.setattr(functions_mod, "generate_assessment", _generate)
    resp = recruiter_client.post("/functions/generate-assessment", json={"applicationId": "app-1"})
    assert resp.status_code == 200
    assert seen["questions"] is None


def test_generate_assessment_for_foreign_job(recruiter_client, monkeypatch):
    def _refuse(*args, **kwargs):
        raise UnauthorizedError("You can only send assessments for your own jobs")

    monkeypatch.setattr(functions_mod, "generate_assessment", _refuse)
    resp = recruiter_client.post("/functions/generate-assessment", json={"applicationId": "app-1"})
    assert resp.status_code == 403
    assert resp.json()["success"] is False


def test_contact_candidate_sends_through_injected_sender(recruiter_client):
    sender = LoggingNotificationSender()
    app.dependency_overrides[get_sender] = lambda: sender
    resp = recruiter_client.post(
        "/functions/contact-candidate",
        json={
            "candidateEmail": "cand@example.com",
            "candidateName": "Sam",
            "recruiterName": "Rita",
            "jobTitle": "Backend Engineer",
            "message": "Are you free Tuesday?",
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "emailSent": True}
    assert sender.sent[0].to_email == "cand@example.com"
    assert sender.sent[0].subject == "Message from Rita regarding Backend Engineer position"


def test_contact_candidate_provider_failure(recruiter_client, monkeypatch):
    def _fail(*args, **kwargs):
        raise UpstreamFailureError("Failed to send contact email")

    monkeypatch.setattr(functions_mod, "contact_candidate", _fail)
    app.dependency_overrides[get_sender] = lambda: LoggingNotificationSender()
    resp = recruiter_client.post(
        "/functions/contact-candidate",
        json={
            "candidateEmail": "cand@example.com",
            "candidateName": "Sam",
            "recruiterName": "Rita",
            "jobTitle": "Engineer",
            "message": "Hi",
        },
    )
    assert resp.status_code == 502
    assert resp.json() == {"success": False, "error": "Failed to send contact email"}


def test_contact_candidate_rejects_bad_email(recruiter_client):
    resp = recruiter_client.post(
        "/functions/contact-candidate",
        json={
            "candidateEmail": "not-an-email",
            "candidateName": "Sam",
            "recruiterName": "Rita",
            "jobTitle": "Engineer",
            "message": "Hi",
        },
    )
    assert resp.status_code == 422
    assert resp.json()["success"] is False
    assert resp.json()["error"].startswith("candidateEmail")
