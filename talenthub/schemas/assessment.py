from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AssessmentView(BaseModel):
    """Applicant-facing assessment: questions already in presentation order."""

    id: str
    application_id: str
    job_id: str
    status: str
    questions: list[Any]
    total_questions: int
    expires_at: datetime
    time_remaining_seconds: int
    score: int | None = None


class AssessmentResult(BaseModel):
    """Recruiter-facing view of an assessment and the applicant's answers."""

    id: str
    application_id: str
    job_id: str
    applicant_id: str
    status: str
    questions: list[Any] | dict[str, Any]
    total_questions: int
    response_count: int
    responses: dict[str, Any] | None = None
    score: int | None = None
    assessment_url: str
    expires_at: datetime
    created_at: datetime | None = None


class SubmitResponsesRequest(BaseModel):
    responses: dict[str, str] = Field(default_factory=dict)
