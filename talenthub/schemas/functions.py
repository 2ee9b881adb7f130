from typing import Any

from pydantic import BaseModel, EmailStr, Field


class MatchAnalysisRequest(BaseModel):
    application_id: str | None = Field(default=None, alias="applicationId")
    job_id: str = Field(alias="jobId", min_length=1)
    applicant_id: str = Field(alias="applicantId", min_length=1)

    class Config:
        populate_by_name = True


class GenerateAssessmentRequest(BaseModel):
    application_id: str = Field(alias="applicationId", min_length=1)
    # Flat list or {"work_ethics": [...], "technical": [...]}; stored as given.
    questions: list[Any] | dict[str, Any] | None = None

    class Config:
        populate_by_name = True


class ContactCandidateRequest(BaseModel):
    candidate_email: EmailStr = Field(alias="candidateEmail")
    candidate_name: str = Field(alias="candidateName", min_length=1, max_length=200)
    recruiter_name: str = Field(alias="recruiterName", min_length=1, max_length=200)
    job_title: str = Field(alias="jobTitle", min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=10000)

    class Config:
        populate_by_name = True
