from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ExperienceLevel = Literal["entry", "mid", "senior", "executive"]
JobType = Literal["full-time", "part-time", "contract", "remote"]
JobStatus = Literal["active", "closed", "draft"]


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=50000)
    location: str | None = Field(default=None, max_length=200)
    job_type: JobType | None = None
    skills_required: list[str] = Field(default_factory=list, max_length=50)
    experience_level: ExperienceLevel | None = None
    status: JobStatus = "active"

    @field_validator("skills_required")
    @classmethod
    def strip_skills(cls, v: list[str]) -> list[str]:
        return [s.strip() for s in v if s and s.strip()]


class JobStatusUpdate(BaseModel):
    status: JobStatus


class JobResponse(BaseModel):
    id: str
    recruiter_id: str
    title: str
    description: str
    location: str | None = None
    job_type: str | None = None
    skills_required: list[str] = Field(default_factory=list)
    experience_level: str | None = None
    status: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class MatchEstimate(BaseModel):
    job_id: str
    match_score: int
    label: str
    analysis: str
    criteria: dict[str, int]
    matched_skills: list[str]
    missing_skills: list[str]


class CandidateMatchSummary(BaseModel):
    applicant_id: str
    count: int
    average: int | None = None
    best: int | None = None


class MatchScoreResponse(BaseModel):
    job_id: str
    applicant_id: str
    match_score: int
    analysis: str | None = None
    criteria: dict[str, int] | None = None
    updated_at: datetime | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
