from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

ApplicationStatus = Literal["pending", "reviewed", "shortlisted", "rejected", "hired"]


class ApplyRequest(BaseModel):
    cover_letter: str | None = Field(default=None, max_length=20000)


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    applicant_id: str
    status: str | None = None
    cover_letter: str | None = None
    applied_at: datetime | None = None

    class Config:
        from_attributes = True
