from pydantic import BaseModel, Field, field_validator


class ApplicantProfileUpdate(BaseModel):
    bio: str | None = Field(default=None, max_length=5000)
    skills: list[str] | None = Field(default=None, max_length=100)
    experience_years: int | None = Field(default=None, ge=0, le=80)
    education: str | None = Field(default=None, max_length=500)
    portfolio_url: str | None = Field(default=None, max_length=500)
    availability: str | None = Field(default=None, max_length=200)

    @field_validator("skills")
    @classmethod
    def strip_skills(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        return [s.strip() for s in v if s and s.strip()]


class ApplicantProfileResponse(BaseModel):
    user_id: str
    bio: str | None = None
    skills: list[str] = Field(default_factory=list)
    experience_years: int | None = None
    education: str | None = None
    portfolio_url: str | None = None
    availability: str | None = None

    class Config:
        from_attributes = True
