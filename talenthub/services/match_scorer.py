"""
Heuristic job/applicant compatibility score.

One canonical function serves both the interactive estimate shown while an
applicant browses jobs and the persisted analysis a recruiter triggers.
"""
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable

BASE_SCORE = 60
SKILL_WEIGHT = 30
EXPERIENCE_BONUS = 10

# Minimum years of experience that earn the experience bonus, by level.
EXPERIENCE_THRESHOLDS: dict[str, int] = {
    "entry": 0,
    "mid": 2,
    "senior": 5,
    "executive": 10,
}
LEVEL_ALIASES: dict[str, str] = {
    "junior": "entry",
    "lead": "executive",
}


@dataclass(frozen=True)
class JobRequirements:
    skills_required: tuple[str, ...] = ()
    experience_level: str | None = None

    @classmethod
    def from_job(cls, job: Any) -> "JobRequirements":
        return cls(
            skills_required=tuple(_clean_skills(getattr(job, "skills_required", None))),
            experience_level=getattr(job, "experience_level", None),
        )


@dataclass(frozen=True)
class ApplicantProfile:
    skills: frozenset[str] = frozenset()
    experience_years: int | None = None

    @classmethod
    def from_record(cls, record: Any | None) -> "ApplicantProfile":
        if record is None:
            return cls()
        return cls(
            skills=frozenset(_clean_skills(getattr(record, "skills", None))),
            experience_years=getattr(record, "experience_years", None),
        )


@dataclass
class MatchScoreResult:
    score: int
    label: str
    analysis: str
    criteria: dict[str, int]
    matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)


def _clean_skills(raw: Iterable[Any] | None) -> list[str]:
    if not raw or isinstance(raw, str):
        return []
    out = []
    for s in raw:
        if isinstance(s, str) and s.strip():
            out.append(s.strip())
    return out


def normalize_level(level: str | None) -> str | None:
    if not level:
        return None
    key = level.strip().lower()
    return LEVEL_ALIASES.get(key, key)


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _skill_overlap(required: Iterable[str], applicant: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split required skills into (matched, missing) using two-way substring containment."""
    applicant_lower = [s.lower() for s in _clean_skills(applicant)]
    matched: list[str] = []
    missing: list[str] = []
    for req in _clean_skills(required):
        r = req.lower()
        if any(r in a or a in r for a in applicant_lower):
            matched.append(req)
        else:
            missing.append(req)
    return matched, missing


def meets_experience(level: str | None, years: int | None) -> bool:
    level = normalize_level(level)
    if level is None or years is None:
        return False
    threshold = EXPERIENCE_THRESHOLDS.get(level)
    if threshold is None:
        return False
    return years >= threshold


def score_label(score: int) -> str:
    if score >= 80:
        return "Strong"
    if score >= 60:
        return "Good"
    return "Moderate"


def analysis_text(score: int) -> str:
    return (
        f"Candidate shows {score}% compatibility with the role. "
        f"{score_label(score)} match based on skills and experience."
    )


def compute_match(job: JobRequirements, profile: ApplicantProfile) -> MatchScoreResult:
    """
    Score an applicant against a job. Deterministic and total: absent
    skills or experience data simply contribute nothing.
    """
    required = _clean_skills(job.skills_required)
    matched, missing = ([], list(required))
    skill_fraction = 0.0
    if required and profile.skills:
        matched, missing = _skill_overlap(required, profile.skills)
        skill_fraction = len(matched) / len(required)

    experience_ok = meets_experience(job.experience_level, profile.experience_years)

    raw = BASE_SCORE + skill_fraction * SKILL_WEIGHT + (EXPERIENCE_BONUS if experience_ok else 0)
    score = max(0, min(100, _round_half_up(raw)))

    criteria = {
        "skills_match": _round_half_up(skill_fraction * 100),
        "experience_match": 100 if experience_ok else 0,
        "requirements_match": _round_half_up(len(matched) / len(required) * 100) if required else 100,
        "overall_fit": score,
    }
    return MatchScoreResult(
        score=score,
        label=score_label(score),
        analysis=analysis_text(score),
        criteria=criteria,
        matched_skills=matched,
        missing_skills=missing,
    )


def summarize_scores(scores: Iterable[int | float | None]) -> dict[str, Any]:
    """Aggregate persisted match scores for one applicant: count, rounded mean and best."""
    values = [s for s in scores if s is not None]
    if not values:
        return {"count": 0, "average": None, "best": None}
    return {
        "count": len(values),
        "average": _round_half_up(sum(values) / len(values)),
        "best": int(max(values)),
    }
