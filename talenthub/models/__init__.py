from talenthub.models.profile import Profile
from talenthub.models.applicant_profile import ApplicantProfile
from talenthub.models.job import Job
from talenthub.models.application import Application
from talenthub.models.match_score import MatchScore
from talenthub.models.assessment import Assessment

__all__ = [
    "Profile",
    "ApplicantProfile",
    "Job",
    "Application",
    "MatchScore",
    "Assessment",
]
