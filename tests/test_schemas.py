import pytest
from pydantic import ValidationError

from talenthub.schemas.assessment import SubmitResponsesRequest
from talenthub.schemas.functions import ContactCandidateRequest, GenerateAssessmentRequest, MatchAnalysisRequest
from talenthub.schemas.job import JobCreate
from talenthub.schemas.profile import ApplicantProfileUpdate


def test_function_requests_accept_camel_and_snake_case():
    camel = MatchAnalysisRequest.model_validate({"applicationId": "a", "jobId": "j", "applicantId": "u"})
    snake = MatchAnalysisRequest.model_validate({"job_id": "j", "applicant_id": "u"})
    assert camel.job_id == snake.job_id == "j"
    assert snake.application_id is None


def test_generate_assessment_question_shapes():
    assert GenerateAssessmentRequest.model_validate({"applicationId": "a"}).questions is None
    flat = GenerateAssessmentRequest.model_validate({"applicationId": "a", "questions": ["q1"]})
    assert flat.questions == ["q1"]
    bucketed = GenerateAssessmentRequest.model_validate({"applicationId": "a", "questions": {"technical": ["t"]}})
    assert bucketed.questions == {"technical": ["t"]}
    with pytest.raises(ValidationError):
        GenerateAssessmentRequest.model_validate({"applicationId": ""})


def test_contact_request_validation():
    body = {
        "candidateEmail": "cand@example.com",
        "candidateName": "Sam",
        "recruiterName": "Rita",
        "jobTitle": "Engineer",
        "message": "Hi",
    }
    assert ContactCandidateRequest.model_validate(body).candidate_email == "cand@example.com"
    with pytest.raises(ValidationError):
        ContactCandidateRequest.model_validate({**body, "message": ""})


def test_job_create_cleans_skills_and_checks_enums():
    job = JobCreate(title="T", description="D", skills_required=[" Go ", " ", "Rust"], experience_level="senior")
    assert job.skills_required == ["Go", "Rust"]
    with pytest.raises(ValidationError):
        JobCreate(title="T", description="D", job_type="gig")


def test_profile_update_bounds():
    assert ApplicantProfileUpdate(experience_years=0).experience_years == 0
    with pytest.raises(ValidationError):
        ApplicantProfileUpdate(experience_years=81)
    assert ApplicantProfileUpdate(skills=None).skills is None


def test_submit_defaults_to_empty_responses():
    assert SubmitResponsesRequest().responses == {}
