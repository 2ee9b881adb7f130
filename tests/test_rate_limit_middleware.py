from types import SimpleNamespace

import talenthub.main as main_mod
import talenthub.routers.assessments as assessments_mod
import talenthub.routers.functions as functions_mod


def test_function_endpoints_are_rate_limited(monkeypatch, recruiter_client):
    main_mod.rate_limiter.reset()
    monkeypatch.setattr(main_mod.settings, "rate_limit_functions_per_min", 2)
    monkeypatch.setattr(functions_mod, "run_match_analysis", lambda db, job_id, applicant_id, recruiter_id=None: {})

    payload = {"jobId": "job-1", "applicantId": "appl-1"}
    r1 = recruiter_client.post("/functions/ai-analysis", json=payload)
    r2 = recruiter_client.post("/functions/ai-analysis", json=payload)
    r3 = recruiter_client.post("/functions/ai-analysis", json=payload)

    assert r1.status_code == 200
    assert r2.status_code == 200
    assert r3.status_code == 429
    assert r3.json()["success"] is False
    assert int(r3.headers["Retry-After"]) >= 1


def test_submit_is_rate_limited_separately(monkeypatch, applicant_client):
    main_mod.rate_limiter.reset()
    monkeypatch.setattr(main_mod.settings, "rate_limit_submit_per_min", 1)
    monkeypatch.setattr(
        assessments_mod,
        "submit_responses",
        lambda db, aid, uid, responses: SimpleNamespace(id=aid, score=0, status="completed"),
    )
    assert applicant_client.post("/assessments/asm-1/submit", json={"responses": {}}).status_code == 200
    assert applicant_client.post("/assessments/asm-1/submit", json={"responses": {}}).status_code == 429
    # different assessment, different bucket
    assert applicant_client.post("/assessments/asm-2/submit", json={"responses": {}}).status_code == 200


def test_reads_are_not_limited(monkeypatch, recruiter_client):
    main_mod.rate_limiter.reset()
    monkeypatch.setattr(main_mod.settings, "rate_limit_functions_per_min", 1)
    for _ in range(3):
        assert recruiter_client.get("/health/live").status_code == 200
