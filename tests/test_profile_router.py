from types import SimpleNamespace

import talenthub.routers.profile as profile_mod


def _profile(**overrides):
    data = dict(
        user_id="applicant-1",
        bio=None,
        skills=["react"],
        experience_years=3,
        education=None,
        portfolio_url=None,
        availability=None,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def test_get_profile(applicant_client, monkeypatch):
    monkeypatch.setattr(profile_mod, "get_by_user", lambda db, uid: _profile())
    resp = applicant_client.get("/profile/applicant")
    assert resp.status_code == 200
    assert resp.json()["skills"] == ["react"]


def test_get_profile_missing(applicant_client, monkeypatch):
    monkeypatch.setattr(profile_mod, "get_by_user", lambda db, uid: None)
    assert applicant_client.get("/profile/applicant").status_code == 404


def test_update_profile_only_passes_set_fields(applicant_client, monkeypatch):
    seen = {}

    def _upsert(db, user_id, **fields):
        seen.update(user_id=user_id, fields=fields)
        return _profile(**fields)

    monkeypatch.setattr(profile_mod, "upsert", _upsert)
    resp = applicant_client.put("/profile/applicant", json={"skills": [" React ", "", "AWS"], "experience_years": 0})
    assert resp.status_code == 200
    assert seen == {"user_id": "applicant-1", "fields": {"skills": ["React", "AWS"], "experience_years": 0}}
    assert resp.json()["experience_years"] == 0


def test_update_profile_rejects_negative_experience(applicant_client):
    assert applicant_client.put("/profile/applicant", json={"experience_years": -1}).status_code == 422


def test_profile_is_applicant_only(recruiter_client):
    assert recruiter_client.get("/profile/applicant").status_code == 403
