"""Tests for model serialization."""

from __future__ import annotations

from resume_matcher.core import (
    ExperienceEntry,
    JobMatch,
    JobPosting,
    MatchReasons,
    Profile,
    ProfileFragment,
    Skill,
)


def test_experience_uses_camel_case_keys() -> None:
    entry = ExperienceEntry(company="Acme", position="Dev", start_date="Jan 2020", current=True)
    assert entry.to_dict() == {
        "company": "Acme",
        "position": "Dev",
        "description": None,
        "startDate": "Jan 2020",
        "endDate": None,
        "current": True,
    }


def test_experience_from_dict_accepts_snake_case() -> None:
    entry = ExperienceEntry.from_dict({
        "company": "Acme", "position": "Dev", "start_date": "2019", "end_date": "", "current": False,
    })
    assert entry.start_date == "2019"
    assert entry.end_date is None


def test_has_signal() -> None:
    assert ProfileFragment().has_signal is False
    assert ProfileFragment(skills=["Python"]).has_signal is True
    assert ProfileFragment(
        experience=[ExperienceEntry(company="A", position="B", start_date="2020")]
    ).has_signal is True


def test_apply_fragment_replaces_sections() -> None:
    profile = Profile(user_id="u1", skills=[Skill(name="Cobol")], resume_path="old.pdf")
    profile.apply_fragment(ProfileFragment(skills=["Python", "Go"]), resume_path="new.pdf")

    assert profile.skill_names == ["Python", "Go"]
    assert all(s.category == "Technical" for s in profile.skills)
    assert profile.resume_path == "new.pdf"


def test_apply_fragment_keeps_resume_path_when_none_given() -> None:
    profile = Profile(user_id="u1", resume_path="old.pdf")
    profile.apply_fragment(ProfileFragment())
    assert profile.resume_path == "old.pdf"


def test_profile_from_dict_accepts_plain_skill_names() -> None:
    profile = Profile.from_dict({
        "userId": "u1",
        "skills": ["Python", {"name": "Docker", "category": "DevOps"}, {"category": "empty"}],
        "createdAt": "2024-01-01T10:00:00",
    })
    assert profile.skill_names == ["Python", "Docker"]
    assert profile.skills[1].category == "DevOps"
    assert profile.created_at.year == 2024


def test_profile_round_trip_keeps_sections() -> None:
    profile = Profile(
        user_id="u1",
        skills=[Skill(name="Python")],
        experience=[ExperienceEntry(company="Acme", position="Dev", start_date="Jan 2020", end_date="Dec 2021")],
    )
    restored = Profile.from_dict(profile.to_dict())

    assert restored.user_id == "u1"
    assert restored.experience == profile.experience
    assert restored.updated_at == profile.updated_at


def test_job_posting_from_dict_defaults() -> None:
    job = JobPosting.from_dict({"title": "Dev", "company": "Acme"})
    assert job.id
    assert job.job_type == "Full-time"
    assert job.requirements == []
    assert job.salary is None


def test_job_match_flattens_posting() -> None:
    job = JobPosting(id="j1", title="Dev", company="Acme", job_type="Contract")
    match = JobMatch(
        job=job,
        compatibility_score=55,
        match_reasons=MatchReasons(skills_match=["Python"], missing_skills=["Go"]),
    )
    data = match.to_dict()

    assert data["id"] == "j1"
    assert data["jobType"] == "Contract"
    assert data["compatibilityScore"] == 55
    assert data["matchReasons"]["skillsMatch"] == ["Python"]
    assert data["matchReasons"]["missingSkills"] == ["Go"]
