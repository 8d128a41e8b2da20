"""Tests for compatibility scoring and ranking."""

from __future__ import annotations

from datetime import date

import pytest

from resume_matcher.core import (
    EducationEntry,
    ExperienceEntry,
    JobMatcher,
    JobPosting,
    Profile,
    ProfileFragment,
    Skill,
    match_job_with_profile,
)
from resume_matcher.core.matcher import parse_month, round_half_up


TODAY = date(2024, 1, 15)


def make_profile(skills=(), experience=(), education=()) -> Profile:
    return Profile(
        user_id="u1",
        skills=[Skill(name=s) for s in skills],
        experience=list(experience),
        education=list(education),
    )


def make_job(title="Engineer", description="", requirements=(), job_id=None) -> JobPosting:
    job = JobPosting(title=title, company="Acme", description=description, requirements=list(requirements))
    if job_id:
        job.id = job_id
    return job


def test_partial_skill_match() -> None:
    profile = make_profile(skills=["React", "Node.js"])
    job = make_job(title="Frontend Engineer", description="We use React and Python")

    result = match_job_with_profile(job, profile, today=TODAY)

    assert result.match_reasons.skills_match == ["React"]
    assert result.match_reasons.missing_skills == ["Python"]
    # 50 * 0.6 + 0 + 10
    assert result.compatibility_score == 40
    assert result.match_reasons.experience_match == "Entry-level position suitable for building experience"
    assert result.match_reasons.education_match == "Relevant work experience"


def test_empty_profile_against_keywordless_job() -> None:
    result = match_job_with_profile(make_job(description="Great team"), make_profile(), today=TODAY)

    assert result.compatibility_score == 10
    assert result.match_reasons.skills_match == []
    assert result.match_reasons.missing_skills == []


def test_current_position_counts_to_today() -> None:
    profile = make_profile(experience=[
        ExperienceEntry(company="Acme", position="Dev", start_date="Jan 2020", current=True),
    ])
    matcher = JobMatcher(profile, today=TODAY)

    assert matcher.calculate_experience_years() == 4
    result = matcher.match_job(make_job(description="Great team"))
    # 0 + min(40, 40) * 0.8 + 10
    assert result.compatibility_score == 42
    assert result.match_reasons.experience_match == (
        "Your 4 years of experience aligns with this position"
    )


def test_score_is_capped() -> None:
    profile = make_profile(
        skills=["Python", "Django"],
        experience=[ExperienceEntry(company="A", position="B", start_date="Jan 2010", end_date="Jan 2020")],
        education=[EducationEntry(institution="MIT", degree="BS", field="Computer Science")],
    )
    result = match_job_with_profile(make_job(description="Python and Django"), profile, today=TODAY)

    assert result.compatibility_score == 99
    assert result.match_reasons.education_match == "BS in Computer Science"
    assert result.match_reasons.experience_match == (
        "Your 10 years of experience makes you well-qualified for this role"
    )


def test_education_without_field() -> None:
    profile = make_profile(education=[EducationEntry(institution="MIT", degree="MBA")])
    assert JobMatcher(profile).describe_education() == "MBA"


def test_months_round_half_up() -> None:
    profile = make_profile(experience=[
        ExperienceEntry(company="A", position="B", start_date="Jan 2020", end_date="Jul 2021"),
    ])
    assert JobMatcher(profile, today=TODAY).calculate_experience_years() == 2


def test_unparseable_dates_contribute_nothing() -> None:
    profile = make_profile(experience=[
        ExperienceEntry(company="A", position="B", start_date="sometime", end_date="later"),
        ExperienceEntry(company="A", position="B", start_date="2015", end_date="2018"),
    ])
    assert JobMatcher(profile, today=TODAY).calculate_experience_years() == 3


def test_reversed_range_is_floored_at_zero() -> None:
    profile = make_profile(experience=[
        ExperienceEntry(company="A", position="B", start_date="Jan 2022", end_date="Jan 2020"),
    ])
    assert JobMatcher(profile, today=TODAY).calculate_experience_years() == 0


@pytest.mark.parametrize("years, expected", [
    (0, "Entry-level position suitable for building experience"),
    (1, "Your 1 years of experience is a good foundation for this role"),
    (3, "Your 3 years of experience aligns with this position"),
    (5, "Your 5 years of experience makes you well-qualified for this role"),
])
def test_experience_sentences(years, expected) -> None:
    assert JobMatcher.describe_experience(years) == expected


def test_loose_skill_comparison() -> None:
    profile = make_profile(skills=["React.js", "Git"])
    result = match_job_with_profile(make_job(description="React and GitHub"), profile, today=TODAY)

    # "React" sits inside "React.js"; "Git" does not match inside "GitHub"
    assert result.match_reasons.skills_match == ["React.js"]
    assert result.match_reasons.missing_skills == []


def test_missing_skills_truncated_to_five() -> None:
    job = make_job(description="Python Java Django Flask Redis Docker AWS")
    result = match_job_with_profile(job, make_profile(), today=TODAY)

    assert result.match_reasons.missing_skills == ["Python", "Java", "Django", "Flask", "Redis"]


def test_keywords_come_from_title_and_requirements() -> None:
    job = make_job(title="Kubernetes Engineer", requirements=["Experience with Docker", "Terraform"])
    result = match_job_with_profile(job, make_profile(), today=TODAY)

    assert result.match_reasons.missing_skills == ["Docker", "Kubernetes"]


def test_works_with_fragment() -> None:
    fragment = ProfileFragment(skills=["Python"])
    result = match_job_with_profile(make_job(description="Python"), fragment, today=TODAY)
    assert result.match_reasons.skills_match == ["Python"]
    # 100 * 0.6 + 0 + 10
    assert result.compatibility_score == 70


def test_rank_jobs_descending_and_stable() -> None:
    profile = make_profile(skills=["Python"])
    jobs = [
        make_job(description="Java", job_id="java"),
        make_job(description="Python", job_id="high"),
        make_job(description="Nothing relevant", job_id="tie-a"),
        make_job(description="Also nothing", job_id="tie-b"),
    ]
    ranked = JobMatcher(profile, today=TODAY).rank_jobs(jobs)

    assert [m.job.id for m in ranked] == ["high", "java", "tie-a", "tie-b"]
    assert [m.compatibility_score for m in ranked] == [70, 10, 10, 10]


def test_rank_empty_list() -> None:
    assert JobMatcher(make_profile()).rank_jobs([]) == []


def test_scores_within_bounds() -> None:
    profile = make_profile(skills=["Python"])
    for description in ("", "Python", "Java Python AWS Docker"):
        score = match_job_with_profile(make_job(description=description), profile, today=TODAY).compatibility_score
        assert 0 <= score <= 99


@pytest.mark.parametrize("text, expected", [
    ("Jan 2020", (2020, 1)),
    ("September 2019", (2019, 9)),
    ("Sept. 2020", (2020, 9)),
    ("03/2018", (2018, 3)),
    ("2021-06", (2021, 6)),
    ("2021-06-15", (2021, 6)),
    ("2017", (2017, 1)),
    ("Present", None),
    ("", None),
    (None, None),
])
def test_parse_month(text, expected) -> None:
    assert parse_month(text) == expected


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1
