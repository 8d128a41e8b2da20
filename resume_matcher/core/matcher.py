"""
Job Matcher - Scores job postings against a stored profile.

The compatibility score blends three parts:
- Skill match: share of the job's technology keywords covered by the profile
- Experience: total years across all positions, capped
- Education: flat bonus when any education is on file

Scores are integers in 0-99. Matching never raises; missing or malformed
profile data just lowers the score.
"""

from datetime import date
from typing import Optional
import math
import re

from .models import (
    JobPosting,
    JobMatch,
    MatchReasons,
    Profile,
)
from .resume_extractor import term_regex


# Technology keywords looked for in job postings, independent of the
# resume skill catalogue
JOB_KEYWORD_CATALOGUE: tuple[tuple[str, str], ...] = (
    ("JavaScript", r"JavaScript"),
    ("TypeScript", r"TypeScript"),
    ("Python", r"Python"),
    ("Java", r"Java"),
    ("React", r"React"),
    ("Node.js", r"Node\.js"),
    ("Angular", r"Angular"),
    ("Vue", r"Vue"),
    ("Express", r"Express"),
    ("Django", r"Django"),
    ("Flask", r"Flask"),
    ("PostgreSQL", r"PostgreSQL"),
    ("MongoDB", r"MongoDB"),
    ("MySQL", r"MySQL"),
    ("Redis", r"Redis"),
    ("Docker", r"Docker"),
    ("Kubernetes", r"Kubernetes"),
    ("AWS", r"AWS"),
    ("Azure", r"Azure"),
    ("GCP", r"GCP"),
    ("Git", r"Git"),
    ("CI/CD", r"CI/CD"),
    ("REST API", r"REST\s+API"),
    ("GraphQL", r"GraphQL"),
    ("TensorFlow", r"TensorFlow"),
    ("PyTorch", r"PyTorch"),
    ("Machine Learning", r"Machine\s+Learning"),
    ("AI", r"AI"),
    ("Agile", r"Agile"),
    ("Scrum", r"Scrum"),
    ("Microservices", r"Microservices"),
    ("HTML", r"HTML"),
    ("CSS", r"CSS"),
    ("Tailwind", r"Tailwind"),
    ("Bootstrap", r"Bootstrap"),
)

MAX_MISSING_SKILLS = 5
MAX_SCORE = 99

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_MONTH_YEAR_RE = re.compile(r"^([A-Za-z]{3})[A-Za-z]*\.?,?\s+(\d{4})$")
_NUMERIC_MONTH_YEAR_RE = re.compile(r"^(\d{1,2})[/-](\d{4})$")
_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})(?:-\d{1,2}(?:[T ].*)?)?$")
_YEAR_RE = re.compile(r"^(\d{4})$")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, unlike round()."""
    return int(math.floor(value + 0.5))


def parse_month(text: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a free-form resume date into (year, month).

    Accepts "Jan 2020", "January 2020", "Sept. 2020", "01/2020",
    "2020-01", "2020-01-15" and "2020" (read as January). Returns None
    for anything else.
    """
    if not text:
        return None

    value = text.strip()

    match = _MONTH_YEAR_RE.match(value)
    if match:
        month = MONTHS.get(match.group(1).lower())
        return (int(match.group(2)), month) if month else None

    match = _NUMERIC_MONTH_YEAR_RE.match(value)
    if match:
        month = int(match.group(1))
        return (int(match.group(2)), month) if 1 <= month <= 12 else None

    match = _ISO_RE.match(value)
    if match:
        month = int(match.group(2))
        return (int(match.group(1)), month) if 1 <= month <= 12 else None

    match = _YEAR_RE.match(value)
    if match:
        return int(match.group(1)), 1

    return None


def _skill_names(profile) -> list[str]:
    """Skill names from either a stored Profile or a ProfileFragment."""
    if isinstance(profile, Profile):
        return profile.skill_names
    return list(profile.skills)


class JobMatcher:
    """Matches a profile to job postings and calculates compatibility scores."""

    def __init__(
        self,
        profile,
        keyword_catalogue: Optional[tuple[tuple[str, str], ...]] = None,
        today: Optional[date] = None,
    ):
        """
        Args:
            profile: A stored Profile or a ProfileFragment
            keyword_catalogue: (display, pattern) pairs to look for in postings
            today: Reference date for current positions (default: today)
        """
        self.profile = profile
        self.today = today
        catalogue = keyword_catalogue if keyword_catalogue is not None else JOB_KEYWORD_CATALOGUE
        self._keyword_patterns = tuple(
            (display, term_regex(pattern)) for display, pattern in catalogue
        )

    def match_job(self, job: JobPosting) -> JobMatch:
        """Score one job posting against the profile."""
        job_keywords = self.extract_keywords(
            f"{job.title} {job.description} {' '.join(job.requirements)}"
        )
        skills_match, missing_skills = self._compare_skills(job_keywords)

        years = self.calculate_experience_years()
        has_education = bool(self.profile.education)

        skill_match_percentage = len(skills_match) / max(len(job_keywords), 1) * 100
        experience_score = min(years * 10, 40)
        education_score = 20 if has_education else 10

        score = round_half_up(
            skill_match_percentage * 0.6 + experience_score * 0.8 + education_score
        )

        return JobMatch(
            job=job,
            compatibility_score=min(score, MAX_SCORE),
            match_reasons=MatchReasons(
                skills_match=skills_match,
                experience_match=self.describe_experience(years),
                education_match=self.describe_education(),
                missing_skills=missing_skills[:MAX_MISSING_SKILLS],
            ),
        )

    def extract_keywords(self, text: str) -> list[str]:
        """Return catalogue keywords present in the text, in catalogue order."""
        keywords = []
        for display, regex in self._keyword_patterns:
            if display not in keywords and regex.search(text):
                keywords.append(display)
        return keywords

    def _compare_skills(self, job_keywords: list[str]) -> tuple[list[str], list[str]]:
        """Split job keywords into matched profile skills and missing keywords."""
        user_skills = _skill_names(self.profile)
        matched = []
        missing = []

        for keyword in job_keywords:
            keyword_lower = keyword.lower()
            # "React" also matches "React.js"
            skill = next(
                (
                    s for s in user_skills
                    if s.lower() in keyword_lower or keyword_lower in s.lower()
                ),
                None,
            )

            if skill is not None:
                if skill not in matched:
                    matched.append(skill)
            elif keyword not in missing:
                missing.append(keyword)

        return matched, missing

    def calculate_experience_years(self) -> int:
        """Total whole years across all positions, rounded."""
        today = self.today or date.today()
        now = (today.year, today.month)
        total_months = 0

        for entry in self.profile.experience or []:
            start = parse_month(entry.start_date)
            if entry.current or not entry.end_date:
                end = now
            else:
                end = parse_month(entry.end_date)

            if start is None or end is None:
                continue

            months = (end[0] - start[0]) * 12 + (end[1] - start[1])
            total_months += max(months, 0)

        return round_half_up(total_months / 12)

    @staticmethod
    def describe_experience(years: int) -> str:
        if years >= 5:
            return f"Your {years} years of experience makes you well-qualified for this role"
        if years >= 3:
            return f"Your {years} years of experience aligns with this position"
        if years >= 1:
            return f"Your {years} years of experience is a good foundation for this role"
        return "Entry-level position suitable for building experience"

    def describe_education(self) -> str:
        if not self.profile.education:
            return "Relevant work experience"

        first = self.profile.education[0]
        if first.field:
            return f"{first.degree} in {first.field}"
        return first.degree

    def rank_jobs(self, jobs: list[JobPosting]) -> list[JobMatch]:
        """
        Score and rank jobs by compatibility, best first.

        The sort is stable, so ties keep the order the jobs came in.
        """
        matches = [self.match_job(job) for job in jobs]
        matches.sort(key=lambda m: m.compatibility_score, reverse=True)
        return matches


def match_job_with_profile(job: JobPosting, profile, today: Optional[date] = None) -> JobMatch:
    """Score a single job against a profile with the default keyword catalogue."""
    return JobMatcher(profile, today=today).match_job(job)
