"""Core models, resume extraction and job matching."""

from .models import (
    ProfileFragment,
    ExperienceEntry,
    EducationEntry,
    ProjectEntry,
    Skill,
    Profile,
    JobPosting,
    MatchReasons,
    JobMatch,
)
from .resume_extractor import ResumeExtractor, parse_resume_text
from .resume_parser import ResumeParser
from .matcher import JobMatcher, match_job_with_profile

__all__ = [
    "ProfileFragment",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "Skill",
    "Profile",
    "JobPosting",
    "MatchReasons",
    "JobMatch",
    "ResumeExtractor",
    "parse_resume_text",
    "ResumeParser",
    "JobMatcher",
    "match_job_with_profile",
]
