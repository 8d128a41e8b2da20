"""
Core data models for resume extraction and job matching.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import uuid


def _optional(value) -> Optional[str]:
    """Normalize empty strings coming from stored documents to None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass
class ExperienceEntry:
    """A single position extracted from the experience section."""
    company: str
    position: str
    start_date: str
    description: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False

    def to_dict(self) -> dict:
        return {
            "company": self.company,
            "position": self.position,
            "description": self.description,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "current": self.current,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExperienceEntry":
        return cls(
            company=data.get("company", ""),
            position=data.get("position", ""),
            start_date=data.get("startDate", data.get("start_date", "")) or "",
            description=_optional(data.get("description")),
            end_date=_optional(data.get("endDate", data.get("end_date"))),
            current=bool(data.get("current", False)),
        )


@dataclass
class EducationEntry:
    """An educational credential."""
    institution: str
    degree: str
    field: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "institution": self.institution,
            "degree": self.degree,
            "field": self.field,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EducationEntry":
        return cls(
            institution=data.get("institution", ""),
            degree=data.get("degree", ""),
            field=_optional(data.get("field")),
            start_date=_optional(data.get("startDate", data.get("start_date"))),
            end_date=_optional(data.get("endDate", data.get("end_date"))),
        )


@dataclass
class ProjectEntry:
    """A portfolio or side project."""
    name: str
    description: Optional[str] = None
    technologies: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "technologies": self.technologies,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectEntry":
        return cls(
            name=data.get("name", ""),
            description=_optional(data.get("description")),
            technologies=_optional(data.get("technologies")),
        )


@dataclass
class ProfileFragment:
    """Structured data pulled out of a single resume."""
    skills: list[str] = field(default_factory=list)
    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    projects: list[ProjectEntry] = field(default_factory=list)

    @property
    def has_signal(self) -> bool:
        """False when neither skills nor experience could be extracted."""
        return bool(self.skills or self.experience)

    def to_dict(self) -> dict:
        return {
            "skills": list(self.skills),
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "projects": [p.to_dict() for p in self.projects],
        }


@dataclass
class Skill:
    """A skill as kept on a stored profile."""
    name: str
    category: str = "Technical"

    def to_dict(self) -> dict:
        return {"name": self.name, "category": self.category}


@dataclass
class Profile:
    """A user's stored profile, keyed by an opaque user identifier."""
    user_id: str
    resume_path: Optional[str] = None
    skills: list[Skill] = field(default_factory=list)
    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    projects: list[ProjectEntry] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def skill_names(self) -> list[str]:
        return [skill.name for skill in self.skills]

    def apply_fragment(self, fragment: ProfileFragment, resume_path: Optional[str] = None) -> None:
        """Replace the extracted sections with a fresh extraction."""
        self.skills = [Skill(name=name) for name in fragment.skills]
        self.experience = list(fragment.experience)
        self.education = list(fragment.education)
        self.projects = list(fragment.projects)
        if resume_path:
            self.resume_path = resume_path
        self.updated_at = datetime.now()

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "resumePath": self.resume_path,
            "skills": [s.to_dict() for s in self.skills],
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "projects": [p.to_dict() for p in self.projects],
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        skills = []
        for skill_data in data.get("skills", []):
            if isinstance(skill_data, str):
                skills.append(Skill(name=skill_data))
            elif isinstance(skill_data, dict) and skill_data.get("name"):
                skills.append(Skill(
                    name=skill_data["name"],
                    category=skill_data.get("category", "Technical"),
                ))

        profile = cls(
            user_id=data.get("userId", data.get("user_id", "")),
            resume_path=data.get("resumePath", data.get("resume_path")),
            skills=skills,
            experience=[ExperienceEntry.from_dict(e) for e in data.get("experience", [])],
            education=[EducationEntry.from_dict(e) for e in data.get("education", [])],
            projects=[ProjectEntry.from_dict(p) for p in data.get("projects", [])],
        )

        created_at = data.get("createdAt", data.get("created_at"))
        if isinstance(created_at, str):
            profile.created_at = datetime.fromisoformat(created_at)
        updated_at = data.get("updatedAt", data.get("updated_at"))
        if isinstance(updated_at, str):
            profile.updated_at = datetime.fromisoformat(updated_at)

        return profile


@dataclass
class JobPosting:
    """A job posting supplied by a job source."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    title: str = ""
    company: str = ""
    location: str = ""
    description: str = ""
    requirements: list[str] = field(default_factory=list)
    salary: Optional[str] = None
    job_type: str = "Full-time"
    posted_date: str = field(default_factory=lambda: datetime.now().isoformat())
    url: str = ""
    source: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "description": self.description,
            "requirements": list(self.requirements),
            "salary": self.salary,
            "jobType": self.job_type,
            "postedDate": self.posted_date,
            "url": self.url,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JobPosting":
        return cls(
            id=str(data.get("id") or uuid.uuid4()),
            title=data.get("title", ""),
            company=data.get("company", ""),
            location=data.get("location", ""),
            description=data.get("description", ""),
            requirements=list(data.get("requirements", [])),
            salary=_optional(data.get("salary")),
            job_type=data.get("jobType", data.get("job_type", "Full-time")),
            posted_date=data.get("postedDate", data.get("posted_date")) or datetime.now().isoformat(),
            url=data.get("url", ""),
            source=data.get("source", ""),
        )


@dataclass
class MatchReasons:
    """Why a job scored the way it did."""
    skills_match: list[str] = field(default_factory=list)
    experience_match: str = ""
    education_match: str = ""
    missing_skills: list[str] = field(default_factory=list)  # at most 5

    def to_dict(self) -> dict:
        return {
            "skillsMatch": list(self.skills_match),
            "experienceMatch": self.experience_match,
            "educationMatch": self.education_match,
            "missingSkills": list(self.missing_skills),
        }


@dataclass
class JobMatch:
    """A job posting scored against a profile."""
    job: JobPosting
    compatibility_score: int = 0  # 0-99
    match_reasons: MatchReasons = field(default_factory=MatchReasons)

    def to_dict(self) -> dict:
        data = self.job.to_dict()
        data["compatibilityScore"] = self.compatibility_score
        data["matchReasons"] = self.match_reasons.to_dict()
        return data
