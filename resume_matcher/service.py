"""
Profile Service - Upload, profile lookup and job search workflows.

These are the operations a front end (CLI or web handler) calls:
- upload_resume: validate a PDF, extract it, upsert the user's profile
- get_profile: fetch the stored profile
- search_jobs: fetch postings and rank them against the stored profile
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging
import re
import shutil

from resume_matcher.core import (
    JobMatch,
    JobMatcher,
    Profile,
    ResumeParser,
)
from resume_matcher.exceptions import ProfileNotFoundError, ResumeUploadError
from resume_matcher.integrations import JobAggregator
from resume_matcher.tracker import ProfileStore
from resume_matcher.utils import Config


@dataclass
class UploadResult:
    """Summary of a successful resume upload."""
    profile: Profile
    skills: list[str] = field(default_factory=list)
    experience_count: int = 0
    education_count: int = 0
    projects_count: int = 0

    def to_dict(self) -> dict:
        return {
            "success": True,
            "message": "Resume uploaded and parsed successfully",
            "data": {
                "skills": list(self.skills),
                "experienceCount": self.experience_count,
                "educationCount": self.education_count,
                "projectsCount": self.projects_count,
            },
            "profileId": self.profile.user_id,
        }


class ProfileService:
    """Runs the upload and search workflows against a profile store."""

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[ProfileStore] = None,
        aggregator: Optional[JobAggregator] = None,
        parser: Optional[ResumeParser] = None,
    ):
        self.config = config or Config()
        self.store = store or ProfileStore(self.config.get_data_dir())
        self.aggregator = aggregator or JobAggregator.from_config(self.config)
        self.parser = parser or ResumeParser()
        self.logger = logging.getLogger(self.__class__.__name__)

    def upload_resume(self, user_id: str, file_path: str) -> UploadResult:
        """
        Validate, store and extract a resume PDF, then upsert the profile.

        Args:
            user_id: Opaque user identifier
            file_path: Path to the uploaded PDF

        Returns:
            UploadResult describing what was extracted

        Raises:
            ResumeUploadError: The file was rejected or yielded no usable data
        """
        source = Path(file_path)

        if not source.is_file():
            raise ResumeUploadError("No file uploaded", details=f"File not found: {file_path}")

        if source.suffix.lower() != ".pdf":
            raise ResumeUploadError("Only PDF files are allowed")

        max_mb = self.config.get("upload.max_size_mb", 5)
        if source.stat().st_size > self.config.get_max_upload_bytes():
            raise ResumeUploadError(f"File size must be less than {max_mb}MB")

        stored_path = self._store_upload(user_id, source)

        try:
            text = self.parser.extract_pdf_text(stored_path)
        except Exception as e:
            self.logger.error(f"PDF parsing error for {user_id}: {e}")
            raise ResumeUploadError(
                "Could not parse PDF content. The file may be corrupted or password-protected.",
                details=str(e),
                suggestion="Please try re-saving your PDF or using a different PDF viewer to export it.",
            ) from e

        min_length = self.config.get("upload.min_text_length", 50)
        if len(text.strip()) < min_length:
            raise ResumeUploadError(
                "Could not parse PDF content. The file may be corrupted or password-protected.",
                details="PDF appears to be empty or corrupted",
                suggestion="Please try re-saving your PDF or using a different PDF viewer to export it.",
            )

        fragment = self.parser.extractor.extract(text)

        if not fragment.has_signal:
            raise ResumeUploadError(
                "Could not extract meaningful information from the resume",
                suggestion=(
                    "Please ensure your resume contains clear sections for Skills, "
                    "Experience, Education, and Projects."
                ),
            )

        profile = self.store.upsert_fragment(user_id, fragment, resume_path=str(stored_path))

        self.logger.info(
            f"Parsed resume for {user_id}: {len(fragment.skills)} skills, "
            f"{len(fragment.experience)} positions"
        )

        return UploadResult(
            profile=profile,
            skills=list(fragment.skills),
            experience_count=len(fragment.experience),
            education_count=len(fragment.education),
            projects_count=len(fragment.projects),
        )

    def _store_upload(self, user_id: str, source: Path) -> Path:
        """Copy the upload into the upload directory under a unique name."""
        upload_dir = Path(self.config.get_upload_dir())
        upload_dir.mkdir(parents=True, exist_ok=True)

        timestamp = int(datetime.now().timestamp() * 1000)
        safe_name = re.sub(r"[^a-zA-Z0-9.-]", "_", source.name)
        safe_user = re.sub(r"[^a-zA-Z0-9.-]", "_", user_id)
        destination = upload_dir / f"{safe_user}_{timestamp}_{safe_name}"

        shutil.copyfile(source, destination)
        return destination

    def get_profile(self, user_id: str) -> Profile:
        """
        Raises:
            ProfileNotFoundError: No profile stored for the user
        """
        profile = self.store.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    def search_jobs(
        self,
        user_id: str,
        keywords: str = "",
        location: str = "",
        job_type: str = "all",
        experience_level: str = "all",
        sources: Optional[list[str]] = None,
    ) -> list[JobMatch]:
        """
        Fetch postings and rank them against the user's stored profile.

        Returns:
            JobMatch list, best compatibility first
        """
        profile = self.get_profile(user_id)

        jobs = self.aggregator.search(
            keywords=keywords or self.config.get("search.default_keywords", ""),
            location=location or self.config.get("search.default_location", ""),
            job_type=job_type,
            experience_level=experience_level,
            limit=self.config.get("search.limit", 100),
            sources=sources,
        )

        return JobMatcher(profile).rank_jobs(jobs)
