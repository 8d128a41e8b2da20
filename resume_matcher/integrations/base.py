"""
Base class for job sources.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging
import re

from bs4 import BeautifulSoup

from resume_matcher.core.models import JobPosting


class JobSource(ABC):
    """Abstract base class for job sources."""

    def __init__(self, timeout: int = 30):
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name."""
        pass

    @abstractmethod
    def search_jobs(
        self,
        query: str,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        experience_level: Optional[str] = None,
        limit: int = 50,
    ) -> list[JobPosting]:
        """
        Search for jobs matching the criteria.

        Args:
            query: Search query (job title, skills, etc.)
            location: Location filter
            job_type: Full-time, Part-time, Contract, etc.
            experience_level: entry, mid, senior
            limit: Maximum number of results

        Returns:
            List of matching JobPosting objects
        """
        pass

    def is_available(self) -> bool:
        """Check if the source is properly configured and available."""
        return True

    @staticmethod
    def html_to_text(html: str) -> str:
        """Strip markup from a job description."""
        if not html:
            return ""
        text = BeautifulSoup(html, "html.parser").get_text(" ")
        return re.sub(r"\s+", " ", text).strip()

    @staticmethod
    def extract_requirements(html: str) -> list[str]:
        """Pull list items out of an HTML description as requirement lines."""
        if not html:
            return []
        soup = BeautifulSoup(html, "html.parser")
        items = []
        for li in soup.find_all("li"):
            text = re.sub(r"\s+", " ", li.get_text(" ")).strip()
            if text:
                items.append(text)
        return items

    @staticmethod
    def matches_query(job: JobPosting, query: str) -> bool:
        """True if any query word appears in the job title or description."""
        words = [w for w in query.lower().split() if w]
        if not words:
            return True
        text = f"{job.title} {job.description}".lower()
        return any(word in text for word in words)

    @staticmethod
    def matches_location(job: JobPosting, location: Optional[str]) -> bool:
        if not location:
            return True
        job_location = job.location.lower()
        return location.lower() in job_location or "remote" in job_location

    @staticmethod
    def matches_experience_level(job: JobPosting, experience_level: Optional[str]) -> bool:
        if not experience_level or experience_level == "all":
            return True
        level = experience_level.lower()
        text = f"{job.title} {job.description}".lower()
        if level == "senior":
            return "senior" in text or "sr." in text or "lead" in text
        if level == "entry":
            return "junior" in text or "entry" in text or "graduate" in text
        return True


class CompanyBoardSource(JobSource):
    """
    A source that reads one public job board per company.

    Subclasses fetch and parse a single company's board; searching walks
    the companies in order and filters each board locally.
    """

    DEFAULT_COMPANIES: tuple[str, ...] = ()

    def __init__(self, companies: Optional[list[str]] = None, timeout: int = 30):
        super().__init__(timeout=timeout)
        self.companies = list(companies) if companies else list(self.DEFAULT_COMPANIES)

    @abstractmethod
    def _get_company_jobs(self, company_id: str) -> list[JobPosting]:
        """All postings on one company's board, or [] if it cannot be read."""
        pass

    def search_jobs(
        self,
        query: str,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        experience_level: Optional[str] = None,
        limit: int = 50,
    ) -> list[JobPosting]:
        jobs = []

        for company in self.companies:
            if len(jobs) >= limit:
                break

            jobs.extend(
                job for job in self._get_company_jobs(company)
                if self.matches_query(job, query)
                and self.matches_location(job, location)
                and self.matches_experience_level(job, experience_level)
            )

        return jobs[:limit]

    @staticmethod
    def company_name(company_id: str) -> str:
        """Display name for a board slug, e.g. "hello-fresh" -> "Hello Fresh"."""
        return company_id.replace("-", " ").title()
