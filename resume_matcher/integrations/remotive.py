"""
Remotive job source - remote-first jobs worldwide.
"""

from typing import Optional

import requests

from .base import JobSource
from resume_matcher.core.models import JobPosting


class RemotiveSource(JobSource):
    """Remotive public API source."""

    API_URL = "https://remotive.com/api/remote-jobs"

    # Remotive job_type values mapped to display names
    JOB_TYPES = {
        "full_time": "Full-time",
        "part_time": "Part-time",
        "contract": "Contract",
        "freelance": "Freelance",
        "internship": "Internship",
    }

    @property
    def name(self) -> str:
        return "Remotive"

    def search_jobs(
        self,
        query: str,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        experience_level: Optional[str] = None,
        limit: int = 50,
    ) -> list[JobPosting]:
        """Search Remotive for remote jobs."""
        try:
            response = requests.get(
                self.API_URL,
                params={"search": query, "limit": limit},
                timeout=self.timeout,
            )

            if response.status_code != 200:
                self.logger.debug(f"HTTP {response.status_code}")
                return []

            jobs = []
            for job_data in response.json().get("jobs", []):
                job = self._parse_job(job_data)
                if job and self.matches_experience_level(job, experience_level):
                    jobs.append(job)

            return jobs[:limit]

        except requests.RequestException as e:
            self.logger.debug(f"Error fetching Remotive jobs: {e}")
            return []

    def _parse_job(self, data: dict) -> Optional[JobPosting]:
        try:
            content = data.get("description", "")
            requirements = self.extract_requirements(content) or list(data.get("tags", []))

            return JobPosting(
                id=f"remotive_{data['id']}",
                title=data.get("title", ""),
                company=data.get("company_name", ""),
                location=data.get("candidate_required_location", "") or "Remote",
                description=self.html_to_text(content),
                requirements=requirements,
                salary=data.get("salary") or None,
                job_type=self.JOB_TYPES.get(data.get("job_type", ""), "Full-time"),
                posted_date=data.get("publication_date", ""),
                url=data.get("url", ""),
                source="remotive",
            )
        except (KeyError, TypeError) as e:
            self.logger.error(f"Error parsing Remotive job: {e}")
            return None
