"""
Lever ATS job source.

Lever exposes a public postings API per company.
"""

from datetime import datetime
from typing import Optional

import requests

from .base import CompanyBoardSource
from resume_matcher.core.models import JobPosting


class LeverSource(CompanyBoardSource):
    """Lever job board source."""

    API_URL = "https://api.lever.co/v0/postings"

    DEFAULT_COMPANIES = (
        "netflix",
        "lyft",
        "robinhood",
        "cloudflare",
        "netlify",
        "hashicorp",
        "pagerduty",
        "gusto",
        "sourcegraph",
        "linear",
    )

    @property
    def name(self) -> str:
        return "Lever"

    def _get_company_jobs(self, company_id: str) -> list[JobPosting]:
        try:
            response = requests.get(
                f"{self.API_URL}/{company_id}",
                params={"mode": "json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.debug(f"Error fetching {company_id} Lever jobs: {e}")
            return []

        if response.status_code != 200:
            self.logger.debug(f"{company_id}: HTTP {response.status_code}")
            return []

        postings = (self._parse_job(data, company_id) for data in response.json())
        return [job for job in postings if job]

    def _parse_job(self, data: dict, company_id: str) -> Optional[JobPosting]:
        try:
            categories = data.get("categories") or {}

            # each list is a heading ("Requirements", "What you'll do") over <li> items
            requirements = []
            for section in data.get("lists", []):
                requirements.extend(self.extract_requirements(section.get("content", "")))

            description = data.get("descriptionPlain") or self.html_to_text(data.get("description", ""))

            created = data.get("createdAt")
            posted_date = datetime.fromtimestamp(created / 1000) if created else datetime.now()

            return JobPosting(
                id=f"lever_{company_id}_{data.get('id', '')}",
                title=data.get("text", ""),
                company=self.company_name(company_id),
                location=categories.get("location") or "",
                description=description.strip(),
                requirements=requirements,
                job_type=categories.get("commitment") or "Full-time",
                posted_date=posted_date.isoformat(),
                url=data.get("hostedUrl", ""),
                source="lever",
            )
        except (TypeError, ValueError, AttributeError) as e:
            self.logger.error(f"Error parsing Lever job: {e}")
            return None
