"""
Greenhouse ATS job source.

Greenhouse job boards expose a public API that needs no authentication
for reading postings.
"""

from datetime import datetime
from typing import Optional
import html

import requests

from .base import CompanyBoardSource
from resume_matcher.core.models import JobPosting


class GreenhouseSource(CompanyBoardSource):
    """Greenhouse job board source."""

    API_URL = "https://boards-api.greenhouse.io/v1/boards"

    DEFAULT_COMPANIES = (
        "airbnb",
        "doordash",
        "coinbase",
        "instacart",
        "datadog",
        "figma",
        "databricks",
        "plaid",
        "discord",
        "reddit",
    )

    @property
    def name(self) -> str:
        return "Greenhouse"

    def _get_company_jobs(self, company_id: str) -> list[JobPosting]:
        try:
            response = requests.get(
                f"{self.API_URL}/{company_id}/jobs",
                params={"content": "true"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.debug(f"Error fetching {company_id} jobs: {e}")
            return []

        if response.status_code != 200:
            self.logger.debug(f"{company_id}: HTTP {response.status_code}")
            return []

        postings = (self._parse_job(data, company_id) for data in response.json().get("jobs", []))
        return [job for job in postings if job]

    def _parse_job(self, data: dict, company_id: str) -> Optional[JobPosting]:
        try:
            location = data.get("location") or {}
            if isinstance(location, dict):
                location = location.get("name", "")

            # content arrives HTML-escaped
            content = html.unescape(data.get("content", ""))

            updated = data.get("updated_at")
            posted_date = (
                datetime.fromisoformat(updated.replace("Z", "+00:00"))
                if updated else datetime.now()
            )

            return JobPosting(
                id=f"greenhouse_{company_id}_{data.get('id', '')}",
                title=data.get("title", ""),
                company=self.company_name(company_id),
                location=str(location),
                description=self.html_to_text(content),
                requirements=self.extract_requirements(content),
                posted_date=posted_date.isoformat(),
                url=data.get("absolute_url", ""),
                source="greenhouse",
            )
        except (TypeError, ValueError, AttributeError) as e:
            self.logger.error(f"Error parsing Greenhouse job: {e}")
            return None
