"""
Job Aggregator - Combines results from multiple job sources.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional
import logging

from .base import JobSource
from .greenhouse import GreenhouseSource
from .lever import LeverSource
from .remotive import RemotiveSource
from .sample import SampleSource
from resume_matcher.core.models import JobPosting


SOURCE_CLASSES = {
    "sample": SampleSource,
    "remotive": RemotiveSource,
    "greenhouse": GreenhouseSource,
    "lever": LeverSource,
}

DEFAULT_QUERY = "software engineer developer"
DEFAULT_LOCATION = "remote"


class JobAggregator:
    """Aggregates job listings from multiple sources."""

    def __init__(self, sources: Optional[list[JobSource]] = None, parallel: bool = True):
        """
        Args:
            sources: Job sources to query (default: one of each built-in source)
            parallel: Whether to query sources concurrently
        """
        self.sources: list[JobSource] = (
            sources if sources is not None else [cls() for cls in SOURCE_CLASSES.values()]
        )
        self.parallel = parallel
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(cls, config) -> "JobAggregator":
        """Build an aggregator from the ``search`` section of a Config."""
        timeout = config.get("search.timeout", 30)
        sources = []
        for name in config.get("search.providers", list(SOURCE_CLASSES)):
            source_cls = SOURCE_CLASSES.get(name.lower())
            if source_cls is None:
                logging.getLogger(cls.__name__).warning(f"Unknown job source: {name}")
                continue
            sources.append(source_cls(timeout=timeout))
        return cls(sources=sources, parallel=config.get("search.parallel", True))

    def add_source(self, source: JobSource) -> None:
        """Add a custom job source."""
        self.sources.append(source)

    def get_available_sources(self) -> list[str]:
        return [s.name for s in self.sources if s.is_available()]

    def search(
        self,
        keywords: str = "",
        location: str = "",
        job_type: str = "all",
        experience_level: str = "all",
        limit: int = 100,
        sources: Optional[list[str]] = None,
    ) -> list[JobPosting]:
        """
        Search all (or the named) sources and combine what came back.

        A source that fails is logged and skipped; the rest still count.

        Args:
            keywords: Search query (default: software engineer developer)
            location: Location filter (default: remote)
            job_type: "all" or a job type such as "Full-time"
            experience_level: "all", "entry", "mid" or "senior"
            limit: Max total results
            sources: Source names to use (None = all)

        Returns:
            Deduplicated list of postings
        """
        active = [s for s in self.sources if s.is_available()]
        if sources:
            wanted = {name.lower() for name in sources}
            active = [s for s in active if s.name.lower() in wanted]

        if not active:
            self.logger.warning("No active job sources available")
            return []

        query = keywords or DEFAULT_QUERY
        location = location or DEFAULT_LOCATION
        level = None if experience_level == "all" else experience_level

        if self.parallel:
            all_jobs = self._search_parallel(active, query, location, level, limit)
        else:
            all_jobs = self._search_sequential(active, query, location, level, limit)

        jobs = self.filter_job_type(self.deduplicate(all_jobs), job_type)

        self.logger.info(f"Found {len(jobs)} unique jobs from {len(active)} sources")

        return jobs[:limit]

    def _search_parallel(
        self,
        sources: list[JobSource],
        query: str,
        location: Optional[str],
        experience_level: Optional[str],
        limit: int,
    ) -> list[JobPosting]:
        """Query sources in a thread pool; keep whatever succeeded."""
        results: dict[str, list[JobPosting]] = {}

        with ThreadPoolExecutor(max_workers=len(sources)) as executor:
            futures = {
                executor.submit(
                    source.search_jobs,
                    query=query,
                    location=location,
                    experience_level=experience_level,
                    limit=limit,
                ): source
                for source in sources
            }

            for future in as_completed(futures):
                source = futures[future]
                try:
                    results[source.name] = future.result()
                    self.logger.debug(f"{source.name}: Found {len(results[source.name])} jobs")
                except Exception as e:
                    self.logger.error(f"{source.name} search failed: {e}")

        # merge in source order, not completion order
        all_jobs = []
        for source in sources:
            all_jobs.extend(results.get(source.name, []))
        return all_jobs

    def _search_sequential(
        self,
        sources: list[JobSource],
        query: str,
        location: Optional[str],
        experience_level: Optional[str],
        limit: int,
    ) -> list[JobPosting]:
        """Query sources one after another."""
        all_jobs = []

        for source in sources:
            try:
                jobs = source.search_jobs(
                    query=query,
                    location=location,
                    experience_level=experience_level,
                    limit=limit,
                )
                all_jobs.extend(jobs)
                self.logger.debug(f"{source.name}: Found {len(jobs)} jobs")
            except Exception as e:
                self.logger.error(f"{source.name} search failed: {e}")

        return all_jobs

    @staticmethod
    def deduplicate(jobs: list[JobPosting]) -> list[JobPosting]:
        """Drop repeats of the same title at the same company, keeping the first."""
        seen = set()
        unique_jobs = []
        for job in jobs:
            key = (job.title.lower(), job.company.lower())
            if key not in seen:
                seen.add(key)
                unique_jobs.append(job)
        return unique_jobs

    @staticmethod
    def filter_job_type(jobs: list[JobPosting], job_type: str) -> list[JobPosting]:
        if not job_type or job_type.lower() == "all":
            return jobs
        return [job for job in jobs if job.job_type.lower() == job_type.lower()]
