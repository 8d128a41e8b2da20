"""
Built-in sample listings.

Useful offline and for demos: a fixed set of postings shaped like the ones
the live sources return.
"""

from datetime import datetime, timedelta
from typing import Optional

from .base import JobSource
from resume_matcher.core.models import JobPosting


# (id, title, company, location, description, requirements, salary, url, days ago)
SAMPLE_LISTINGS = (
    (
        "sample_indeed_1",
        "Senior Full Stack Developer",
        "TechCorp Solutions",
        "Remote",
        "We are seeking an experienced Full Stack Developer to join our growing team. "
        "You will work on cutting-edge web applications using React, Node.js, and PostgreSQL.",
        [
            "5+ years of experience with JavaScript/TypeScript",
            "Strong proficiency in React and Node.js",
            "Experience with PostgreSQL or similar databases",
            "Familiarity with Docker and CI/CD",
            "Excellent problem-solving skills",
        ],
        "$120k - $160k",
        "https://www.indeed.com/job/12345",
        2,
    ),
    (
        "sample_indeed_2",
        "React Developer",
        "Innovative Apps Inc",
        "New York, NY",
        "Join our team to build responsive and performant web applications. "
        "We use modern tools like React, TypeScript, and Tailwind CSS.",
        [
            "3+ years React experience",
            "TypeScript proficiency",
            "Experience with REST APIs",
            "Knowledge of modern CSS frameworks",
            "Git version control",
        ],
        "$100k - $140k",
        "https://www.indeed.com/job/12346",
        5,
    ),
    (
        "sample_indeed_3",
        "Junior Software Engineer",
        "StartupXYZ",
        "San Francisco, CA",
        "Looking for a motivated junior developer to join our engineering team. "
        "Great opportunity to learn and grow.",
        [
            "1-2 years programming experience",
            "Knowledge of JavaScript or Python",
            "Familiarity with web development",
            "Strong communication skills",
            "Eagerness to learn",
        ],
        "$80k - $100k",
        "https://www.indeed.com/job/12347",
        1,
    ),
    (
        "sample_linkedin_1",
        "Backend Engineer - Node.js",
        "CloudScale Technologies",
        "Remote - US",
        "We are building scalable microservices and need a talented backend engineer "
        "with Node.js expertise.",
        [
            "Strong Node.js and Express experience",
            "PostgreSQL or MongoDB knowledge",
            "RESTful API design",
            "Docker and Kubernetes",
            "AWS or similar cloud platform",
        ],
        "$110k - $150k",
        "https://www.linkedin.com/jobs/view/12345",
        3,
    ),
    (
        "sample_linkedin_2",
        "Full Stack Developer",
        "DataFlow Systems",
        "Austin, TX (Hybrid)",
        "Join our team working on data visualization tools and analytics dashboards "
        "using React and Python.",
        [
            "React and TypeScript",
            "Python (Django or Flask)",
            "Data visualization libraries",
            "SQL databases",
            "Agile methodology",
        ],
        "$105k - $135k",
        "https://www.linkedin.com/jobs/view/12346",
        4,
    ),
    (
        "sample_remoteok_1",
        "Remote Frontend Developer",
        "GlobalTech Remote",
        "Worldwide Remote",
        "Build beautiful user interfaces for our SaaS platform. "
        "Work from anywhere with a fully distributed team.",
        [
            "React and modern JavaScript",
            "CSS/Tailwind expertise",
            "Responsive design",
            "Git workflow",
            "Strong communication for remote work",
        ],
        "$90k - $130k",
        "https://remoteok.com/remote-jobs/12345",
        6,
    ),
    (
        "sample_remoteok_2",
        "Python Developer (ML Focus)",
        "AI Innovations",
        "Remote",
        "Work on machine learning pipelines and data processing systems using Python "
        "and modern ML frameworks.",
        [
            "Strong Python skills",
            "Machine Learning experience",
            "TensorFlow or PyTorch",
            "Data processing (Pandas, NumPy)",
            "REST API development",
        ],
        "$115k - $145k",
        "https://remoteok.com/remote-jobs/12346",
        7,
    ),
)


class SampleSource(JobSource):
    """Serves the built-in sample listings."""

    @property
    def name(self) -> str:
        return "Sample"

    def search_jobs(
        self,
        query: str,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        experience_level: Optional[str] = None,
        limit: int = 50,
    ) -> list[JobPosting]:
        """Return every sample listing; the query does not narrow them."""
        now = datetime.now()
        jobs = [
            JobPosting(
                id=job_id,
                title=title,
                company=company,
                location=job_location,
                description=description,
                requirements=list(requirements),
                salary=salary,
                job_type="Full-time",
                posted_date=(now - timedelta(days=days_ago)).isoformat(),
                url=url,
                source="sample",
            )
            for (job_id, title, company, job_location, description,
                 requirements, salary, url, days_ago) in SAMPLE_LISTINGS
        ]
        return jobs[:limit]
