"""Shared fixtures for the resume matcher tests."""

from __future__ import annotations

import os

import pytest

from resume_matcher.utils import Config


SAMPLE_RESUME = (
    "Jane Doe\n"
    "jane@example.com\n"
    "\n"
    "SUMMARY\n"
    "Full stack engineer who likes Python and React.\n"
    "\n"
    "EXPERIENCE\n"
    "Senior Software Engineer\n"
    "Jan 2020 - Present\n"
    "Acme Corp\n"
    "Built React dashboards backed by Node.js services on AWS\n"
    "Led migration to Docker and Kubernetes\n"
    "Software Developer\n"
    "Jun 2017 – Dec 2019\n"
    "Globex Inc\n"
    "Maintained PostgreSQL databases and REST API endpoints\n"
    "\n"
    "EDUCATION\n"
    "Bachelor of Science in Computer Science\n"
    "Massachusetts Institute of Technology\n"
    "2013 - 2017\n"
    "\n"
    "PROJECTS\n"
    "Budget Tracker\n"
    "A personal finance app built with Django and PostgreSQL for tracking spending\n"
    "Supports CSV import and monthly summaries for households\n"
    "Chat Bot\n"
    "Slack bot answering team questions using Python and machine learning\n"
    "\n"
    "SKILLS\n"
    "Python, JavaScript, React, Node.js, Docker, Kubernetes, AWS, PostgreSQL\n"
)


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def config(tmp_path, monkeypatch) -> Config:
    """A config rooted in a temporary directory, isolated from the environment."""
    for name in list(os.environ):
        if name.startswith(Config.ENV_PREFIX + "_"):
            monkeypatch.delenv(name)

    cfg = Config(str(tmp_path / "config.json"))
    cfg.set("storage.data_dir", str(tmp_path / "profiles"))
    cfg.set("upload.upload_dir", str(tmp_path / "uploads"))
    cfg.set("search.providers", ["sample"])
    return cfg
