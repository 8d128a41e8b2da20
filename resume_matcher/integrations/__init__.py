"""
Job sources for public job boards and APIs.
"""

from .base import JobSource, CompanyBoardSource
from .greenhouse import GreenhouseSource
from .lever import LeverSource
from .remotive import RemotiveSource
from .sample import SampleSource
from .aggregator import JobAggregator

__all__ = [
    "JobSource",
    "CompanyBoardSource",
    "GreenhouseSource",
    "LeverSource",
    "RemotiveSource",
    "SampleSource",
    "JobAggregator",
]
