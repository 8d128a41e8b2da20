"""
Resume Matcher - Resume extraction and job compatibility scoring

This application:
1. Extracts skills, experience, education and projects from a resume PDF
2. Stores the extracted profile per user
3. Fetches job postings from several job sources in parallel
4. Scores each posting against the profile and ranks them by compatibility
"""

__version__ = "1.0.0"
__author__ = "Resume Matcher"
