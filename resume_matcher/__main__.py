"""
Run the resume matcher CLI: extract resumes, store profiles, rank jobs.

Usage:
    python -m resume_matcher upload --user alice --file resume.pdf
    python -m resume_matcher search --user alice --top 5
"""

from resume_matcher.cli import main

if __name__ == "__main__":
    main()
