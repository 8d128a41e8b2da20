"""
Errors raised by the service layer.

The extractor and matcher never raise; these cover upload validation and
profile lookups.
"""

from typing import Optional


class ResumeMatcherError(Exception):
    """Base class for resume_matcher errors."""


class ResumeUploadError(ResumeMatcherError):
    """A resume upload was rejected."""

    def __init__(self, message: str, suggestion: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.details = details

    def to_dict(self) -> dict:
        data = {"error": self.message}
        if self.details:
            data["details"] = self.details
        if self.suggestion:
            data["suggestion"] = self.suggestion
        return data


class ProfileNotFoundError(ResumeMatcherError):
    """No stored profile exists for the user."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile not found for user: {user_id}")
        self.user_id = user_id
