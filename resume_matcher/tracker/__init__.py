"""
Profile storage.
"""

from .profile_store import ProfileStore

__all__ = [
    "ProfileStore",
]
