"""
Profile Store - Keeps one stored profile per user as JSON files.
"""

from pathlib import Path
from typing import Optional
import json
import logging
import re

from resume_matcher.core.models import Profile, ProfileFragment


class ProfileStore:
    """Stores and retrieves user profiles, upserting by user id."""

    def __init__(self, storage_path: str = "./profile_data"):
        """
        Initialize the profile store.

        Args:
            storage_path: Directory for storing profile data
        """
        self.storage_path = Path(storage_path)
        self.storage_path.mkdir(parents=True, exist_ok=True)

        self.profiles: dict[str, Profile] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

        # Load existing profiles
        self._load_profiles()

    def get_profile(self, user_id: str) -> Optional[Profile]:
        """Get a profile by user id."""
        return self.profiles.get(user_id)

    def list_profiles(self) -> list[Profile]:
        """Get all stored profiles."""
        return list(self.profiles.values())

    def save_profile(self, profile: Profile) -> Profile:
        """Insert or replace a profile."""
        self.profiles[profile.user_id] = profile
        self._save_profile(profile)
        return profile

    def upsert_fragment(
        self,
        user_id: str,
        fragment: ProfileFragment,
        resume_path: Optional[str] = None,
    ) -> Profile:
        """
        Merge a fresh extraction into the user's profile, creating it if needed.

        Args:
            user_id: Opaque user identifier
            fragment: Extraction result to store
            resume_path: Where the uploaded resume was kept

        Returns:
            The stored Profile
        """
        profile = self.profiles.get(user_id)
        if profile is None:
            profile = Profile(user_id=user_id)
            self.logger.info(f"Creating profile for {user_id}")
        else:
            self.logger.info(f"Updating profile for {user_id}")

        profile.apply_fragment(fragment, resume_path=resume_path)
        return self.save_profile(profile)

    def delete_profile(self, user_id: str) -> bool:
        """
        Remove a stored profile.

        Returns:
            True if removed, False if not found
        """
        if user_id not in self.profiles:
            return False

        del self.profiles[user_id]

        filepath = self._profile_path(user_id)
        if filepath.exists():
            filepath.unlink()

        return True

    def _profile_path(self, user_id: str) -> Path:
        safe_id = re.sub(r"[^A-Za-z0-9._-]", "_", user_id)
        return self.storage_path / f"{safe_id}.json"

    def _save_profile(self, profile: Profile) -> None:
        """Save a profile to disk."""
        with open(self._profile_path(profile.user_id), 'w', encoding='utf-8') as f:
            json.dump(profile.to_dict(), f, indent=2, default=str)

    def _load_profiles(self) -> None:
        """Load all saved profiles from disk."""
        for filepath in self.storage_path.glob("*.json"):
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                profile = Profile.from_dict(data)
                if not profile.user_id:
                    self.logger.warning(f"Skipping {filepath}: no user id")
                    continue
                self.profiles[profile.user_id] = profile

            except (OSError, ValueError, TypeError) as e:
                self.logger.error(f"Error loading {filepath}: {e}")

        self.logger.info(f"Loaded {len(self.profiles)} profiles")
