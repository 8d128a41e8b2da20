"""
Configuration management for Resume Matcher.

Settings live in a JSON file laid over DEFAULT_CONFIG. Any dotted key can be
overridden from the environment, e.g. RESUME_MATCHER_UPLOAD_MAX_SIZE_MB for
"upload.max_size_mb".
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os


class Config:
    """Manages application configuration."""

    ENV_PREFIX = "RESUME_MATCHER"

    DEFAULT_CONFIG = {
        "search": {
            "default_keywords": "software engineer developer",
            "default_location": "remote",
            "providers": ["sample", "remotive", "greenhouse", "lever"],
            "limit": 100,
            "parallel": True,
            "timeout": 30,
        },
        "upload": {
            "max_size_mb": 5,
            "min_text_length": 50,
            "upload_dir": "./uploads/resumes",
        },
        "storage": {
            "data_dir": "./profile_data",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Args:
            config_path: Path to config file (default: ~/.resume_matcher/config.json)
        """
        self.config_path = (
            Path(config_path) if config_path
            else Path.home() / ".resume_matcher" / "config.json"
        )
        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Read the config file over a fresh copy of the defaults."""
        config = copy.deepcopy(self.DEFAULT_CONFIG)
        if not self.config_path.exists():
            return config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return self._deep_merge(config, json.load(f))

    @classmethod
    def _deep_merge(cls, base: dict, override: dict) -> dict:
        """Merge override into base section by section; override wins."""
        for key, value in override.items():
            if isinstance(base.get(key), dict) and isinstance(value, dict):
                base[key] = cls._deep_merge(base[key], value)
            else:
                base[key] = value
        return base

    def save(self) -> None:
        """Write the current configuration to the config file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)

    def _env_name(self, key: str) -> str:
        return f"{self.ENV_PREFIX}_{key.replace('.', '_').upper()}"

    def get(self, key: str, default=None):
        """
        Get a configuration value using dot notation.

        Environment values are parsed as JSON when possible so numbers,
        booleans and lists keep their types.

        Args:
            key: Configuration key (e.g., "upload.max_size_mb")
            default: Value returned when the key is not set

        Returns:
            Configuration value
        """
        env_value = os.environ.get(self._env_name(key))
        if env_value:
            try:
                return json.loads(env_value)
            except json.JSONDecodeError:
                return env_value

        section = self.config
        for part in key.split('.'):
            if not isinstance(section, dict) or part not in section:
                return default
            section = section[part]
        return section

    def set(self, key: str, value) -> None:
        """
        Set a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "storage.data_dir")
            value: Value to set
        """
        *parents, leaf = key.split('.')
        section = self.config
        for part in parents:
            section = section.setdefault(part, {})
        section[leaf] = value

    def get_data_dir(self) -> str:
        """Directory holding one JSON file per stored profile."""
        return self.get("storage.data_dir", "./profile_data")

    def get_upload_dir(self) -> str:
        """Directory uploaded resumes are copied to."""
        return self.get("upload.upload_dir", "./uploads/resumes")

    def get_max_upload_bytes(self) -> int:
        return int(float(self.get("upload.max_size_mb", 5)) * 1024 * 1024)

    def print_config(self) -> None:
        print(json.dumps(self.config, indent=2))

    @classmethod
    def create_default_config(cls, path: Optional[str] = None) -> 'Config':
        """Write a config file holding the defaults and return it."""
        config = cls(path)
        config.save()
        return config
