"""Runtime settings.

Values come from an optional YAML file named by ``RUDESHARE_CONFIG``, then
``RUDESHARE_*`` environment variables, which win over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml


def _default_data_dir() -> Path:
    return Path.home() / ".rudeshare"


_ENV_VARS = {
    "data_dir": "RUDESHARE_DATA_DIR",
    "max_post_length": "RUDESHARE_MAX_POST_LENGTH",
    "max_comment_length": "RUDESHARE_MAX_COMMENT_LENGTH",
    "cleanup_days": "RUDESHARE_CLEANUP_DAYS",
    "log_level": "RUDESHARE_LOG_LEVEL",
}


@dataclass
class Settings:
    """Board configuration.

    ``data_dir`` holds the Hall of Shame log; everything else on the board
    lives in process memory.
    """

    data_dir: Path = field(default_factory=_default_data_dir)
    max_post_length: int = 2000
    max_comment_length: int = 1000
    cleanup_days: int = 3
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir).expanduser()
        self.max_post_length = int(self.max_post_length)
        self.max_comment_length = int(self.max_comment_length)
        self.cleanup_days = int(self.cleanup_days)
        self.log_level = str(self.log_level).upper()

    @property
    def shame_dir(self) -> Path:
        return self.data_dir / "hall_of_shame"

    @classmethod
    def from_file(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML mapping; unknown keys raise ``ValueError``."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping of settings")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"{path}: unknown settings {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        config_path = env.get("RUDESHARE_CONFIG")
        values: dict = {}
        if config_path:
            base = cls.from_file(config_path)
            values = {f.name: getattr(base, f.name) for f in fields(cls)}
        for name, var in _ENV_VARS.items():
            if env.get(var):
                values[name] = env[var]
        return cls(**values)
