"""Split defaults loaded from JSON, with an environment override for the path."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..errors import ConfigurationError

CONFIG_ENV_VAR = "THRESHOLD_SECRETS_CONFIG"
_KNOWN_KEYS = {"share_count", "threshold", "log_level", "json_logs"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class SharingConfig:
    share_count: int = 3
    threshold: int = 2
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not 2 <= self.share_count <= 255:
            raise ConfigurationError("share_count must satisfy 2 <= n <= 255")
        if not 2 <= self.threshold <= self.share_count:
            raise ConfigurationError("threshold must satisfy 2 <= t <= share_count")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "SharingConfig":
        if not data:
            return cls()
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        kwargs = {}
        try:
            if "share_count" in data:
                kwargs["share_count"] = int(data["share_count"])
            if "threshold" in data:
                kwargs["threshold"] = int(data["threshold"])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid numeric config value: {exc}") from exc
        if "log_level" in data:
            kwargs["log_level"] = str(data["log_level"]).upper()
        if "json_logs" in data:
            kwargs["json_logs"] = bool(data["json_logs"])
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: Path) -> "SharingConfig":
        path = Path(path)
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid config JSON at {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config at {path} must be a JSON object")
        return cls.from_dict(data)


def resolve_config_path(path: Optional[Path] = None) -> Optional[Path]:
    """Explicit path first, then ``THRESHOLD_SECRETS_CONFIG``; relative paths resolve against cwd."""
    if path is not None:
        candidate = Path(path)
    else:
        env_value = os.getenv(CONFIG_ENV_VAR)
        if not env_value:
            return None
        candidate = Path(env_value)
    if not candidate.is_absolute():
        candidate = (Path.cwd() / candidate).resolve()
    return candidate


def load_sharing_config(path: Optional[Path] = None) -> SharingConfig:
    """Load the config file if one resolves and exists, otherwise defaults."""
    resolved = resolve_config_path(path)
    if resolved is None or not resolved.exists():
        return SharingConfig()
    return SharingConfig.from_file(resolved)
