"""Settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_flag(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _log_level(environ: Mapping[str, str]) -> str:
    level = environ.get("LOG_LEVEL", "INFO").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


@dataclass
class Settings:
    """Runtime settings for override resolution."""

    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "console"
    tracing: bool = False
    atomic: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        AWS_REGION and AWS_ENDPOINT_URL are left unset when absent so boto3
        falls back to its own configuration chain. An unknown LOG_LEVEL
        falls back to INFO.
        """
        environ = os.environ if environ is None else environ
        return cls(
            region=environ.get("AWS_REGION") or None,
            endpoint_url=environ.get("AWS_ENDPOINT_URL") or None,
            log_level=_log_level(environ),
            log_format=environ.get("LOG_FORMAT", "console"),
            tracing=_env_flag(environ, "SSM_OVERRIDES_TRACING"),
            atomic=_env_flag(environ, "SSM_OVERRIDES_ATOMIC"),
        )
