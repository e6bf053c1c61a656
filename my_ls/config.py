"""Runtime settings read from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

DEBUG_ENV_VAR = "MY_LS_DEBUG"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    debug: bool = False


def load_settings(environ: Mapping[str, str]) -> Settings:
    """Build Settings from an environment mapping such as ``os.environ``."""
    raw = environ.get(DEBUG_ENV_VAR, "")
    return Settings(debug=raw.strip().lower() in _TRUTHY)
