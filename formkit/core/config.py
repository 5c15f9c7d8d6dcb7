"""Simple configuration management.

This module defines a ``Settings`` class that reads configuration values
from environment variables (prefixed with ``FORMKIT_``) and provides
sensible defaults. ``.env`` files are loaded from the repository root
first and then from whatever python-dotenv discovers from the current
working directory, without overriding variables that are already set.

Settings are frozen: rendering options are process-wide constants. Code
that needs a different value for a single call takes an explicit keyword
argument instead (see ``xhtml`` on the markup builders).
"""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_THIS_FILE = Path(__file__).resolve()
_REPO_ROOT = _THIS_FILE.parents[2]
_ROOT_ENV = _REPO_ROOT / ".env"

_candidate_envs: list[str] = []
if _ROOT_ENV.exists():
    _candidate_envs.append(str(_ROOT_ENV))

_FOUND_ENV = find_dotenv(usecwd=True)
if _FOUND_ENV and _FOUND_ENV not in _candidate_envs:
    _candidate_envs.append(_FOUND_ENV)

for _env_path in _candidate_envs:
    load_dotenv(dotenv_path=_env_path, override=False)


class Settings(BaseSettings):
    """Rendering and logging settings.

    Any attribute defined here can be overridden by setting the
    corresponding environment variable, e.g. ``FORMKIT_XHTML=1``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORMKIT_",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Close void elements as ``<input ... />`` instead of ``<input ...>``
    XHTML: bool = Field(default=False)

    LOG_LEVEL: str = Field(default="WARNING")


# Instantiate global settings
settings = Settings()
