"""Core configuration, logging and error types.

Exports configuration settings to simplify import paths inside tests
(e.g. `from formkit.core import settings`).
"""

from .config import settings  # noqa: F401
