"""
Settings package for entity-maped.

Type-safe configuration management using Qt's QSettings for
cross-platform storage.

Usage:
    from entity_maped.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigError, ValidationResult

__all__ = [
    "AppSettings",
    "ConfigError",
    "ValidationResult",
]
