"""
Settings result types and exceptions.
"""

from dataclasses import dataclass, field
from typing import List


class ConfigError(Exception):
    """Raised when the settings storage cannot be used."""


@dataclass
class ValidationResult:
    """Outcome of AppSettings.validate(); invalid only when errors exist."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
