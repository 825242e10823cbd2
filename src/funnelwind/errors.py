"""
Error types for FunnelWind loading and configuration.

Rendering itself never raises for content problems: malformed attributes pass
through and malformed styleguide payloads degrade to "not loaded". These
exceptions surface only from strict loader entry points and config loading.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class FunnelWindError(Exception):
    """Base exception for all FunnelWind errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class StyleguideError(FunnelWindError):
    """
    Raised by strict styleguide or brand-asset loading.

    Examples:
    - Invalid JSON or YAML payload
    - Payload is not an object
    - Schema violations (scaleRatio <= 1, non-list catalog)
    """

    pass


class ConfigError(FunnelWindError):
    """
    Raised when funnelwind.toml cannot be read.

    Examples:
    - Invalid TOML syntax
    - Section with the wrong type
    """

    pass


class MarkupError(FunnelWindError):
    """
    Raised when an input document cannot be read at all.

    Examples:
    - Missing input file
    - Undecodable bytes
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location for an error.

    Attributes:
        file: Path to the file being loaded
        key: Optional dotted key inside the payload (e.g. "typography.scaleRatio")
    """

    file: Path
    key: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "styleguide.json (typography.scaleRatio)"
        """
        if self.key:
            return f"{self.file} ({self.key})"
        return str(self.file)
