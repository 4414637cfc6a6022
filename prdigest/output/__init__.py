"""Output formatters for prdigest."""

from prdigest.output.base import OutputFormatter
from prdigest.output.console_formatter import ConsoleFormatter

__all__ = [
    "OutputFormatter",
    "ConsoleFormatter",
]
