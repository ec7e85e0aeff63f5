"""
Result handling for pipeline stages.

Provides structured result objects with consistent message formatting.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


class ResultLevel(Enum):
    """Result severity levels."""

    WARNING = "warning"
    ERROR = "error"


@dataclass
class ResultMessage:
    """Single result message."""

    level: ResultLevel
    message: str
    details: Optional[str] = None

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" ({self.details})"
        return base


@dataclass
class OperationResult:
    """Messages collected while processing a single font.

    Warnings are degraded-but-expected outcomes (a missing table); errors are
    failures that cost a whole stage. Both end up in the record's warnings.
    """

    messages: List[ResultMessage] = field(default_factory=list)

    def add_message(self, level: ResultLevel, message: str, details: Optional[str] = None):
        """Add a message to the result."""
        self.messages.append(ResultMessage(level, message, details))

    def add_warning(self, message: str, details: Optional[str] = None):
        """Add a warning message."""
        self.add_message(ResultLevel.WARNING, message, details)

    def add_error(self, message: str, details: Optional[str] = None):
        """Add an error message."""
        self.add_message(ResultLevel.ERROR, message, details)

    def extend(self, warnings: List[str]):
        """Add plain warning strings produced by a stage."""
        for warning in warnings:
            self.add_warning(warning)

    def warning_strings(self) -> List[str]:
        """Flatten warnings and errors into the record's warning list."""
        return [str(m) for m in self.messages]

    def emit_all(self, name: str = ""):
        """Emit all messages to the module logger."""
        level_map = {
            ResultLevel.WARNING: logging.WARNING,
            ResultLevel.ERROR: logging.ERROR,
        }
        prefix = f"{name}: " if name else ""
        for msg in self.messages:
            logger.log(level_map[msg.level], "%s%s", prefix, msg)
