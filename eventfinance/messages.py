"""Feedback primitives returned by the calculation services."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MessageLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ServiceMessage:
    """A note for the report reader; services return these instead of raising."""

    level: MessageLevel
    text: str

    @classmethod
    def info(cls, text: str) -> "ServiceMessage":
        return cls(MessageLevel.INFO, text)

    @classmethod
    def warning(cls, text: str) -> "ServiceMessage":
        return cls(MessageLevel.WARNING, text)

    @classmethod
    def error(cls, text: str) -> "ServiceMessage":
        return cls(MessageLevel.ERROR, text)

    @property
    def is_error(self) -> bool:
        return self.level == MessageLevel.ERROR
