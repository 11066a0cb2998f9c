"""Core value types."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class Platform(Enum):
    WINDOWS = "windows"
    POSIX = "posix"
    OTHER = "other"

    @classmethod
    def current(cls) -> Platform:
        """Detect the platform family of the running interpreter."""
        if os.name == "nt":
            return cls.WINDOWS
        if os.name == "posix":
            return cls.POSIX
        return cls.OTHER


class StrategyKind(Enum):
    ENVIRONMENT = "environment"
    SUBPROCESS = "subprocess"


@dataclass(frozen=True)
class Strategy:
    kind: StrategyKind
    compiler: str | None = None
    reason: str = ""


@dataclass
class ExecResult:
    stdout: bytes = b""
    stderr: bytes = b""
    exit_code: int = 0
    duration_ms: int = 0
