"""Compiler runner protocol."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from sysincludes.types import ExecResult


@runtime_checkable
class CompilerRunner(Protocol):
    """Interface for anything that can launch a compiler and capture its output.

    Implementations raise CompilerLaunchError when the executable cannot be
    started. A nonzero exit status is reported in the result, not raised.
    """

    def run(self, compiler: str, args: Sequence[str]) -> ExecResult: ...
