"""Runner that launches the compiler as a local subprocess."""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Sequence

from sysincludes.errors import CompilerLaunchError
from sysincludes.types import ExecResult

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Run the compiler with an empty stdin and capture stdout and stderr."""

    def run(self, compiler: str, args: Sequence[str]) -> ExecResult:
        cmd = [compiler, *args]
        logger.debug("Running %s", subprocess.list2cmdline(cmd))
        start = time.monotonic()

        try:
            proc = subprocess.run(
                cmd,
                input=b"",
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            raise CompilerLaunchError(
                f"Failed to execute compiler: {e}", compiler=compiler, cause=e
            ) from e

        duration_ms = int((time.monotonic() - start) * 1000)
        if proc.returncode != 0:
            logger.debug("%s exited with status %d", compiler, proc.returncode)
        return ExecResult(
            stdout=proc.stdout,
            stderr=proc.stderr,
            exit_code=proc.returncode,
            duration_ms=duration_ms,
        )
