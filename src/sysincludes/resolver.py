"""Top-level include directory discovery."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from sysincludes.config import ProbeConfig
from sysincludes.environment import read_include_env
from sysincludes.parser import parse_include_dirs
from sysincludes.runners.base import CompilerRunner
from sysincludes.runners.local import SubprocessRunner
from sysincludes.selector import select_strategy
from sysincludes.types import Platform, StrategyKind

logger = logging.getLogger(__name__)


def probe_compiler(
    compiler: str,
    runner: CompilerRunner | None = None,
    config: ProbeConfig | None = None,
) -> list[str]:
    """Run a gcc-like compiler in verbose preprocess mode and parse its stderr.

    The exit status is ignored; some compilers print the search list and then
    fail on the empty translation unit.
    """
    runner = runner or SubprocessRunner()
    config = config or ProbeConfig()
    result = runner.run(compiler, config.probe_args)
    stderr = result.stderr.decode("utf-8", errors="replace")
    return parse_include_dirs(stderr)


def get_include_dirs(
    compiler: str | os.PathLike[str] | None = None,
    *,
    platform: Platform | None = None,
    runner: CompilerRunner | None = None,
    environ: Mapping[str, str] | None = None,
    config: ProbeConfig | None = None,
) -> list[str]:
    """Return the compiler's system include directories in search order.

    Without a compiler, Windows reads ``INCLUDE`` and other platforms query the
    default ``c++``. Raises an IncludeDirsError subclass on failure.
    """
    platform = platform or Platform.current()
    config = config or ProbeConfig()
    strategy = select_strategy(compiler, platform, config)

    if strategy.kind is StrategyKind.SUBPROCESS and strategy.compiler is not None:
        dirs = probe_compiler(strategy.compiler, runner=runner, config=config)
    else:
        dirs = read_include_env(environ, config.include_variable)

    logger.debug("Found %d include directories", len(dirs))
    return dirs
