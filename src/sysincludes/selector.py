"""Pick how include directories are discovered for a given compiler."""

from __future__ import annotations

import logging
import os
import re
from pathlib import PureWindowsPath

from sysincludes.config import ProbeConfig
from sysincludes.types import Platform, Strategy, StrategyKind

logger = logging.getLogger(__name__)

_MSVC_NAME_RE = re.compile(r"cl(?:\.exe)?$")


def is_msvc_like_compiler(compiler: str | os.PathLike[str]) -> bool:
    """Return True if the compiler's filename looks like cl, cl.exe, clang-cl or clang-cl.exe."""
    name = PureWindowsPath(os.fspath(compiler)).name
    if not name:
        return False
    return _MSVC_NAME_RE.search(name) is not None


def select_strategy(
    compiler: str | os.PathLike[str] | None,
    platform: Platform,
    config: ProbeConfig | None = None,
) -> Strategy:
    """Decide between reading the include variable and probing a compiler."""
    config = config or ProbeConfig()

    if platform is Platform.WINDOWS and compiler is None:
        strategy = Strategy(
            kind=StrategyKind.ENVIRONMENT,
            reason=f"no compiler given on Windows, reading {config.include_variable}",
        )
        logger.debug("Selected %s strategy: %s", strategy.kind.value, strategy.reason)
        return strategy

    if compiler is not None:
        resolved = os.fspath(compiler)
    elif platform is Platform.POSIX:
        resolved = config.posix_default_compiler
    else:
        resolved = config.fallback_compiler

    if platform is Platform.WINDOWS and config.msvc_fallback and is_msvc_like_compiler(resolved):
        strategy = Strategy(
            kind=StrategyKind.ENVIRONMENT,
            reason=f"{resolved} is MSVC-like, reading {config.include_variable}",
        )
    else:
        strategy = Strategy(
            kind=StrategyKind.SUBPROCESS,
            compiler=resolved,
            reason=f"querying {resolved}",
        )
    logger.debug("Selected %s strategy: %s", strategy.kind.value, strategy.reason)
    return strategy
