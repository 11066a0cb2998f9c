"""Discover a C/C++ compiler's default system include directories."""

from sysincludes.config import ProbeConfig
from sysincludes.environment import read_include_env
from sysincludes.errors import (
    CompilerLaunchError,
    EnvironmentVariableMissingError,
    IncludeDirsError,
    NoIncludeDirectoriesFoundError,
)
from sysincludes.parser import normalize_separators, parse_include_dirs, strip_annotation
from sysincludes.resolver import get_include_dirs, probe_compiler
from sysincludes.runners import CompilerRunner, SubprocessRunner
from sysincludes.selector import is_msvc_like_compiler, select_strategy
from sysincludes.types import ExecResult, Platform, Strategy, StrategyKind

__all__ = [
    "CompilerLaunchError",
    "CompilerRunner",
    "EnvironmentVariableMissingError",
    "ExecResult",
    "IncludeDirsError",
    "NoIncludeDirectoriesFoundError",
    "Platform",
    "ProbeConfig",
    "Strategy",
    "StrategyKind",
    "SubprocessRunner",
    "get_include_dirs",
    "is_msvc_like_compiler",
    "normalize_separators",
    "parse_include_dirs",
    "probe_compiler",
    "read_include_env",
    "select_strategy",
]
