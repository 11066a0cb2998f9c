"""Probe configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PROBE_ARGS = ("-v", "-E", "-x", "c++", "-")


@dataclass(frozen=True)
class ProbeConfig:
    """Knobs for strategy selection and the compiler probe.

    The defaults reproduce the stock behaviour: read ``INCLUDE`` on Windows,
    query ``/usr/bin/c++`` on POSIX and ``c++`` from ``PATH`` elsewhere.
    """

    include_variable: str = "INCLUDE"
    posix_default_compiler: str = "/usr/bin/c++"
    fallback_compiler: str = "c++"
    probe_args: tuple[str, ...] = DEFAULT_PROBE_ARGS
    # Treat cl / clang-cl on Windows as environment-driven toolchains.
    msvc_fallback: bool = True
