"""Include directories from a Windows-style INCLUDE variable."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from sysincludes.errors import EnvironmentVariableMissingError
from sysincludes.parser import normalize_separators

logger = logging.getLogger(__name__)


def read_include_env(
    environ: Mapping[str, str] | None = None,
    variable: str = "INCLUDE",
) -> list[str]:
    """Split a ``;``-separated include variable into directories.

    Empty segments are dropped and backslashes become forward slashes. A value
    made only of separators yields an empty list.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(variable)
    if value is None:
        raise EnvironmentVariableMissingError(variable)

    dirs = [normalize_separators(part) for part in value.split(";") if part]
    logger.debug("Read %d directories from %s", len(dirs), variable)
    return dirs
