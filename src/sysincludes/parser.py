"""Parser for gcc-like verbose preprocessor output.

gcc and clang print their header search path on stderr when run with ``-v``::

    #include "..." search starts here:
    #include <...> search starts here:
     /usr/lib/gcc/x86_64-linux-gnu/13/include
     /usr/include
     /System/Library/Frameworks (framework directory)
    End of search list.

Only the ``<...>`` section is collected. Trailing annotations such as
``(framework directory)`` are dropped.
"""

from __future__ import annotations

import re

from sysincludes.errors import NoIncludeDirectoriesFoundError

SEARCH_START_MARKER = "#include <...> search starts here:"
SEARCH_END_MARKER = "End of search list."

# One trailing "(...)" group; parentheses earlier in the path are left alone.
_ANNOTATION_RE = re.compile(r"\s*\([^()]*\)$")


def normalize_separators(path: str) -> str:
    return path.replace("\\", "/")


def strip_annotation(line: str) -> str:
    """Remove a trailing parenthesized annotation and surrounding whitespace."""
    return _ANNOTATION_RE.sub("", line.strip()).strip()


def parse_include_dirs(compiler_output: str) -> list[str]:
    """Extract include directories from the search section of compiler output.

    Raises NoIncludeDirectoriesFoundError if the start marker is missing or the
    section holds no directories.
    """
    dirs: list[str] = []
    in_section = False

    for raw in compiler_output.splitlines():
        line = raw.strip()

        if SEARCH_START_MARKER in line:
            in_section = True
            continue
        if in_section and SEARCH_END_MARKER in line:
            break
        if not in_section or not line:
            continue

        path = strip_annotation(line)
        if path:
            dirs.append(normalize_separators(path))

    if not dirs:
        raise NoIncludeDirectoriesFoundError()
    return dirs
