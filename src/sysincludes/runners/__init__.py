"""Ways of running a compiler probe."""

from sysincludes.runners.base import CompilerRunner
from sysincludes.runners.local import SubprocessRunner

__all__ = ["CompilerRunner", "SubprocessRunner"]
