"""Error hierarchy for include-directory discovery."""

from __future__ import annotations


class IncludeDirsError(Exception):
    """Base error for all library errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class EnvironmentVariableMissingError(IncludeDirsError):
    """The include-path environment variable is not set."""

    def __init__(self, variable: str, *, cause: Exception | None = None):
        super().__init__(f"{variable} environment variable not set", cause=cause)
        self.variable = variable


class CompilerLaunchError(IncludeDirsError):
    """The compiler executable could not be started."""

    def __init__(self, message: str, *, compiler: str, cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.compiler = compiler


class NoIncludeDirectoriesFoundError(IncludeDirsError):
    def __init__(self, message: str = "No include directories found in compiler output"):
        super().__init__(message)
