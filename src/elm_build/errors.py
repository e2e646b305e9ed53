"""Exception hierarchy for the Elm build helper."""

from __future__ import annotations

from pathlib import Path


class ElmBuildError(Exception):
    """Base error for build failures surfaced to callers and the CLI."""

    exit_code = 1


class ConfigError(ElmBuildError):
    """Raised when build configuration cannot be loaded or validated."""


class DirectoryReadError(ElmBuildError):
    """Raised when the source directory is missing or unreadable.

    Parameters
    ----------
    directory : Path
        Directory that could not be listed.
    cause : OSError
        Underlying operating-system error.
    """

    def __init__(self, directory: Path, cause: OSError) -> None:
        self.directory = directory
        self.cause = cause
        super().__init__(f"Error reading directory {directory}: {cause}")


class CompileTaskError(ElmBuildError):
    """Failure of a single compile task (spawn error or non-zero exit).

    Parameters
    ----------
    source_name : str
        Base name of the source file the task compiled.
    cause : str | OSError
        Spawn-level ``OSError`` or a short description of the failure.
    returncode : int | None, default=None
        Compiler exit code, ``None`` when the process never started.
    stderr : str, default=""
        Compiler standard error output.
    """

    def __init__(
        self,
        source_name: str,
        cause: str | OSError,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.source_name = source_name
        self.cause = cause
        self.returncode = returncode
        self.stderr = stderr
        detail = f"{cause}: {stderr.strip()}" if stderr.strip() else str(cause)
        super().__init__(f"Error executing compiler for {source_name}: {detail}")
