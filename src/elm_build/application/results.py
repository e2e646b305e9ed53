"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from elm_build.errors import CompileTaskError
from elm_build.types import TaskStatus


@dataclass(frozen=True)
class SourceFile:
    """Source file discovered in the input directory."""

    name: str
    path: Path


@dataclass(frozen=True)
class CompileTask:
    """One planned compiler invocation."""

    source: SourceFile
    output_path: Path
    argv: tuple[str, ...]
    cwd: Path


@dataclass(frozen=True)
class CompilerRun:
    """Raw outcome of a finished compiler subprocess."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


@dataclass(frozen=True)
class CompileOutcome:
    """Structured outcome of one compile task."""

    task: CompileTask
    display_output: Path
    stdout: str = ""
    error: CompileTaskError | None = None

    @property
    def status(self) -> TaskStatus:
        return "failed" if self.error is not None else "compiled"

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BuildReport:
    """Aggregate outcome of a build run, in dispatch order."""

    outcomes: tuple[CompileOutcome, ...] = field(default_factory=tuple)

    @property
    def compiled(self) -> list[CompileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.succeeded]

    @property
    def failed(self) -> list[CompileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def ok(self) -> bool:
        return self.failure_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
