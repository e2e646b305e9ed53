"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from elm_build.application.results import CompileOutcome, CompilerRun, CompileTask


class CompilerRunner(Protocol):
    """Run one compiler process to completion."""

    async def run(self, task: CompileTask) -> CompilerRun:
        """Spawn the task's argv in ``task.cwd`` and return exit status and output.

        Raises ``CompileTaskError`` when the process cannot be spawned.
        """


class BuildReporter(Protocol):
    """Receive per-task completion reports as they happen."""

    def task_compiled(self, outcome: CompileOutcome) -> None:
        """Report a successful compile."""

    def task_failed(self, outcome: CompileOutcome) -> None:
        """Report a failed compile."""
