"""Reporter implementations writing human-readable build progress."""

from __future__ import annotations

import typer

from elm_build.application.results import CompileOutcome


class EchoReporter:
    """Write one line per finished task via ``typer.echo``.

    Successes go to stdout followed by the compiler's own stdout, verbatim.
    Failures go to stderr with the file name and the underlying cause.
    """

    def task_compiled(self, outcome: CompileOutcome) -> None:
        typer.echo(f"Compiled {outcome.task.source.name} to {outcome.display_output}")
        if outcome.stdout:
            typer.echo(outcome.stdout, nl=not outcome.stdout.endswith("\n"))

    def task_failed(self, outcome: CompileOutcome) -> None:
        error = outcome.error
        typer.echo(f"✗ {type(error).__name__}: {error}", err=True)


class NullReporter:
    """Discard reports; callers inspect the returned ``BuildReport`` instead."""

    def task_compiled(self, outcome: CompileOutcome) -> None:
        del outcome

    def task_failed(self, outcome: CompileOutcome) -> None:
        del outcome
