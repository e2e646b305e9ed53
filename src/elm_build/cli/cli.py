#!/usr/bin/env python3
"""
elm_build.cli.cli

Typer-based CLI compiling a project's Elm modules into static JavaScript.

Examples
--------
Compile everything under ``src/lib/elm/src`` into ``static/elm``:

    compile-elm build

Show what would be compiled without running the compiler:

    compile-elm plan --project-root ./site
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer

from elm_build.errors import ElmBuildError
from elm_build.schemas import BuildConfig

app = typer.Typer(
    name="compile-elm",
    help="Compile Elm modules to JavaScript for static serving.",
    no_args_is_help=True,
)

PROJECT_ROOT_HELP = "Project root the configured directories resolve against."
CONFIG_HELP = "TOML file with build settings (defaults to [tool.elm-build] in pyproject.toml)."


def _print_build_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly build error.

    Parameters
    ----------
    exc : Exception
        Exception raised while building.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _load_config(
    project_root: Path, config_path: Path | None, **overrides: object
) -> BuildConfig:
    from elm_build.config import load_build_config

    return load_build_config(project_root.resolve(), config_path, **overrides)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks and debug logging."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("build")
def build_cmd(
    ctx: typer.Context,
    project_root: Path = typer.Option(
        Path("."),
        "--project-root",
        file_okay=False,
        help=PROJECT_ROOT_HELP,
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        readable=True,
        help=CONFIG_HELP,
    ),
    no_optimize: bool = typer.Option(
        False,
        "--no-optimize",
        help="Do not pass --optimize to the compiler.",
    ),
) -> None:
    """Compile every source module, one compiler process per file.

    All compiles run concurrently. Exits non-zero when the source directory
    cannot be read or when any module fails to compile.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from elm_build.application import compile_sources
        from elm_build.infrastructure.reporting import EchoReporter

        config = _load_config(
            project_root, config_path, optimize=False if no_optimize else None
        )
        report = compile_sources(config, reporter=EchoReporter())
    except ElmBuildError as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_build_error(exc, debug))

    if not report.ok:
        typer.echo(
            f"✗ {report.failure_count} of {len(report.outcomes)} module(s) failed to compile.",
            err=True,
        )
    raise typer.Exit(code=report.exit_code)


@app.command("plan")
def plan_cmd(
    ctx: typer.Context,
    project_root: Path = typer.Option(
        Path("."),
        "--project-root",
        file_okay=False,
        help=PROJECT_ROOT_HELP,
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        readable=True,
        help=CONFIG_HELP,
    ),
) -> None:
    """List the compile tasks a build would dispatch, without running them."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from elm_build.application import plan_tasks

        config = _load_config(project_root, config_path)
        tasks = plan_tasks(config)
    except ElmBuildError as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))

    if not tasks:
        typer.echo(f"No {config.source_suffix} files in {config.source_dir}")
        return
    for task in tasks:
        typer.echo(f"{task.source.name} -> {task.output_path}")
        typer.echo(f"  $ {' '.join(task.argv)}  (in {task.cwd})")


@app.command("doctor")
def doctor_cmd(
    project_root: Path = typer.Option(
        Path("."),
        "--project-root",
        file_okay=False,
        help=PROJECT_ROOT_HELP,
    ),
) -> None:
    """Print interpreter, package and compiler availability."""
    from elm_build import __version__

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"elm-build: {__version__}")

    try:
        config = _load_config(project_root, None)
    except ElmBuildError as exc:
        typer.echo(f"config: <invalid> ({exc})")
        return

    resolved = shutil.which(config.compiler)
    typer.echo(f"{config.compiler}: {resolved or '<not found>'}")
    typer.echo(f"sources: {config.source_dir}")
    typer.echo(f"output: {config.output_dir}")


if __name__ == "__main__":
    app()
