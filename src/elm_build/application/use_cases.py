"""Application use-cases orchestrating discovery and compile dispatch."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from elm_build.application.ports import BuildReporter, CompilerRunner
from elm_build.application.results import (
    BuildReport,
    CompileOutcome,
    CompileTask,
    SourceFile,
)
from elm_build.errors import CompileTaskError, DirectoryReadError
from elm_build.schemas import BuildConfig

logger = logging.getLogger(__name__)


def output_path_for(
    source_name: str,
    output_dir: Path,
    source_suffix: str,
    target_suffix: str,
) -> Path:
    """Map a source file name to its compiled output path.

    Only the trailing ``source_suffix`` is swapped, so ``Main.elm`` becomes
    ``Main.js`` and a bare ``.elm`` becomes ``.js``.
    """
    if not source_name.endswith(source_suffix):
        raise ValueError(f"{source_name!r} does not end with {source_suffix!r}")
    stem = source_name[: len(source_name) - len(source_suffix)]
    return output_dir / f"{stem}{target_suffix}"


def discover_sources(config: BuildConfig) -> list[SourceFile]:
    """List compilable entries of the source directory (non-recursive).

    Raises
    ------
    DirectoryReadError
        If the source directory does not exist or cannot be listed.
    """
    source_dir = config.source_dir
    try:
        names = os.listdir(source_dir)
    except OSError as exc:
        raise DirectoryReadError(source_dir, exc) from exc

    sources: list[SourceFile] = []
    for name in sorted(names):
        if not name.endswith(config.source_suffix):
            continue
        path = source_dir / name
        if config.regular_files_only and not path.is_file():
            logger.debug("skipping non-file entry %s", path)
            continue
        sources.append(SourceFile(name=name, path=path))
    return sources


def build_task(config: BuildConfig, source: SourceFile) -> CompileTask:
    """Build the compiler argv for one source file."""
    output_path = output_path_for(
        source.name, config.output_dir, config.source_suffix, config.target_suffix
    )
    cwd = config.elm_dir
    argv = [
        config.compiler,
        *config.compiler_subcommand,
        str(source.path),
        f"--output={os.path.relpath(output_path, cwd)}",
    ]
    if config.optimize:
        argv.append("--optimize")
    return CompileTask(source=source, output_path=output_path, argv=tuple(argv), cwd=cwd)


def plan_tasks(config: BuildConfig) -> list[CompileTask]:
    """Discover sources and build their tasks without spawning anything."""
    return [build_task(config, source) for source in discover_sources(config)]


async def _run_task(
    task: CompileTask,
    config: BuildConfig,
    runner: CompilerRunner,
    reporter: BuildReporter,
) -> CompileOutcome:
    display_output = Path(os.path.relpath(task.output_path, config.project_root))
    error: CompileTaskError | None = None
    stdout = ""
    try:
        run = await runner.run(task)
    except CompileTaskError as exc:
        error = exc
    else:
        stdout = run.stdout
        if run.returncode != 0:
            error = CompileTaskError(
                task.source.name,
                f"exit code {run.returncode}",
                returncode=run.returncode,
                stderr=run.stderr,
            )

    outcome = CompileOutcome(
        task=task, display_output=display_output, stdout=stdout, error=error
    )
    if error is None:
        logger.debug("compiled %s -> %s", task.source.name, display_output)
        reporter.task_compiled(outcome)
    else:
        logger.info("compile failed for %s: %s", task.source.name, error)
        reporter.task_failed(outcome)
    return outcome


async def compile_sources_async(
    config: BuildConfig,
    *,
    runner: CompilerRunner | None = None,
    reporter: BuildReporter | None = None,
) -> BuildReport:
    """Use-case: dispatch one compile per source file and join them all.

    Every task is started before any is awaited; there is no concurrency
    limit. Reports are emitted in completion order, while the returned
    :class:`BuildReport` keeps dispatch order.
    """
    from elm_build.adapters.compiler import SubprocessCompilerRunner
    from elm_build.infrastructure.reporting import NullReporter

    runner = runner or SubprocessCompilerRunner()
    reporter = reporter or NullReporter()

    tasks = plan_tasks(config)
    logger.debug("dispatching %d compile task(s) from %s", len(tasks), config.source_dir)
    pending = [
        asyncio.create_task(_run_task(task, config, runner, reporter)) for task in tasks
    ]
    outcomes = await asyncio.gather(*pending)
    return BuildReport(outcomes=tuple(outcomes))


def compile_sources(
    config: BuildConfig,
    *,
    runner: CompilerRunner | None = None,
    reporter: BuildReporter | None = None,
) -> BuildReport:
    """Synchronous entry point for :func:`compile_sources_async`."""
    return asyncio.run(compile_sources_async(config, runner=runner, reporter=reporter))
