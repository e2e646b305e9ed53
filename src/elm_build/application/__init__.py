"""Application-layer use-cases and result objects."""

from __future__ import annotations

from elm_build.application.ports import BuildReporter, CompilerRunner
from elm_build.application.results import (
    BuildReport,
    CompileOutcome,
    CompilerRun,
    CompileTask,
    SourceFile,
)
from elm_build.schemas import BuildConfig


def compile_sources(
    config: BuildConfig,
    *,
    runner: CompilerRunner | None = None,
    reporter: BuildReporter | None = None,
) -> BuildReport:
    """Compile every source file via lazy use-case import."""
    from elm_build.application.use_cases import compile_sources as _impl

    return _impl(config, runner=runner, reporter=reporter)


def plan_tasks(config: BuildConfig) -> list[CompileTask]:
    """Plan compile tasks via lazy use-case import."""
    from elm_build.application.use_cases import plan_tasks as _impl

    return _impl(config)


__all__ = [
    "BuildConfig",
    "BuildReport",
    "CompileOutcome",
    "CompilerRun",
    "CompileTask",
    "SourceFile",
    "compile_sources",
    "plan_tasks",
]
