"""Public file-based build API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from elm_build.application.ports import BuildReporter, CompilerRunner
from elm_build.application.results import BuildReport
from elm_build.application.use_cases import compile_sources
from elm_build.config import load_build_config


def build_static_assets(
    project_root: Path,
    config_path: Path | None = None,
    *,
    optimize: bool | None = None,
    runner: CompilerRunner | None = None,
    reporter: BuildReporter | None = None,
) -> BuildReport:
    """Compile the project's Elm sources into its static-assets directory."""
    config = load_build_config(project_root, config_path, optimize=optimize)
    return compile_sources(config, runner=runner, reporter=reporter)
