"""Compile Elm sources into a web project's static assets."""

from __future__ import annotations

from pathlib import Path

from elm_build.application.results import BuildReport

__version__ = "0.1.0"


def compile_elm_sources(project_root: Path | str, **overrides: object) -> BuildReport:
    """Compile every Elm module of a project.

    Parameters
    ----------
    project_root : Path | str
        Project root; ``pyproject.toml`` there may carry a
        ``[tool.elm-build]`` table.
    **overrides : object
        ``BuildConfig`` field values taking precedence over the file.

    Returns
    -------
    BuildReport
        Per-file outcomes in dispatch order.
    """
    from .application.use_cases import compile_sources
    from .config import load_build_config

    config = load_build_config(Path(project_root), **overrides)
    return compile_sources(config)


__all__ = ["BuildReport", "compile_elm_sources"]
