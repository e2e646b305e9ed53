"""Load build configuration from ``pyproject.toml`` or a standalone TOML file."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from elm_build.errors import ConfigError
from elm_build.schemas import BuildConfig

logger = logging.getLogger(__name__)

TOOL_TABLE = "elm-build"


def _read_tool_table(path: Path, *, nested: bool) -> dict[str, object]:
    try:
        payload = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read build configuration {path}: {exc}") from exc
    if not nested:
        return dict(payload)
    tool = payload.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(f"[tool] in {path} must be a table.")
    table = tool.get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {path} must be a table.")
    return dict(table)


def load_build_config(
    project_root: Path | None = None,
    config_path: Path | None = None,
    **overrides: object,
) -> BuildConfig:
    """Build a validated :class:`BuildConfig`.

    Parameters
    ----------
    project_root : Path | None, default=None
        Root directory; defaults to the current working directory.
    config_path : Path | None, default=None
        Explicit TOML file whose top-level keys are config fields. When
        omitted, the ``[tool.elm-build]`` table of
        ``<project_root>/pyproject.toml`` is used if present.
    **overrides : object
        Field values applied last; ``None`` values are ignored.

    Returns
    -------
    BuildConfig
        Validated configuration.

    Raises
    ------
    ConfigError
        If the file cannot be parsed or a value fails validation.
    """
    root = project_root or Path.cwd()
    values: dict[str, object] = {}
    if config_path is not None:
        values.update(_read_tool_table(config_path, nested=False))
    else:
        pyproject = root / "pyproject.toml"
        if pyproject.is_file():
            values.update(_read_tool_table(pyproject, nested=True))

    values = {key.replace("-", "_"): value for key, value in values.items()}
    values.update({key: value for key, value in overrides.items() if value is not None})
    values["project_root"] = root

    try:
        config = BuildConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid build configuration: {exc}") from exc
    logger.debug("loaded build config %s", config)
    return config

