"""Pydantic schemas for runtime validation of build configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BuildConfig(BaseModel):
    """Validated configuration for one build run.

    Relative directories are resolved against ``project_root``. Defaults
    describe the layout of a web project that keeps its Elm application under
    ``src/lib/elm`` and serves compiled bundles from ``static/elm``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_root: Path = Field(default_factory=Path.cwd)
    elm_directory: Path = Path("src/lib/elm")
    source_directory: Path = Path("src/lib/elm/src")
    output_directory: Path = Path("static/elm")
    compiler: str = "elm"
    compiler_subcommand: tuple[str, ...] = ("make",)
    source_suffix: str = ".elm"
    target_suffix: str = ".js"
    optimize: bool = True
    regular_files_only: bool = False

    @field_validator("source_suffix", "target_suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError("suffix must start with '.' and name an extension.")
        if "/" in value or "\\" in value:
            raise ValueError("suffix cannot contain path separators.")
        return value

    @field_validator("compiler")
    @classmethod
    def _validate_compiler(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("compiler executable name cannot be empty.")
        return value

    @field_validator("project_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.project_root / path

    @property
    def elm_dir(self) -> Path:
        """Compiler working directory (holds ``elm.json``)."""
        return self._resolve(self.elm_directory)

    @property
    def source_dir(self) -> Path:
        """Directory scanned for source files."""
        return self._resolve(self.source_directory)

    @property
    def output_dir(self) -> Path:
        """Directory receiving compiled output."""
        return self._resolve(self.output_directory)
