"""Shared type aliases for build modules."""

from __future__ import annotations

from typing import Literal

type TaskStatus = Literal["compiled", "failed"]
