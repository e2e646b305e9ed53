"""Compiler runner adapters."""

from __future__ import annotations

import asyncio
import logging

from elm_build.application.results import CompilerRun, CompileTask
from elm_build.errors import CompileTaskError

logger = logging.getLogger(__name__)


class SubprocessCompilerRunner:
    """Run the compiler as an asyncio subprocess.

    The executable is looked up on ``PATH`` by ``create_subprocess_exec``;
    no shell is involved, so source paths with spaces are passed intact.
    There is no timeout: a hung compiler keeps its task pending.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def run(self, task: CompileTask) -> CompilerRun:
        """Spawn the task's argv in its working directory and wait for exit.

        Raises
        ------
        CompileTaskError
            If the process cannot be started (missing executable, bad cwd,
            permission denied).
        """
        program, *args = task.argv
        try:
            process = await asyncio.create_subprocess_exec(
                program,
                *args,
                cwd=task.cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise CompileTaskError(task.source.name, exc) from exc

        logger.debug("spawned pid=%s: %s", process.pid, " ".join(task.argv))
        stdout, stderr = await process.communicate()
        return CompilerRun(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode(self.encoding, errors="replace"),
            stderr=stderr.decode(self.encoding, errors="replace"),
        )
