"""Fixtures providing a stand-in ``elm`` executable on ``PATH``."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

FAKE_ELM_BODY = '''
import pathlib
import sys
import time

args = sys.argv[1:]
with open(pathlib.Path(__file__).with_name("calls.log"), "a", encoding="utf-8") as log:
    log.write(" ".join(args) + "\\n")

if args[:1] != ["make"]:
    sys.stderr.write("unknown command\\n")
    sys.exit(2)

source = pathlib.Path(args[1])
output = next(arg.split("=", 1)[1] for arg in args if arg.startswith("--output="))
text = source.read_text(encoding="utf-8")
if "BROKEN" in text:
    sys.stderr.write(f"-- SYNTAX PROBLEM ------------- {source.name}\\n")
    sys.exit(1)
if "SLOW" in text:
    time.sleep(0.2)

target = pathlib.Path(output)
target.parent.mkdir(parents=True, exist_ok=True)
mode = "optimized" if "--optimize" in args else "debug"
target.write_text(f"// {mode} build of {source.name}\\n{text}", encoding="utf-8")
print("Success! Compiled 1 module.")
'''


@pytest.fixture
def fake_elm(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Install a fake ``elm`` first on PATH; returns its invocation log path."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "elm"
    script.write_text(f"#!{sys.executable}\n{FAKE_ELM_BODY}", encoding="utf-8")
    script.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir / "calls.log"

