"""Builds the provider binary into a local plugin directory."""

from __future__ import annotations

import platform
import subprocess
from pathlib import Path
from typing import Protocol

from ..errors import CompileError
from .runner import CommandRunner, run_command

_GOARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
}


def plugin_platform(system: str | None = None, machine: str | None = None) -> str:
    """Return the ``<os>_<arch>`` directory name Terraform expects for plugins."""
    goos = (system or platform.system()).lower()
    raw_arch = (machine or platform.machine()).lower()
    return f"{goos}_{_GOARCH.get(raw_arch, raw_arch)}"


class Compiler(Protocol):
    def compile(self, source_dir: Path, output_path: Path) -> Path: ...


class GoCompiler:
    """Compiles a Go provider with ``go build``."""

    def __init__(
        self,
        go_path: str = "go",
        *,
        runner: CommandRunner | None = None,
        timeout: float | None = None,
    ) -> None:
        self.go_path = go_path
        self._runner = runner or run_command
        self.timeout = timeout

    def compile(self, source_dir: Path, output_path: Path) -> Path:
        args = [self.go_path, "build", "-o", str(output_path)]
        try:
            result = self._runner(args, cwd=source_dir, timeout=self.timeout)
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise CompileError(f"unable to run {self.go_path!r}: {exc}") from exc
        if result.returncode != 0:
            raise CompileError(
                f"go build exited with status {result.returncode}:\n{result.output}"
            )
        return output_path


__all__ = ["Compiler", "GoCompiler", "plugin_platform"]
