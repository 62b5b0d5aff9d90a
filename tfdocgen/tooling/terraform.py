"""Adapter for the Terraform CLI."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Sequence

from ..errors import HostToolError
from .runner import CommandRunner, run_command


class TerraformCLI:
    """Executes Terraform commands with captured output."""

    def __init__(
        self,
        tf_path: str = "terraform",
        *,
        runner: CommandRunner | None = None,
        timeout: float | None = None,
    ) -> None:
        self.tf_path = tf_path
        self._runner = runner or run_command
        self.timeout = timeout

    def run(self, args: Sequence[str], *, cwd: Path) -> str:
        """Run ``terraform <args>`` in ``cwd`` and return its stdout."""
        command = [self.tf_path, *args]
        env = os.environ.copy()
        env["CHECKPOINT_DISABLE"] = "1"
        env["TF_IN_AUTOMATION"] = "1"
        try:
            result = self._runner(command, cwd=cwd, env=env, timeout=self.timeout)
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise HostToolError(f"unable to run {self.tf_path!r}: {exc}") from exc
        if result.returncode != 0:
            raise HostToolError(
                f"terraform {' '.join(args)} exited with status {result.returncode}:\n{result.output}"
            )
        return result.stdout

    def init_local(self, work_dir: Path, plugin_dir: str = "./plugins") -> str:
        """Initialize ``work_dir`` resolving providers only from ``plugin_dir``."""
        return self.run(["init", "-get=false", f"-plugin-dir={plugin_dir}"], cwd=work_dir)

    def providers_schema(self, work_dir: Path) -> str:
        return self.run(["providers", "schema", "-json"], cwd=work_dir)


__all__ = ["TerraformCLI"]
