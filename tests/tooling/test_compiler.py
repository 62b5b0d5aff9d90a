"""Tests for the Go compiler adapter."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from tfdocgen.errors import CompileError
from tfdocgen.tooling.compiler import GoCompiler, plugin_platform
from tfdocgen.tooling.runner import CommandResult


def test_compiler_runs_go_build_in_source_dir(tmp_path: Path) -> None:
    calls = []

    def runner(args, *, cwd, env=None, timeout=None):  # type: ignore[no-untyped-def]
        calls.append((list(args), cwd, timeout))
        return CommandResult(args=args, returncode=0)

    output = tmp_path / "plugins" / "terraform-provider-widget"
    compiler = GoCompiler("/usr/local/go/bin/go", runner=runner, timeout=30)

    assert compiler.compile(tmp_path, output) == output
    assert calls == [(["/usr/local/go/bin/go", "build", "-o", str(output)], tmp_path, 30)]


def test_compiler_failure_includes_captured_output(tmp_path: Path) -> None:
    def runner(args, *, cwd, env=None, timeout=None):  # type: ignore[no-untyped-def]
        return CommandResult(args=args, returncode=2, stdout="", stderr="main.go:3: undefined: foo")

    with pytest.raises(CompileError) as excinfo:
        GoCompiler(runner=runner).compile(tmp_path, tmp_path / "out")

    assert "status 2" in str(excinfo.value)
    assert "main.go:3: undefined: foo" in str(excinfo.value)


def test_compiler_missing_executable_is_compile_error(tmp_path: Path) -> None:
    def runner(args, *, cwd, env=None, timeout=None):  # type: ignore[no-untyped-def]
        raise FileNotFoundError(2, "No such file or directory", args[0])

    with pytest.raises(CompileError):
        GoCompiler("missing-go", runner=runner).compile(tmp_path, tmp_path / "out")


def test_compiler_timeout_is_compile_error(tmp_path: Path) -> None:
    def runner(args, *, cwd, env=None, timeout=None):  # type: ignore[no-untyped-def]
        raise subprocess.TimeoutExpired(args, timeout)

    with pytest.raises(CompileError):
        GoCompiler(runner=runner, timeout=1).compile(tmp_path, tmp_path / "out")


@pytest.mark.parametrize(
    ("system", "machine", "expected"),
    [
        ("Linux", "x86_64", "linux_amd64"),
        ("Darwin", "arm64", "darwin_arm64"),
        ("Linux", "aarch64", "linux_arm64"),
        ("Windows", "AMD64", "windows_amd64"),
    ],
)
def test_plugin_platform_uses_go_names(system: str, machine: str, expected: str) -> None:
    assert plugin_platform(system, machine) == expected
