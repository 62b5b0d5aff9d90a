"""External process boundaries: the Go compiler and the Terraform CLI."""

from .compiler import Compiler, GoCompiler, plugin_platform
from .runner import CommandResult, CommandRunner, run_command
from .terraform import TerraformCLI

__all__ = [
    "CommandResult",
    "CommandRunner",
    "Compiler",
    "GoCompiler",
    "TerraformCLI",
    "plugin_platform",
    "run_command",
]
