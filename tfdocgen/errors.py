"""Error taxonomy for tfdocgen pipeline stages."""

from __future__ import annotations

from typing import TypeVar

_E = TypeVar("_E", bound="GenerationError")


class GenerationError(RuntimeError):
    """Base class for every failure raised by the generation pipeline."""

    def wrap(self: _E, context: str) -> _E:
        """Return an error of the same kind prefixed with ``context``.

        Extra attributes set on the original (for example ``provider_name``)
        are carried over, and the original is chained as ``__cause__``.
        """
        wrapped = type(self).__new__(type(self))
        wrapped.__dict__.update(self.__dict__)
        RuntimeError.__init__(wrapped, f"{context}: {self}")
        wrapped.__cause__ = self
        return wrapped


class CompileError(GenerationError):
    """Raised when the provider binary cannot be built."""


class HostToolError(GenerationError):
    """Raised when Terraform exits non-zero or emits unparseable output."""


class SchemaNotFoundError(GenerationError):
    """Raised when the schema output lacks the requested provider."""

    def __init__(self, message: str, *, provider_name: str = "") -> None:
        super().__init__(message)
        self.provider_name = provider_name


class TemplateError(GenerationError):
    """Raised when a path or document template is malformed or incomplete."""


class FileIOError(GenerationError):
    """Raised when creating, reading, writing or removing a file fails."""


class ConfigError(GenerationError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "CompileError",
    "ConfigError",
    "FileIOError",
    "GenerationError",
    "HostToolError",
    "SchemaNotFoundError",
    "TemplateError",
]
