"""Terraform provider documentation generator."""

from .config import GeneratorConfig, PathTemplates, load_config
from .errors import (
    CompileError,
    ConfigError,
    FileIOError,
    GenerationError,
    HostToolError,
    SchemaNotFoundError,
    TemplateError,
)
from .generator import Generator
from .models import ProviderSchema, ProviderSchemas, Schema
from .paths import PathTemplate, provider_short_name, resource_short_name

__all__ = [
    "CompileError",
    "ConfigError",
    "FileIOError",
    "GenerationError",
    "Generator",
    "GeneratorConfig",
    "HostToolError",
    "PathTemplate",
    "PathTemplates",
    "ProviderSchema",
    "ProviderSchemas",
    "Schema",
    "SchemaNotFoundError",
    "TemplateError",
    "load_config",
    "provider_short_name",
    "resource_short_name",
]
