"""Exports a provider's schema by building it and asking Terraform for it."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from .errors import FileIOError, GenerationError, HostToolError, SchemaNotFoundError
from .fsutil import write_file
from .logging import Report, progress_reporter
from .models import ProviderSchema, ProviderSchemas
from .paths import provider_short_name
from .tooling.compiler import Compiler, plugin_platform
from .tooling.terraform import TerraformCLI

REGISTRY_NAMESPACE = "registry.terraform.io/hashicorp"
PLUGIN_VERSION = "0.0.1"
PLUGIN_DIR = "plugins"


def plugin_binary_path(root: Path, short_name: str, platform_dir: str | None = None) -> Path:
    """Return where Terraform's local plugin discovery looks for the provider."""
    return (
        root
        / PLUGIN_DIR
        / REGISTRY_NAMESPACE
        / short_name
        / PLUGIN_VERSION
        / (platform_dir or plugin_platform())
        / f"terraform-provider-{short_name}"
    )


def parse_provider_schemas(output: str) -> ProviderSchemas:
    """Parse ``terraform providers schema -json`` output."""
    if not output.strip():
        raise HostToolError("terraform produced no schema output")
    try:
        data = json.loads(output)
    except json.JSONDecodeError as exc:
        raise HostToolError(f"unable to parse schema JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise HostToolError("schema JSON must contain an object at the root")
    return ProviderSchemas.from_dict(data)


class SchemaExtractor:
    """Compiles the provider, stages a Terraform project and exports its schema."""

    def __init__(
        self,
        compiler: Compiler,
        terraform: TerraformCLI,
        *,
        report: Report | None = None,
    ) -> None:
        self.compiler = compiler
        self.terraform = terraform
        self._report = report or progress_reporter("schema")

    def extract(self, provider_name: str, source_dir: Path) -> ProviderSchema:
        short_name = provider_short_name(provider_name)
        try:
            with tempfile.TemporaryDirectory(prefix="tfws") as tmp:
                schemas = self._export(short_name, source_dir, Path(tmp))
        except OSError as exc:
            raise FileIOError(f"unable to prepare schema workspace: {exc}") from exc
        except GenerationError as exc:
            raise exc.wrap(f"unable to export schema for provider {short_name!r}") from exc
        return self.lookup(schemas, short_name)

    @staticmethod
    def lookup(schemas: ProviderSchemas, short_name: str) -> ProviderSchema:
        """Find the provider by bare short name, then by registry address."""
        if short_name in schemas.schemas:
            return schemas.schemas[short_name]
        qualified = f"{REGISTRY_NAMESPACE}/{short_name}"
        if qualified in schemas.schemas:
            return schemas.schemas[qualified]
        raise SchemaNotFoundError(
            f"unable to find schema in JSON for provider {short_name!r}",
            provider_name=short_name,
        )

    def _export(self, short_name: str, source_dir: Path, work_dir: Path) -> ProviderSchemas:
        self._report("compiling provider %r", short_name)
        self.compiler.compile(source_dir, plugin_binary_path(work_dir, short_name))

        write_file(work_dir / "provider.tf", f'\nprovider "{short_name}" {{\n}}\n')

        self._report("initializing terraform in %s", work_dir)
        self.terraform.init_local(work_dir, f"./{PLUGIN_DIR}")

        self._report("reading provider schema")
        output = self.terraform.providers_schema(work_dir)
        return parse_provider_schemas(output)


__all__ = [
    "PLUGIN_VERSION",
    "REGISTRY_NAMESPACE",
    "SchemaExtractor",
    "parse_provider_schemas",
    "plugin_binary_path",
]
