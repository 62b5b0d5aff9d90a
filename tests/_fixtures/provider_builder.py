"""Helper utilities for constructing throwaway provider directories in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Dict, Mapping

from tfdocgen.config import GeneratorConfig

PROVIDER_NAME = "terraform-provider-widget"


def widget_schema_document(
    resources: Mapping[str, Any] | None = None,
    data_sources: Mapping[str, Any] | None = None,
    *,
    key: str = "registry.terraform.io/hashicorp/widget",
) -> Dict[str, Any]:
    """Return a ``terraform providers schema -json`` document for the widget provider."""
    if resources is None:
        resources = {
            "widget_thing": {
                "version": 0,
                "block": {
                    "description": "Manages a widget thing.",
                    "attributes": {
                        "id": {"type": "string", "computed": True},
                        "name": {"type": "string", "required": True, "description": "Name of the thing."},
                        "tags": {"type": ["map", "string"], "optional": True},
                    },
                },
            }
        }
    if data_sources is None:
        data_sources = {
            "widget_lookup": {
                "version": 0,
                "block": {
                    "attributes": {
                        "name": {"type": "string", "required": True},
                        "value": {"type": "string", "computed": True},
                    },
                },
            }
        }
    return {
        "format_version": "1.0",
        "provider_schemas": {
            key: {
                "provider": {"version": 0, "block": {}},
                "resource_schemas": dict(resources),
                "data_source_schemas": dict(data_sources),
            }
        },
    }


def widget_schema_json(**kwargs: Any) -> str:
    return json.dumps(widget_schema_document(**kwargs))


class ProviderBuilder:
    """Utility for writing files into a provider checkout rooted at tmp_path."""

    def __init__(self, tmp_path: Path, name: str = PROVIDER_NAME) -> None:
        self.root = tmp_path / name
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the provider directory."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def config(self, **overrides: Any) -> GeneratorConfig:
        """Return a config for this provider with the given overrides."""
        return GeneratorConfig(provider_dir=self.root).with_overrides(**overrides)

    def path(self) -> Path:
        return self.root


__all__ = ["PROVIDER_NAME", "ProviderBuilder", "widget_schema_document", "widget_schema_json"]
