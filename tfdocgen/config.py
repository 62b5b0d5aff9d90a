"""Configuration loading for tfdocgen (.tfdocgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .paths import PathTemplate

CONFIG_FILENAME = ".tfdocgen.yml"


@dataclass(frozen=True)
class PathTemplates:
    """Path templates deciding where docs, examples and imports live.

    Documentation paths are relative to the scratch workspace, example and
    import paths are relative to the examples directory.
    """

    resource_doc: PathTemplate = PathTemplate("docs/r/{{ ShortName }}.html.markdown.tmpl")
    data_source_doc: PathTemplate = PathTemplate("docs/d/{{ ShortName }}.html.markdown.tmpl")
    resource_example: PathTemplate = PathTemplate("resources/{{ ShortName }}/resource.tf")
    resource_import: PathTemplate = PathTemplate("resources/{{ ShortName }}/import.sh")
    data_source_example: PathTemplate = PathTemplate("datasources/{{ ShortName }}/datasource.tf")


@dataclass
class GeneratorConfig:
    """Settings for a single generation run, built once at startup."""

    provider_dir: Path
    provider_name: Optional[str] = None
    tf_path: str = "terraform"
    go_path: str = "go"
    rendered_website_dir: str = "website"
    examples_dir: str = "examples"
    website_source_dir: str = "docs"
    website_tmp_dir: Optional[Path] = None
    template_extension: str = ".tmpl"
    templates_dir: Optional[Path] = None
    command_timeout: Optional[float] = None
    paths: PathTemplates = field(default_factory=PathTemplates)

    @property
    def effective_provider_name(self) -> str:
        return self.provider_name or self.provider_dir.name

    @property
    def rendered_website_path(self) -> Path:
        return self.provider_dir / self.rendered_website_dir

    @property
    def examples_path(self) -> Path:
        return self.provider_dir / self.examples_dir

    @property
    def website_source_path(self) -> Path:
        return self.provider_dir / self.website_source_dir

    def with_overrides(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with every non-``None`` override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def load_config(provider_dir: Path) -> GeneratorConfig:
    """Load configuration for the provider rooted at ``provider_dir``."""
    root = provider_dir.expanduser().resolve()
    config_file = root / CONFIG_FILENAME
    if not config_file.exists():
        return GeneratorConfig(provider_dir=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    website = _as_dict(data.get("website"))
    examples = _as_dict(data.get("examples"))
    templates = _as_dict(data.get("templates"))

    tmp_dir = _as_str(website.get("tmp_dir"))
    templates_dir = _as_str(templates.get("dir"))
    defaults = GeneratorConfig(provider_dir=root)

    return GeneratorConfig(
        provider_dir=root,
        provider_name=_as_str(data.get("provider_name")),
        tf_path=_as_str(data.get("terraform")) or defaults.tf_path,
        go_path=_as_str(data.get("go")) or defaults.go_path,
        rendered_website_dir=_as_str(website.get("rendered_dir")) or defaults.rendered_website_dir,
        examples_dir=_as_str(examples.get("dir")) or defaults.examples_dir,
        website_source_dir=_as_str(website.get("source_dir")) or defaults.website_source_dir,
        website_tmp_dir=root / Path(tmp_dir).expanduser() if tmp_dir else None,
        template_extension=_as_str(website.get("template_extension")) or defaults.template_extension,
        templates_dir=root / templates_dir if templates_dir else None,
        command_timeout=_as_float(data.get("command_timeout")),
        paths=_path_templates(templates, examples),
    )


def _path_templates(templates: Dict[str, Any], examples: Dict[str, Any]) -> PathTemplates:
    defaults = PathTemplates()
    overrides = {
        "resource_doc": templates.get("resource_doc"),
        "data_source_doc": templates.get("data_source_doc"),
        "resource_example": examples.get("resource"),
        "resource_import": examples.get("resource_import"),
        "data_source_example": examples.get("data_source"),
    }
    values = {
        key: PathTemplate(value)
        for key, value in overrides.items()
        if isinstance(value, str)
    }
    return replace(defaults, **values)


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "GeneratorConfig", "PathTemplates", "load_config"]
