"""Tests for tfdocgen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from tfdocgen.config import GeneratorConfig, PathTemplates, load_config
from tfdocgen.errors import ConfigError
from tfdocgen.paths import PathTemplate


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, GeneratorConfig)
    assert config.provider_dir == tmp_path.resolve()
    assert config.provider_name is None
    assert config.effective_provider_name == tmp_path.resolve().name
    assert config.tf_path == "terraform"
    assert config.rendered_website_dir == "website"
    assert config.examples_dir == "examples"
    assert config.website_source_dir == "docs"
    assert config.website_tmp_dir is None
    assert config.template_extension == ".tmpl"
    assert config.paths == PathTemplates()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".tfdocgen.yml").write_text(
        """
provider_name: terraform-provider-widget
terraform: /opt/bin/terraform
command_timeout: 120
website:
  source_dir: site-src
  rendered_dir: public
  tmp_dir: /tmp/tfws-test
templates:
  dir: templates
  resource_doc: "docs/resources/{{ ShortName }}.md.tmpl"
examples:
  dir: samples
  resource: "r/{{ Name }}.tf"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.provider_name == "terraform-provider-widget"
    assert config.effective_provider_name == "terraform-provider-widget"
    assert config.tf_path == "/opt/bin/terraform"
    assert config.command_timeout == 120.0
    assert config.website_source_dir == "site-src"
    assert config.rendered_website_dir == "public"
    assert config.website_tmp_dir == Path("/tmp/tfws-test")
    assert config.templates_dir == tmp_path.resolve() / "templates"
    assert config.examples_dir == "samples"
    assert config.paths.resource_doc == PathTemplate("docs/resources/{{ ShortName }}.md.tmpl")
    assert config.paths.resource_example == PathTemplate("r/{{ Name }}.tf")
    assert config.paths.data_source_doc == PathTemplates().data_source_doc


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".tfdocgen.yml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".tfdocgen.yml").write_text("website: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_with_overrides_ignores_none(tmp_path: Path) -> None:
    config = GeneratorConfig(provider_dir=tmp_path, tf_path="/bin/terraform")

    updated = config.with_overrides(tf_path=None, provider_name="terraform-provider-widget")

    assert updated.tf_path == "/bin/terraform"
    assert updated.provider_name == "terraform-provider-widget"
    assert config.provider_name is None


def test_relative_tmp_dir_resolves_against_provider_root(tmp_path: Path, monkeypatch) -> None:
    provider = tmp_path / "terraform-provider-widget"
    provider.mkdir()
    (provider / ".tfdocgen.yml").write_text("website:\n  tmp_dir: build/tfws\n", encoding="utf-8")
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    config = load_config(provider)

    assert config.website_tmp_dir == provider.resolve() / "build" / "tfws"
