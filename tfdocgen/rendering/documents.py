"""Default documentation template for resources and data sources."""

from __future__ import annotations

from enum import Enum

import jinja2
from jinja2 import Environment

from ..errors import TemplateError
from ..models import Schema
from ..paths import provider_short_name, resource_short_name
from .environment import create_document_environment

DEFAULT_TEMPLATE_NAME = "resource.md.j2"


class DocKind(Enum):
    """Kinds of generated documentation pages."""

    RESOURCE = ("resource", "Resource")
    DATA_SOURCE = ("datasource", "Data Source")

    @property
    def slug(self) -> str:
        return self.value[0]

    @property
    def title(self) -> str:
        return self.value[1]


class DefaultDocTemplate:
    """Renders the markdown stub written for undocumented resources.

    The output is itself a template: example and import files are referenced
    through ``tffile``/``codefile`` calls that are resolved during static
    rendering, and schema text is protected from template parsing.
    """

    def __init__(self, env: Environment | None = None, template_name: str = DEFAULT_TEMPLATE_NAME) -> None:
        self._env = env or create_document_environment()
        self.template_name = template_name

    def render(
        self,
        name: str,
        provider_name: str,
        example_path: str,
        import_path: str,
        schema: Schema,
        *,
        kind: DocKind = DocKind.RESOURCE,
    ) -> str:
        try:
            template = self._env.get_template(self.template_name)
            return template.render(
                name=name,
                short_name=resource_short_name(name, provider_name),
                provider_name=provider_name,
                provider_short_name=provider_short_name(provider_name),
                kind_slug=kind.slug,
                kind_title=kind.title,
                description=schema.block.description.strip(),
                example_path=example_path,
                import_path=import_path,
                schema=schema,
            )
        except jinja2.TemplateError as exc:
            raise TemplateError(f"unable to render {self.template_name}: {exc}") from exc


__all__ = ["DEFAULT_TEMPLATE_NAME", "DefaultDocTemplate", "DocKind"]
