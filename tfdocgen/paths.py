"""Templated file paths for examples, imports and documentation targets."""

from __future__ import annotations

from dataclasses import dataclass

import jinja2
from jinja2 import Environment, StrictUndefined

from .errors import TemplateError

PROVIDER_PREFIX = "terraform-provider-"

_ENV = Environment(autoescape=False, undefined=StrictUndefined)


def provider_short_name(name: str) -> str:
    """Return ``name`` without the ``terraform-provider-`` prefix."""
    return name[len(PROVIDER_PREFIX):] if name.startswith(PROVIDER_PREFIX) else name


def resource_short_name(name: str, provider_name: str) -> str:
    """Return ``name`` without the ``<provider short name>_`` prefix."""
    prefix = provider_short_name(provider_name) + "_"
    return name[len(prefix):] if name.startswith(prefix) else name


@dataclass(frozen=True)
class PathTemplate:
    """A path with ``Name`` and ``ShortName`` placeholders.

    ``Name`` is bound to the full resource or data source name and
    ``ShortName`` to the same name with the provider prefix removed::

        >>> PathTemplate("docs/r/{{ ShortName }}.md").render("widget_thing", "terraform-provider-widget")
        'docs/r/thing.md'

    An empty body renders to an empty string, which callers treat as
    "not applicable".
    """

    body: str

    def render(self, name: str, provider_name: str) -> str:
        if not self.body:
            return ""
        try:
            template = _ENV.from_string(self.body)
            return template.render(
                Name=name,
                ShortName=resource_short_name(name, provider_name),
            )
        except jinja2.TemplateError as exc:
            raise TemplateError(f"unable to render path template {self.body!r}: {exc}") from exc


__all__ = ["PROVIDER_PREFIX", "PathTemplate", "provider_short_name", "resource_short_name"]
