"""Jinja2 environments shared by the path, document and static renderers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..models import Schema
from .functions import bind_functions, directive, escape_template_text, plainmarkdown, trimspace
from .schema_md import render_schema_markdown

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


def create_document_environment(templates_dir: Path | None = None) -> Environment:
    """Environment for the default documentation templates.

    A user supplied ``templates_dir`` takes precedence over the packaged
    templates so a single file can be overridden.
    """
    loader = FileSystemLoader(_ordered_dirs([templates_dir, DEFAULT_TEMPLATES_DIR]))
    env = Environment(
        loader=loader,
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.globals["directive"] = directive
    env.filters["schemamd"] = _schema_markdown
    env.filters["template_text"] = escape_template_text
    env.filters["plainmarkdown"] = plainmarkdown
    return env


def create_static_environment(base_dir: Path) -> Environment:
    """Environment used to render ``.tmpl`` files with no data context.

    Template functions that read files resolve paths against ``base_dir``.
    """
    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.globals.update(bind_functions(base_dir))
    env.filters["trimspace"] = trimspace
    env.filters["plainmarkdown"] = plainmarkdown
    return env


def _schema_markdown(schema: Schema) -> str:
    return escape_template_text(render_schema_markdown(schema))


def _ordered_dirs(directories: Iterable[Path | None]) -> list[str]:
    # ensure uniqueness preserving order
    seen: set[str] = set()
    ordered: list[str] = []
    for directory in directories:
        if directory is None:
            continue
        key = str(directory)
        if key not in seen:
            ordered.append(key)
            seen.add(key)
    return ordered


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "create_document_environment",
    "create_static_environment",
]
