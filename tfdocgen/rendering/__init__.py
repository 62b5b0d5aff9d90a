"""Template environments and markdown rendering helpers."""

from .documents import DefaultDocTemplate, DocKind
from .environment import create_document_environment, create_static_environment
from .schema_md import render_schema_markdown

__all__ = [
    "DefaultDocTemplate",
    "DocKind",
    "create_document_environment",
    "create_static_environment",
    "render_schema_markdown",
]
