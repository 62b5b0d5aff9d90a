"""Fills gaps in the documentation tree from the provider schema."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional

from .config import GeneratorConfig
from .errors import GenerationError
from .fsutil import file_exists, write_file
from .logging import Report, progress_reporter
from .models import ProviderSchema, Schema
from .paths import PathTemplate
from .rendering.documents import DefaultDocTemplate, DocKind
from .rendering.environment import create_document_environment


class DocSynthesizer:
    """Writes default documentation for resources and data sources lacking it.

    Hand-authored files already present in the workspace always win: an
    entry whose documentation path exists is skipped, never merged.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        doc_template: DefaultDocTemplate | None = None,
        report: Report | None = None,
    ) -> None:
        self.config = config
        self.doc_template = doc_template or DefaultDocTemplate(
            create_document_environment(config.templates_dir)
        )
        self._report = report or progress_reporter("synthesizer")

    def synthesize(self, provider_name: str, schema: ProviderSchema, workspace: Path) -> List[str]:
        """Render missing docs into ``workspace`` and return the paths written."""
        paths = self.config.paths
        written: List[str] = []

        self._report("generating missing resource content")
        written.extend(
            self._synthesize_kind(
                provider_name,
                schema.resource_schemas,
                workspace,
                kind=DocKind.RESOURCE,
                doc_template=paths.resource_doc,
                example_template=paths.resource_example,
                import_template=paths.resource_import,
            )
        )

        self._report("generating missing data source content")
        written.extend(
            self._synthesize_kind(
                provider_name,
                schema.data_source_schemas,
                workspace,
                kind=DocKind.DATA_SOURCE,
                doc_template=paths.data_source_doc,
                example_template=paths.data_source_example,
                import_template=None,
            )
        )

        # Provider index pages have no default template yet.
        self._report("generating missing provider content: not supported, skipping")
        return written

    def _synthesize_kind(
        self,
        provider_name: str,
        schemas: Mapping[str, Schema],
        workspace: Path,
        *,
        kind: DocKind,
        doc_template: PathTemplate,
        example_template: PathTemplate,
        import_template: Optional[PathTemplate],
    ) -> List[str]:
        written: List[str] = []
        for name in sorted(schemas):
            try:
                rel_path = self.synthesize_entry(
                    provider_name,
                    name,
                    schemas[name],
                    workspace,
                    kind=kind,
                    doc_template=doc_template,
                    example_template=example_template,
                    import_template=import_template,
                )
            except GenerationError as exc:
                raise exc.wrap(f"unable to render doc {name!r}") from exc
            if rel_path is not None:
                written.append(rel_path)
        return written

    def synthesize_entry(
        self,
        provider_name: str,
        name: str,
        schema: Schema,
        workspace: Path,
        *,
        kind: DocKind,
        doc_template: PathTemplate,
        example_template: PathTemplate,
        import_template: Optional[PathTemplate] = None,
    ) -> Optional[str]:
        """Write the default doc for one entry.

        Returns the workspace-relative path written, or ``None`` when a
        document already exists there or the path template renders empty.
        """
        try:
            rel_path = doc_template.render(name, provider_name)
        except GenerationError as exc:
            raise exc.wrap(f"unable to render path for {kind.slug} {name!r}") from exc
        if not rel_path:
            self._report("no documentation path for %r, skipping", name)
            return None
        target = workspace / rel_path
        if file_exists(target):
            self._report("%s %r template exists, skipping", kind.slug, name)
            return None

        try:
            example_path = self._resolve_example(example_template, name, provider_name)
        except GenerationError as exc:
            raise exc.wrap(f"unable to render example file path for {name!r}") from exc

        import_path = ""
        if import_template is not None:
            try:
                import_path = self._resolve_example(import_template, name, provider_name)
            except GenerationError as exc:
                raise exc.wrap(f"unable to render example import file path for {name!r}") from exc

        self._report("generating template for %r", name)
        try:
            markdown = self.doc_template.render(
                name,
                provider_name,
                example_path,
                import_path,
                schema,
                kind=kind,
            )
        except GenerationError as exc:
            raise exc.wrap(f"unable to render template for {name!r}") from exc

        write_file(target, markdown)
        return rel_path

    def _resolve_example(self, template: PathTemplate, name: str, provider_name: str) -> str:
        """Return the provider-relative example path, or "" when absent."""
        rendered = template.render(name, provider_name)
        if not rendered:
            return ""
        rel_path = Path(self.config.examples_dir, rendered).as_posix()
        if not file_exists(self.config.provider_dir / rel_path):
            return ""
        return rel_path


__all__ = ["DocSynthesizer"]
