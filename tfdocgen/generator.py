"""Pipeline orchestration: extract schema, synthesize docs, render website."""

from __future__ import annotations

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import GeneratorConfig
from .errors import FileIOError
from .fsutil import copy_tree, reset_dir
from .logging import Report, get_logger
from .rendering.environment import create_static_environment
from .schema_extractor import SchemaExtractor
from .site_renderer import SiteRenderer
from .synthesizer import DocSynthesizer
from .tooling.compiler import GoCompiler
from .tooling.terraform import TerraformCLI


class Generator:
    """Runs the documentation pipeline for a single provider.

    Stages run strictly in order and the first error aborts the run. The
    scratch workspace is removed on every exit path; the rendered website
    directory is only touched by the final stage.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        extractor: SchemaExtractor | None = None,
        synthesizer: DocSynthesizer | None = None,
        site_renderer: SiteRenderer | None = None,
        report: Report | None = None,
    ) -> None:
        self.config = config
        self.logger = get_logger("generator")
        self._report = report or self.logger.info
        # Without an explicit sink each stage reports under its own logger.
        self.extractor = extractor or SchemaExtractor(
            GoCompiler(config.go_path, timeout=config.command_timeout),
            TerraformCLI(config.tf_path, timeout=config.command_timeout),
            report=report,
        )
        self.synthesizer = synthesizer or DocSynthesizer(config, report=report)
        self.site_renderer = site_renderer or SiteRenderer(
            create_static_environment(config.provider_dir),
            template_extension=config.template_extension,
            report=report,
        )

    def generate(self) -> None:
        provider_name = self.config.effective_provider_name
        self._report("rendering website for provider %r", provider_name)

        with self._workspace() as workspace:
            self._copy_existing_docs(workspace)

            self._report("exporting schema from Terraform")
            schema = self.extractor.extract(provider_name, self.config.provider_dir)

            self.synthesizer.synthesize(provider_name, schema, workspace)

            self.site_renderer.render(workspace, self.config.rendered_website_path)

    def _copy_existing_docs(self, workspace: Path) -> None:
        source = self.config.website_source_path
        if not source.exists():
            self._report("no existing content found at %r", self.config.website_source_dir)
            return
        self._report("copying any existing content to tmp dir")
        copy_tree(source, workspace / self.config.website_source_dir)

    @contextmanager
    def _workspace(self) -> Iterator[Path]:
        if self.config.website_tmp_dir is None:
            try:
                workspace = Path(tempfile.mkdtemp(prefix="tfws"))
            except OSError as exc:
                raise FileIOError(f"unable to create tmp dir: {exc}") from exc
        else:
            workspace = self.config.website_tmp_dir
            self._report("cleaning tmp dir %r", str(workspace))
            reset_dir(workspace)

        try:
            yield workspace
        finally:
            self._remove_workspace(workspace)

    def _remove_workspace(self, workspace: Path) -> None:
        try:
            shutil.rmtree(workspace)
        except OSError as exc:
            self.logger.warning("Unable to remove tmp dir %s: %s", workspace, exc)


__all__ = ["Generator"]
