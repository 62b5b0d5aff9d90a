"""Renders the merged documentation workspace into a static website tree."""

from __future__ import annotations

import shutil
from enum import Enum
from pathlib import Path
from typing import Iterator

import jinja2
from jinja2 import Environment

from .errors import FileIOError, TemplateError
from .fsutil import reset_dir
from .logging import Report, progress_reporter

DEFAULT_TEMPLATE_EXTENSION = ".tmpl"


class RenderAction(Enum):
    COPY = "copy"
    RENDER = "render"


def classify(path: Path | str, template_extension: str = DEFAULT_TEMPLATE_EXTENSION) -> RenderAction:
    """Decide whether a workspace file is rendered or copied verbatim."""
    if Path(path).suffix == template_extension:
        return RenderAction.RENDER
    return RenderAction.COPY


def rendered_name(rel_path: Path, template_extension: str = DEFAULT_TEMPLATE_EXTENSION) -> Path:
    """Return ``rel_path`` with the template extension stripped."""
    if rel_path.suffix == template_extension:
        return rel_path.with_suffix("")
    return rel_path


class SiteRenderer:
    """Copies plain files and renders ``.tmpl`` files into ``output_root``.

    The output directory is wiped before the walk starts. A failure part way
    through leaves whatever was already written in place.
    """

    def __init__(
        self,
        env: Environment,
        *,
        template_extension: str = DEFAULT_TEMPLATE_EXTENSION,
        report: Report | None = None,
    ) -> None:
        self._env = env
        self.template_extension = template_extension
        self._report = report or progress_reporter("site")

    def render(self, workspace_root: Path, output_root: Path) -> None:
        self._report("cleaning rendered website dir")
        reset_dir(output_root)

        self._report("rendering templated website to static markdown")
        for path in self._walk(workspace_root):
            rel = path.relative_to(workspace_root)
            action = classify(rel, self.template_extension)
            destination = output_root / rendered_name(rel, self.template_extension)
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FileIOError(f"unable to create directory for {rel.as_posix()!r}: {exc}") from exc

            if action is RenderAction.COPY:
                self._report("copying non-template file: %r", rel.as_posix())
                self._copy(path, destination, rel)
            else:
                self._report("rendering %r", rel.as_posix())
                self._render_file(path, destination, rel)

    @staticmethod
    def _walk(root: Path) -> Iterator[Path]:
        for path in sorted(root.rglob("*")):
            if path.is_file():
                yield path

    @staticmethod
    def _copy(source: Path, destination: Path, rel: Path) -> None:
        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            raise FileIOError(f"unable to copy file {rel.as_posix()!r}: {exc}") from exc

    def _render_file(self, source: Path, destination: Path, rel: Path) -> None:
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileIOError(f"unable to read file {rel.as_posix()!r}: {exc}") from exc

        # Template functions read example files; their I/O and decode errors
        # surface here.
        try:
            rendered = self._env.from_string(text).render()
        except (jinja2.TemplateError, OSError, UnicodeDecodeError) as exc:
            raise TemplateError(f"unable to render template {rel.as_posix()!r}: {exc}") from exc

        try:
            destination.write_text(rendered, encoding="utf-8")
        except OSError as exc:
            raise FileIOError(f"unable to write file {rel.as_posix()!r}: {exc}") from exc


__all__ = ["DEFAULT_TEMPLATE_EXTENSION", "RenderAction", "SiteRenderer", "classify", "rendered_name"]
