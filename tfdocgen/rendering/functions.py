"""Functions available inside documentation templates during static rendering."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, List

_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_EMPHASIS_RE = re.compile(r"(?<!\w)(\*\*|__|\*|_|`)(.+?)\1(?!\w)")
_ENDRAW_RE = re.compile(r"\{%[-+]?\s*endraw\s*[-+]?%\}")


def trimspace(text: str) -> str:
    return str(text).strip()


def split(text: str, sep: str) -> List[str]:
    return str(text).split(sep)


def plainmarkdown(text: str) -> str:
    """Strip link and emphasis syntax so markdown can be used as plain text."""
    plain = _LINK_RE.sub(r"\1", str(text))
    previous = None
    while previous != plain:
        previous = plain
        plain = _EMPHASIS_RE.sub(r"\2", plain)
    return plain


def codefile(base_dir: Path, fmt: str, path: str) -> str:
    """Return the file at ``path`` wrapped in a fenced code block of ``fmt``."""
    content = (base_dir / path).read_text(encoding="utf-8")
    return f"```{fmt}\n{content.rstrip()}\n```"


def tffile(base_dir: Path, path: str) -> str:
    return codefile(base_dir, "terraform", path)


def escape_template_text(text: str) -> str:
    """Protect literal text that will later be parsed as a template.

    The text is wrapped in a raw block. An ``endraw`` tag inside the text is
    emitted as a string expression between two raw blocks.
    """
    if not any(marker in text for marker in ("{{", "{%", "{#")):
        return text
    body = _ENDRAW_RE.sub(
        lambda match: "{% endraw %}{{ " + _quote(match.group(0)) + " }}{% raw %}",
        text,
    )
    return "{% raw %}" + body + "{% endraw %}"


def directive(func: str, *args: str) -> str:
    """Return a template call such as ``{{ tffile("examples/x.tf") }}``."""
    quoted = ", ".join(_quote(arg) for arg in args)
    return "{{ " + f"{func}({quoted})" + " }}"


def _quote(value: str) -> str:
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


TEMPLATE_FUNCTIONS: Dict[str, Callable[..., object]] = {
    "trimspace": trimspace,
    "split": split,
    "plainmarkdown": plainmarkdown,
}


def bind_functions(base_dir: Path) -> Dict[str, Callable[..., object]]:
    """Return template globals with file readers bound to ``base_dir``."""

    def _codefile(fmt: str, path: str) -> str:
        return codefile(base_dir, fmt, path)

    def _tffile(path: str) -> str:
        return tffile(base_dir, path)

    functions: Dict[str, Callable[..., object]] = dict(TEMPLATE_FUNCTIONS)
    functions["codefile"] = _codefile
    functions["tffile"] = _tffile
    return functions


__all__ = [
    "TEMPLATE_FUNCTIONS",
    "bind_functions",
    "codefile",
    "directive",
    "escape_template_text",
    "plainmarkdown",
    "split",
    "tffile",
    "trimspace",
]
