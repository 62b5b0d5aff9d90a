"""Renders a resource or data source schema as markdown."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from ..models import Schema, SchemaAttribute, SchemaBlock, SchemaBlockType

_PRIMITIVE_TYPES = {
    "string": "String",
    "number": "Number",
    "bool": "Boolean",
    "dynamic": "Dynamic",
}

_COLLECTION_TYPES = {
    "list": "List",
    "set": "Set",
    "map": "Map",
}

_BLOCK_LABELS = {
    "list": "Block List",
    "set": "Block Set",
    "map": "Block Map",
}

_GROUPS = (("required", "Required"), ("optional", "Optional"), ("read_only", "Read-Only"))


def type_name(attribute_type: Any) -> str:
    """Return a human readable name for a cty JSON type expression."""
    if isinstance(attribute_type, str):
        return _PRIMITIVE_TYPES.get(attribute_type, attribute_type.capitalize())
    if isinstance(attribute_type, (list, tuple)) and attribute_type:
        kind = attribute_type[0]
        if kind in _COLLECTION_TYPES and len(attribute_type) > 1:
            return f"{_COLLECTION_TYPES[kind]} of {type_name(attribute_type[1])}"
        if kind == "object":
            return "Object"
        if kind == "tuple":
            return "Tuple"
    return "Dynamic"


def block_type_label(block_type: SchemaBlockType) -> str:
    label = _BLOCK_LABELS.get(block_type.nesting_mode, "Block")
    if block_type.min_items:
        label += f", Min: {block_type.min_items}"
    if block_type.max_items:
        label += f", Max: {block_type.max_items}"
    return label


def render_schema_markdown(schema: Schema) -> str:
    """Render ``schema`` as a ``## Schema`` section with nested block anchors."""
    lines: List[str] = ["## Schema"]
    nested: List[Tuple[Sequence[str], SchemaBlockType]] = []
    _render_block(schema.block, (), lines, nested)

    while nested:
        path, block_type = nested.pop(0)
        lines.append("")
        lines.append(f'<a id="{_anchor(path)}"></a>')
        lines.append(f"### Nested Schema for `{'.'.join(path)}`")
        _render_block(block_type.block, path, lines, nested, heading_level=None)

    return "\n".join(lines)


def _render_block(
    block: SchemaBlock,
    path: Sequence[str],
    lines: List[str],
    nested: List[Tuple[Sequence[str], SchemaBlockType]],
    heading_level: str | None = "###",
) -> None:
    groups: Dict[str, List[str]] = {key: [] for key, _ in _GROUPS}

    for name in sorted(block.attributes):
        attribute = block.attributes[name]
        groups[_attribute_group(attribute)].append(_attribute_line(name, attribute))

    for name in sorted(block.block_types):
        block_type = block.block_types[name]
        child_path = (*path, name)
        nested.append((child_path, block_type))
        group = "required" if block_type.min_items > 0 else "optional"
        groups[group].append(
            f"- `{name}` ({block_type_label(block_type)}) "
            f"(see [below for nested schema](#{_anchor(child_path)}))"
        )

    for key, title in _GROUPS:
        if not groups[key]:
            continue
        lines.append("")
        lines.append(f"{heading_level} {title}" if heading_level else f"{title}:")
        lines.append("")
        lines.extend(groups[key])


def _attribute_group(attribute: SchemaAttribute) -> str:
    if attribute.required:
        return "required"
    if attribute.optional:
        return "optional"
    return "read_only"


def _attribute_line(name: str, attribute: SchemaAttribute) -> str:
    parts = [f"- `{name}` ({type_name(attribute.attribute_type)}"]
    if attribute.sensitive:
        parts.append(", Sensitive")
    parts.append(")")
    if attribute.deprecated:
        parts.append(" **Deprecated**")
    description = attribute.description.strip()
    if description:
        parts.append(f" {description}")
    return "".join(parts)


def _anchor(path: Sequence[str]) -> str:
    return "nestedblock--" + "--".join(path)


__all__ = ["block_type_label", "render_schema_markdown", "type_name"]
