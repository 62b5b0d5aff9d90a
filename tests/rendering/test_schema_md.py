"""Tests for schema markdown rendering."""

from __future__ import annotations

import pytest

from tfdocgen.models import Schema
from tfdocgen.rendering.schema_md import render_schema_markdown, type_name


@pytest.mark.parametrize(
    ("cty", "expected"),
    [
        ("string", "String"),
        ("bool", "Boolean"),
        (["list", "string"], "List of String"),
        (["map", ["set", "number"]], "Map of Set of Number"),
        (["object", {"a": "string"}], "Object"),
        (None, "Dynamic"),
    ],
)
def test_type_name(cty: object, expected: str) -> None:
    assert type_name(cty) == expected


def test_render_groups_attributes_and_nested_blocks() -> None:
    schema = Schema.from_dict(
        {
            "block": {
                "attributes": {
                    "name": {"type": "string", "required": True, "description": "Name of the thing."},
                    "id": {"type": "string", "computed": True},
                    "password": {"type": "string", "optional": True, "sensitive": True},
                },
                "block_types": {
                    "rule": {
                        "nesting_mode": "list",
                        "max_items": 1,
                        "block": {"attributes": {"port": {"type": "number", "required": True}}},
                    }
                },
            }
        }
    )

    markdown = render_schema_markdown(schema)

    assert markdown.splitlines() == [
        "## Schema",
        "",
        "### Required",
        "",
        "- `name` (String) Name of the thing.",
        "",
        "### Optional",
        "",
        "- `password` (String, Sensitive)",
        "- `rule` (Block List, Max: 1) (see [below for nested schema](#nestedblock--rule))",
        "",
        "### Read-Only",
        "",
        "- `id` (String)",
        "",
        '<a id="nestedblock--rule"></a>',
        "### Nested Schema for `rule`",
        "",
        "Required:",
        "",
        "- `port` (Number)",
    ]


def test_render_empty_schema() -> None:
    assert render_schema_markdown(Schema()) == "## Schema"
