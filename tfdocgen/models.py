"""Provider schema models parsed from ``terraform providers schema -json``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass
class SchemaAttribute:
    """A single configurable or computed attribute."""

    attribute_type: Any = None
    description: str = ""
    description_kind: str = "plain"
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    deprecated: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchemaAttribute":
        return cls(
            attribute_type=data.get("type"),
            description=str(data.get("description") or ""),
            description_kind=str(data.get("description_kind") or "plain"),
            required=bool(data.get("required")),
            optional=bool(data.get("optional")),
            computed=bool(data.get("computed")),
            sensitive=bool(data.get("sensitive")),
            deprecated=bool(data.get("deprecated")),
        )


@dataclass
class SchemaBlock:
    """Attributes and nested blocks of a resource, data source or provider."""

    attributes: Dict[str, SchemaAttribute] = field(default_factory=dict)
    block_types: Dict[str, "SchemaBlockType"] = field(default_factory=dict)
    description: str = ""
    description_kind: str = "plain"
    deprecated: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchemaBlock":
        attributes = {
            name: SchemaAttribute.from_dict(_as_mapping(value))
            for name, value in _as_mapping(data.get("attributes")).items()
        }
        block_types = {
            name: SchemaBlockType.from_dict(_as_mapping(value))
            for name, value in _as_mapping(data.get("block_types")).items()
        }
        return cls(
            attributes=attributes,
            block_types=block_types,
            description=str(data.get("description") or ""),
            description_kind=str(data.get("description_kind") or "plain"),
            deprecated=bool(data.get("deprecated")),
        )


@dataclass
class SchemaBlockType:
    """A nested block and how it may repeat."""

    nesting_mode: str = "single"
    block: SchemaBlock = field(default_factory=SchemaBlock)
    min_items: int = 0
    max_items: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchemaBlockType":
        return cls(
            nesting_mode=str(data.get("nesting_mode") or "single"),
            block=SchemaBlock.from_dict(_as_mapping(data.get("block"))),
            min_items=int(data.get("min_items") or 0),
            max_items=int(data.get("max_items") or 0),
        )


@dataclass
class Schema:
    """Versioned schema of one resource, data source or provider."""

    version: int = 0
    block: SchemaBlock = field(default_factory=SchemaBlock)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Schema":
        return cls(
            version=int(data.get("version") or 0),
            block=SchemaBlock.from_dict(_as_mapping(data.get("block"))),
        )


@dataclass
class ProviderSchema:
    """Schemas exported by a single provider."""

    resource_schemas: Dict[str, Schema] = field(default_factory=dict)
    data_source_schemas: Dict[str, Schema] = field(default_factory=dict)
    provider: Optional[Schema] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProviderSchema":
        provider_data = data.get("provider")
        return cls(
            resource_schemas=_schemas(data.get("resource_schemas")),
            data_source_schemas=_schemas(data.get("data_source_schemas")),
            provider=Schema.from_dict(provider_data) if isinstance(provider_data, Mapping) else None,
        )


@dataclass
class ProviderSchemas:
    """Top-level document keyed by provider source address."""

    format_version: str = ""
    schemas: Dict[str, ProviderSchema] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProviderSchemas":
        return cls(
            format_version=str(data.get("format_version") or ""),
            schemas={
                key: ProviderSchema.from_dict(_as_mapping(value))
                for key, value in _as_mapping(data.get("provider_schemas")).items()
            },
        )


def _schemas(value: Any) -> Dict[str, Schema]:
    return {name: Schema.from_dict(_as_mapping(item)) for name, item in _as_mapping(value).items()}


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


__all__ = [
    "ProviderSchema",
    "ProviderSchemas",
    "Schema",
    "SchemaAttribute",
    "SchemaBlock",
    "SchemaBlockType",
]
