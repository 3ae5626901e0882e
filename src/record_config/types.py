"""Data model for annotated record definitions and extracted record configs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


# ---- Tag arguments ----


LiteralValue = Union[bool, int, str]


def format_literal(value: LiteralValue) -> str:
    """Render a literal the way it is written in a definition."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


@dataclass
class PathArgument:
    """A bare path reference inside a tag's argument list (e.g. Create)."""

    segments: list[str]

    @property
    def ident(self) -> str | None:
        """Return the single identifier, or None for a multi-segment path."""
        if len(self.segments) == 1:
            return self.segments[0]
        return None

    def __str__(self) -> str:
        return ".".join(self.segments)


@dataclass
class NameValueArgument:
    """A name = value pair inside a tag's argument list."""

    name: str
    value: LiteralValue

    def __str__(self) -> str:
        return f"{self.name} = {format_literal(self.value)}"


@dataclass
class LiteralArgument:
    """A bare literal inside a tag's argument list."""

    value: LiteralValue

    def __str__(self) -> str:
        return format_literal(self.value)


TagArgument = Union[PathArgument, NameValueArgument, LiteralArgument]


# ---- Tag shapes ----


@dataclass
class BareTag:
    """A tag with no arguments: @authority."""

    name: str


@dataclass
class ListTag:
    """A tag with a nested argument list: @primary_key(autoincrement = false)."""

    name: str
    arguments: list[TagArgument] = field(default_factory=list)


@dataclass
class NameValueTag:
    """A tag assigned a single literal: @doc = "text"."""

    name: str
    value: LiteralValue


Tag = Union[BareTag, ListTag, NameValueTag]


# ---- Definitions (input) ----


@dataclass
class TypeRef:
    """Opaque reference to a field type, possibly as an array."""

    name: str
    is_array: bool = False

    def __str__(self) -> str:
        return f"{self.name}[]" if self.is_array else self.name


@dataclass
class FieldDefinition:
    """A named, typed field of a record definition with its attached tags."""

    name: str
    type_ref: Any
    tags: list[Tag] = field(default_factory=list)


@dataclass
class RecordDefinition:
    """An annotated record: name, ordered fields, record-level tags."""

    name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)


# ---- Derived values ----


@dataclass
class FieldAttributes:
    """Flags derived from one field's tags."""

    is_primary_key: bool = False
    autoincrement_enabled: bool = True
    is_authority: bool = False


@dataclass
class DefaultInstruction:
    """Base class for generation directives bound to a record name."""

    record_name: str

    @property
    def kind(self) -> str:
        """Return the variant name (Create, Delete or Update)."""
        return type(self).__name__

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "record": self.record_name}


@dataclass
class Create(DefaultInstruction):
    """Generate a create instruction for the record."""


@dataclass
class Delete(DefaultInstruction):
    """Generate a delete instruction for the record."""


@dataclass
class Update(DefaultInstruction):
    """Generate an update instruction for the record."""


# Mapping from variant names to instruction classes
INSTRUCTION_VARIANTS: dict[str, type[DefaultInstruction]] = {
    cls.__name__: cls for cls in (Create, Delete, Update)
}


@dataclass
class PrimaryKey:
    """The field bound as a record's primary key."""

    name: str
    type_ref: Any


# ---- Result types (returned to caller) ----


@dataclass
class RecordConfig:
    """Validated descriptor for a record that has a primary key."""

    table_name: str
    fields: list[FieldDefinition]
    autoincrement_enabled: bool
    primary_key: PrimaryKey
    authorities: list[str] = field(default_factory=list)
    default_instructions: list[DefaultInstruction] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready rendering for the code generator."""
        return {
            "table_name": self.table_name,
            "fields": [
                {"name": f.name, "type": str(f.type_ref)} for f in self.fields
            ],
            "autoincrement_enabled": self.autoincrement_enabled,
            "primary_key": {
                "name": self.primary_key.name,
                "type": str(self.primary_key.type_ref),
            },
            "authorities": list(self.authorities),
            "default_instructions": [i.to_dict() for i in self.default_instructions],
        }


class Outcome(Enum):
    """How extraction of a single record ended."""

    CONFIGURED = "configured"
    NOT_APPLICABLE = "not_applicable"
    FAILED = "failed"


@dataclass
class Extraction:
    """Result of extracting one record definition."""

    record_name: str
    outcome: Outcome
    config: RecordConfig | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return whether extraction finished without a fatal error."""
        return self.outcome is not Outcome.FAILED

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "record": self.record_name,
            "outcome": self.outcome.value,
        }
        if self.config is not None:
            result["config"] = self.config.to_dict()
        if self.error is not None:
            result["error"] = self.error
        return result
