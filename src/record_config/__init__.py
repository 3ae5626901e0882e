"""Record Config - extract validated configs from annotated record definitions."""

from record_config.attributes import resolve_field_attributes
from record_config.builder import (
    build_record_config,
    extract_record,
    extract_records,
    parse_default_instructions,
)
from record_config.parsing import RecordParser
from record_config.tags import InvalidTagError, read_field_tag, read_record_tag
from record_config.types import (
    BareTag,
    Create,
    DefaultInstruction,
    Delete,
    Extraction,
    FieldAttributes,
    FieldDefinition,
    ListTag,
    LiteralArgument,
    NameValueArgument,
    NameValueTag,
    Outcome,
    PathArgument,
    PrimaryKey,
    RecordConfig,
    RecordDefinition,
    TypeRef,
    Update,
)

__all__ = [
    # Main API
    "build_record_config",
    "extract_record",
    "extract_records",
    "RecordParser",
    "InvalidTagError",
    # Building blocks
    "parse_default_instructions",
    "read_field_tag",
    "read_record_tag",
    "resolve_field_attributes",
    # Definitions
    "RecordDefinition",
    "FieldDefinition",
    "TypeRef",
    "BareTag",
    "ListTag",
    "NameValueTag",
    "PathArgument",
    "NameValueArgument",
    "LiteralArgument",
    # Results
    "FieldAttributes",
    "PrimaryKey",
    "RecordConfig",
    "DefaultInstruction",
    "Create",
    "Delete",
    "Update",
    "Extraction",
    "Outcome",
]

__version__ = "0.1.0"
