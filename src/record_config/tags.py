"""Tag reader: classify tags attached to records and fields.

Only a small vocabulary is recognized. Field tags are ``primary_key``
(bare, or with ``autoincrement = <bool>``) and bare ``authority``; the one
record tag is ``default_instructions(Create, Delete, Update)``. Every other
tag is ignored so definitions can carry unrelated annotations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from record_config.types import (
    INSTRUCTION_VARIANTS,
    BareTag,
    DefaultInstruction,
    ListTag,
    NameValueArgument,
    PathArgument,
    Tag,
)

PRIMARY_KEY = "primary_key"
AUTOINCREMENT = "autoincrement"
AUTHORITY = "authority"
DEFAULT_INSTRUCTIONS = "default_instructions"


class InvalidTagError(ValueError):
    """A recognized tag is malformed; extraction of the record is aborted."""

    def __init__(self, tag_name: str, message: str) -> None:
        super().__init__(message)
        self.tag_name = tag_name


@dataclass
class PrimaryKeyTag:
    """A primary_key tag. autoincrement is None for the bare form."""

    autoincrement: bool | None = None


@dataclass
class AuthorityTag:
    """A bare authority tag."""


@dataclass
class DefaultInstructionsTag:
    """A default_instructions tag with its validated variants, in order."""

    variants: list[type[DefaultInstruction]] = field(default_factory=list)


FieldTag = Union[PrimaryKeyTag, AuthorityTag]


def read_field_tag(tag: Tag) -> FieldTag | None:
    """Classify a field tag. Returns None for tags that carry no meaning here."""
    if isinstance(tag, ListTag) and tag.name == PRIMARY_KEY:
        matched = False
        autoincrement: bool | None = None
        for argument in tag.arguments:
            if isinstance(argument, NameValueArgument) and argument.name == AUTOINCREMENT:
                matched = True
                # A non-boolean value still marks the key; autoincrement is left alone
                if isinstance(argument.value, bool):
                    autoincrement = argument.value
        if not matched:
            # primary_key(...) without an autoincrement argument
            return None
        return PrimaryKeyTag(autoincrement=autoincrement)
    elif isinstance(tag, BareTag) and tag.name == PRIMARY_KEY:
        return PrimaryKeyTag()
    elif isinstance(tag, BareTag) and tag.name == AUTHORITY:
        return AuthorityTag()
    else:
        return None


def read_record_tag(tag: Tag) -> DefaultInstructionsTag | None:
    """Classify a record tag.

    Raises:
        InvalidTagError: If a default_instructions entry is not a bare
            instruction name, or names an unknown instruction.
    """
    if not (isinstance(tag, ListTag) and tag.name == DEFAULT_INSTRUCTIONS):
        return None

    variants: list[type[DefaultInstruction]] = []
    for argument in tag.arguments:
        if not isinstance(argument, PathArgument) or argument.ident is None:
            raise InvalidTagError(
                DEFAULT_INSTRUCTIONS,
                f"invalid format for `{DEFAULT_INSTRUCTIONS}`: "
                f"expected an instruction name, got `{argument}`",
            )
        variant = INSTRUCTION_VARIANTS.get(argument.ident)
        if variant is None:
            raise InvalidTagError(
                DEFAULT_INSTRUCTIONS,
                f"unknown default instruction: {argument.ident}",
            )
        variants.append(variant)
    return DefaultInstructionsTag(variants=variants)
