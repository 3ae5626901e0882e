"""Field attribute resolution."""

from __future__ import annotations

import logging

from record_config.tags import AuthorityTag, PrimaryKeyTag, read_field_tag
from record_config.types import FieldAttributes, FieldDefinition

logger = logging.getLogger(__name__)


def resolve_field_attributes(field: FieldDefinition) -> FieldAttributes:
    """Scan a field's tags in order and return its attributes.

    The last matching tag wins for each flag. Tags that are not recognized,
    or recognized names in an unexpected shape, are skipped.
    """
    attributes = FieldAttributes()
    for tag in field.tags:
        read = read_field_tag(tag)
        if isinstance(read, PrimaryKeyTag):
            attributes.is_primary_key = True
            if read.autoincrement is not None:
                attributes.autoincrement_enabled = read.autoincrement
        elif isinstance(read, AuthorityTag):
            attributes.is_authority = True
        else:
            logger.debug("Ignoring tag %r on field %r", tag.name, field.name)
    return attributes
