"""Build record configs from annotated record definitions."""

from __future__ import annotations

import logging
from typing import Iterable

from record_config.attributes import resolve_field_attributes
from record_config.tags import InvalidTagError, read_record_tag
from record_config.types import (
    DefaultInstruction,
    Extraction,
    Outcome,
    PrimaryKey,
    RecordConfig,
    RecordDefinition,
    Tag,
)

logger = logging.getLogger(__name__)


def parse_default_instructions(
    record_name: str, tags: list[Tag]
) -> list[DefaultInstruction]:
    """Turn record-level tags into instructions bound to record_name.

    Raises:
        InvalidTagError: If a default_instructions tag is malformed.
    """
    instructions: list[DefaultInstruction] = []
    for tag in tags:
        read = read_record_tag(tag)
        if read is None:
            logger.debug("Ignoring tag %r on record %r", tag.name, record_name)
            continue
        instructions.extend(variant(record_name) for variant in read.variants)
    return instructions


def build_record_config(record: RecordDefinition) -> RecordConfig | None:
    """Build the config for a record definition.

    Args:
        record: The annotated record definition. It is not modified.

    Returns:
        The record config, or None if no field is tagged as primary key.

    Raises:
        InvalidTagError: If a recognized record tag is malformed.
    """
    table_name = record.name.lower()
    default_instructions = parse_default_instructions(record.name, record.tags)

    autoincrement_enabled = True
    authorities: list[str] = []
    primary_key: PrimaryKey | None = None

    for field in record.fields:
        attributes = resolve_field_attributes(field)
        # Any field with autoincrement = false disables it record-wide,
        # whether or not that field is the primary key.
        if not attributes.autoincrement_enabled:
            autoincrement_enabled = False
        if attributes.is_primary_key:
            primary_key = PrimaryKey(name=field.name, type_ref=field.type_ref)
        if attributes.is_authority and field.name not in authorities:
            authorities.append(field.name)

    if primary_key is None:
        logger.info("Record %r has no primary key, skipping", record.name)
        return None

    return RecordConfig(
        table_name=table_name,
        fields=record.fields,
        autoincrement_enabled=autoincrement_enabled,
        primary_key=primary_key,
        authorities=authorities,
        default_instructions=default_instructions,
    )


def extract_record(record: RecordDefinition) -> Extraction:
    """Extract a record, reporting all three outcomes without raising."""
    try:
        config = build_record_config(record)
    except InvalidTagError as e:
        logger.warning("Record %r: %s", record.name, e)
        return Extraction(record_name=record.name, outcome=Outcome.FAILED, error=str(e))

    if config is None:
        return Extraction(record_name=record.name, outcome=Outcome.NOT_APPLICABLE)
    return Extraction(record_name=record.name, outcome=Outcome.CONFIGURED, config=config)


def extract_records(records: Iterable[RecordDefinition]) -> list[Extraction]:
    """Extract each record independently, in order."""
    return [extract_record(record) for record in records]
