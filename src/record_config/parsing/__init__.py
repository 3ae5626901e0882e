"""Parsing module for the record definition DSL."""

from record_config.parsing.record_lexer import RecordLexer
from record_config.parsing.record_parser import RecordParser

__all__ = [
    "RecordLexer",
    "RecordParser",
]
