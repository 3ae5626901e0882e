"""Parser for the record definition DSL.

A definition file holds any number of records. Tags are written with a
leading ``@`` above the record or field they belong to::

    @default_instructions(Create, Update)
    Widget {
        @primary_key(autoincrement = false)
        id: u64,
        @authority
        owner: Pubkey,
    }
"""

from __future__ import annotations

from typing import Any

import ply.yacc as yacc

from record_config.parsing.record_lexer import RecordLexer
from record_config.types import (
    BareTag,
    FieldDefinition,
    ListTag,
    LiteralArgument,
    NameValueArgument,
    NameValueTag,
    PathArgument,
    RecordDefinition,
    TypeRef,
)


class RecordParser:
    """Parser for annotated record definitions."""

    tokens = RecordLexer.tokens

    def __init__(self) -> None:
        self.lexer = RecordLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore

    def p_records_empty(self, p: yacc.YaccProduction) -> None:
        """records : """
        p[0] = []

    def p_records_multiple(self, p: yacc.YaccProduction) -> None:
        """records : records record"""
        p[0] = p[1]
        p[0].append(p[2])

    def p_record(self, p: yacc.YaccProduction) -> None:
        """record : tags IDENTIFIER LBRACE field_list_opt RBRACE"""
        p[0] = RecordDefinition(name=p[2], fields=p[4], tags=p[1])

    def p_field_list_opt_empty(self, p: yacc.YaccProduction) -> None:
        """field_list_opt : """
        p[0] = []

    def p_field_list_opt(self, p: yacc.YaccProduction) -> None:
        """field_list_opt : field_list
                          | field_list COMMA"""
        p[0] = p[1]

    def p_field_list_single(self, p: yacc.YaccProduction) -> None:
        """field_list : field"""
        p[0] = [p[1]]

    def p_field_list_multiple(self, p: yacc.YaccProduction) -> None:
        """field_list : field_list COMMA field"""
        p[0] = p[1] + [p[3]]

    def p_field(self, p: yacc.YaccProduction) -> None:
        """field : tags IDENTIFIER COLON type_ref"""
        p[0] = FieldDefinition(name=p[2], type_ref=p[4], tags=p[1])

    def p_tags_empty(self, p: yacc.YaccProduction) -> None:
        """tags : """
        p[0] = []

    def p_tags_multiple(self, p: yacc.YaccProduction) -> None:
        """tags : tags tag"""
        p[0] = p[1] + [p[2]]

    def p_tag_bare(self, p: yacc.YaccProduction) -> None:
        """tag : AT path"""
        p[0] = BareTag(name=".".join(p[2]))

    def p_tag_list_empty(self, p: yacc.YaccProduction) -> None:
        """tag : AT path LPAREN RPAREN"""
        p[0] = ListTag(name=".".join(p[2]), arguments=[])

    def p_tag_list(self, p: yacc.YaccProduction) -> None:
        """tag : AT path LPAREN arg_list RPAREN
               | AT path LPAREN arg_list COMMA RPAREN"""
        p[0] = ListTag(name=".".join(p[2]), arguments=p[4])

    def p_tag_name_value(self, p: yacc.YaccProduction) -> None:
        """tag : AT path EQUALS literal"""
        p[0] = NameValueTag(name=".".join(p[2]), value=p[4])

    def p_arg_list_single(self, p: yacc.YaccProduction) -> None:
        """arg_list : arg"""
        p[0] = [p[1]]

    def p_arg_list_multiple(self, p: yacc.YaccProduction) -> None:
        """arg_list : arg_list COMMA arg"""
        p[0] = p[1] + [p[3]]

    def p_arg_path(self, p: yacc.YaccProduction) -> None:
        """arg : path"""
        p[0] = PathArgument(segments=p[1])

    def p_arg_name_value(self, p: yacc.YaccProduction) -> None:
        """arg : IDENTIFIER EQUALS literal"""
        p[0] = NameValueArgument(name=p[1], value=p[3])

    def p_arg_literal(self, p: yacc.YaccProduction) -> None:
        """arg : literal"""
        p[0] = LiteralArgument(value=p[1])

    def p_path_single(self, p: yacc.YaccProduction) -> None:
        """path : IDENTIFIER"""
        p[0] = [p[1]]

    def p_path_multiple(self, p: yacc.YaccProduction) -> None:
        """path : path DOT IDENTIFIER"""
        p[0] = p[1] + [p[3]]

    def p_type_ref_simple(self, p: yacc.YaccProduction) -> None:
        """type_ref : path"""
        p[0] = TypeRef(name=".".join(p[1]), is_array=False)

    def p_type_ref_array(self, p: yacc.YaccProduction) -> None:
        """type_ref : path LBRACKET RBRACKET"""
        p[0] = TypeRef(name=".".join(p[1]), is_array=True)

    def p_literal(self, p: yacc.YaccProduction) -> None:
        """literal : TRUE
                   | FALSE
                   | INTEGER
                   | STRING"""
        p[0] = p[1]

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise SyntaxError(f"Syntax error at '{p.value}' (line {p.lineno})")
        else:
            raise SyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        kwargs.setdefault("debug", False)
        kwargs.setdefault("write_tables", False)
        kwargs.setdefault("errorlog", yacc.NullLogger())
        self.parser = yacc.yacc(module=self, **kwargs)

    def parse(self, data: str) -> list[RecordDefinition]:
        """Parse record definitions, in source order.

        Raises:
            SyntaxError: If the text is not valid DSL.
            ValueError: If a record name or a field name within a record
                is defined twice.
        """
        if self.parser is None:
            self.build()

        self.lexer.lexer.lineno = 1
        records = self.parser.parse(data, lexer=self.lexer.lexer)
        if records is None:
            records = []

        self._check_duplicates(records)
        return records

    def _check_duplicates(self, records: list[RecordDefinition]) -> None:
        seen_records: set[str] = set()
        for record in records:
            if record.name in seen_records:
                raise ValueError(f"Duplicate record definition: '{record.name}'")
            seen_records.add(record.name)

            seen_fields: set[str] = set()
            for field in record.fields:
                if field.name in seen_fields:
                    raise ValueError(
                        f"Record '{record.name}': duplicate field '{field.name}'"
                    )
                seen_fields.add(field.name)
