"""Tests for the record definition DSL parser."""

import pytest

from record_config.parsing import RecordParser
from record_config.parsing.record_lexer import RecordLexer
from record_config.types import (
    BareTag,
    ListTag,
    LiteralArgument,
    NameValueArgument,
    NameValueTag,
    PathArgument,
    TypeRef,
)


class TestRecordLexer:
    """Tests for the record lexer."""

    def test_tokenize_tagged_field(self):
        """Test tokenizing a field with a tag."""
        lexer = RecordLexer()
        lexer.build()

        tokens = lexer.tokenize("@primary_key id: u64")
        token_types = [t.type for t in tokens]

        assert token_types == ["AT", "IDENTIFIER", "IDENTIFIER", "COLON", "IDENTIFIER"]

    def test_tokenize_booleans(self):
        """Test that true/false are keywords carrying bool values."""
        lexer = RecordLexer()
        lexer.build()

        tokens = lexer.tokenize("autoincrement = false, other = true")
        literals = [t for t in tokens if t.type in ("TRUE", "FALSE")]

        assert [t.value for t in literals] == [False, True]

    def test_tokenize_string_and_integer(self):
        """Test string and integer literals."""
        lexer = RecordLexer()
        lexer.build()

        tokens = lexer.tokenize('"label" -42')

        assert [(t.type, t.value) for t in tokens] == [
            ("STRING", "label"),
            ("INTEGER", -42),
        ]

    def test_tokenize_non_ascii_string(self):
        """Test non-ASCII text and escapes in string literals."""
        lexer = RecordLexer()
        lexer.build()

        tokens = lexer.tokenize(r'"héllo €" "a\tb"')

        assert [t.value for t in tokens] == ["héllo €", "a\tb"]

    def test_comments_ignored(self):
        """Test that comments produce no tokens."""
        lexer = RecordLexer()
        lexer.build()

        tokens = lexer.tokenize("# a comment\nWidget")

        assert [t.type for t in tokens] == ["IDENTIFIER"]
        assert tokens[0].lineno == 2

    def test_illegal_character(self):
        """Test error on illegal character."""
        lexer = RecordLexer()
        lexer.build()

        with pytest.raises(SyntaxError):
            lexer.tokenize("Widget { id: u64 ; }")


class TestRecordParser:
    """Tests for the record parser."""

    def test_parse_empty_input(self):
        """Test that empty input yields no records."""
        assert RecordParser().parse("") == []
        assert RecordParser().parse("# only a comment\n") == []

    def test_parse_simple_record(self):
        """Test parsing a record with untagged fields."""
        records = RecordParser().parse("""
        Point {
            x: i32,
            y: i32
        }
        """)

        assert len(records) == 1
        record = records[0]
        assert record.name == "Point"
        assert [f.name for f in record.fields] == ["x", "y"]
        assert record.fields[0].type_ref == TypeRef(name="i32")
        assert record.tags == []
        assert record.fields[0].tags == []

    def test_parse_trailing_comma(self):
        """Test that a trailing comma after the last field is accepted."""
        records = RecordParser().parse("Point { x: i32, y: i32, }")

        assert [f.name for f in records[0].fields] == ["x", "y"]

    def test_parse_empty_record(self):
        """Test parsing a record with no fields."""
        records = RecordParser().parse("Marker { }")

        assert records[0].name == "Marker"
        assert records[0].fields == []

    def test_parse_array_and_dotted_types(self):
        """Test array and dotted type references."""
        records = RecordParser().parse("""
        Blob {
            data: u8[],
            owner: solana.Pubkey
        }
        """)

        data, owner = records[0].fields
        assert data.type_ref == TypeRef(name="u8", is_array=True)
        assert str(data.type_ref) == "u8[]"
        assert owner.type_ref == TypeRef(name="solana.Pubkey")

    def test_parse_bare_tags(self):
        """Test bare tags on fields."""
        records = RecordParser().parse("""
        Widget {
            @primary_key
            id: u64,
            @authority
            owner: Pubkey
        }
        """)

        id_field, owner_field = records[0].fields
        assert id_field.tags == [BareTag(name="primary_key")]
        assert owner_field.tags == [BareTag(name="authority")]

    def test_parse_list_tag_with_name_value(self):
        """Test a tag with a name = value argument."""
        records = RecordParser().parse("""
        Widget {
            @primary_key(autoincrement = false)
            id: u64
        }
        """)

        assert records[0].fields[0].tags == [
            ListTag(
                name="primary_key",
                arguments=[NameValueArgument(name="autoincrement", value=False)],
            )
        ]

    def test_parse_record_tag_with_paths(self):
        """Test a record tag with bare path arguments."""
        records = RecordParser().parse("""
        @default_instructions(Create, Update,)
        Widget {
            @primary_key
            id: u64
        }
        """)

        assert records[0].tags == [
            ListTag(
                name="default_instructions",
                arguments=[PathArgument(["Create"]), PathArgument(["Update"])],
            )
        ]

    def test_parse_mixed_arguments(self):
        """Test literal, dotted path and empty argument lists."""
        records = RecordParser().parse("""
        @derive(Instruction.Create, "text", 3)
        @empty()
        Widget { id: u64 }
        """)

        derive, empty = records[0].tags
        assert derive.name == "derive"
        assert derive.arguments == [
            PathArgument(["Instruction", "Create"]),
            LiteralArgument("text"),
            LiteralArgument(3),
        ]
        assert empty == ListTag(name="empty", arguments=[])

    def test_parse_name_value_and_dotted_tags(self):
        """Test @name = value tags and dotted tag names."""
        records = RecordParser().parse("""
        Widget {
            @serde.rename = "label"
            @doc = "the name"
            name: string
        }
        """)

        assert records[0].fields[0].tags == [
            NameValueTag(name="serde.rename", value="label"),
            NameValueTag(name="doc", value="the name"),
        ]

    def test_parse_multiple_records(self):
        """Test records are returned in source order."""
        records = RecordParser().parse("""
        A { x: u8 }
        @default_instructions(Delete)
        B { y: u8 }
        C { }
        """)

        assert [r.name for r in records] == ["A", "B", "C"]
        assert records[1].tags[0].name == "default_instructions"

    def test_parser_reuse(self):
        """Test that one parser instance can parse several inputs."""
        parser = RecordParser()

        first = parser.parse("A { x: u8 }")
        second = parser.parse("B { y: u8 }")

        assert first[0].name == "A"
        assert second[0].name == "B"

    def test_syntax_error(self):
        """Test error on a field without a type."""
        with pytest.raises(SyntaxError, match="Syntax error"):
            RecordParser().parse("Widget { id }")

    def test_syntax_error_line_number(self):
        """Test syntax errors report the line."""
        with pytest.raises(SyntaxError, match="line 3"):
            RecordParser().parse("Widget {\n  id: u64,\n  name string\n}")

    def test_unterminated_record(self):
        """Test error at end of input."""
        with pytest.raises(SyntaxError, match="end of input"):
            RecordParser().parse("Widget { id: u64")

    def test_duplicate_record(self):
        """Test error on a record defined twice."""
        with pytest.raises(ValueError, match="Duplicate record"):
            RecordParser().parse("A { x: u8 }\nA { y: u8 }")

    def test_duplicate_field(self):
        """Test error on a field defined twice in one record."""
        with pytest.raises(ValueError, match="duplicate field 'x'"):
            RecordParser().parse("A { x: u8, x: u16 }")
