import textwrap

import pytest

from protoschema.diagnostics import LexicalError, SchemaSyntaxError
from protoschema.lexer import Lexer
from protoschema.model import FieldDeclaration, StructDeclaration
from protoschema.parser import ParseMode, Parser, ParserOptions, parse_schema, parse_schema_file
from tests._debug import debug_dump_model
from tests._shared_cases import SCHEMA_CASES, SchemaCase, case_id, case_source


@pytest.mark.parametrize("case", SCHEMA_CASES, ids=case_id)
def test_cases_parse_structs_in_source_order(case: SchemaCase) -> None:
    model = parse_schema(case.source)
    debug_dump_model(case.name, model, case.source)

    assert model.struct_names() == case.struct_names


@pytest.mark.parametrize("case", SCHEMA_CASES, ids=case_id)
def test_cases_in_strict_mode(case: SchemaCase) -> None:
    if case.strict_should_parse:
        assert parse_schema(case.source, mode=ParseMode.STRICT).struct_names() == case.struct_names
    else:
        with pytest.raises(SchemaSyntaxError):
            parse_schema(case.source, mode=ParseMode.STRICT)


def test_user_scenario_fields() -> None:
    model = parse_schema(case_source("single_equals_closes_struct"))

    assert len(model) == 1
    user = model[0]
    assert user.name == "User"
    assert user.fields == (
        FieldDeclaration(name="id", type_name="integer", is_array=False),
        FieldDeclaration(name="tags", type_name="string", is_array=True),
    )


def test_user_scenario_strict_mode_fails_at_closing_marker() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema(case_source("single_equals_closes_struct"), mode=ParseMode.STRICT)

    assert exc_info.value.line == 4


def test_fields_keep_declaration_order() -> None:
    model = parse_schema(case_source("multiple_structs_with_references"))

    account, user = model
    assert account.field_names() == ("id", "name", "avatar")
    assert user.fields == (
        FieldDeclaration("owner", "Account"),
        FieldDeclaration("friends", "User", is_array=True),
        FieldDeclaration("active", "boolean"),
        FieldDeclaration("score", "float"),
        FieldDeclaration("flag", "byte"),
    )


def test_array_field() -> None:
    model = parse_schema("S =\nname array string\n===\n")

    assert model[0].fields == (FieldDeclaration(name="name", type_name="string", is_array=True),)


def test_array_of_struct_reference() -> None:
    model = parse_schema("S =\nitems array Item\n===\n")

    assert model[0].fields[0] == FieldDeclaration("items", "Item", is_array=True)


def test_reference_field() -> None:
    model = parse_schema("S =\nowner Account\n===\n")

    field = model[0].fields[0]
    assert field == FieldDeclaration(name="owner", type_name="Account", is_array=False)
    assert field.is_primitive is False


def test_empty_struct_has_no_fields() -> None:
    model = parse_schema(case_source("empty_struct"))

    assert model[0] == StructDeclaration(name="Empty", fields=())
    assert model[0].is_empty


def test_comment_only_source_yields_empty_model() -> None:
    assert len(parse_schema(case_source("comments_only"))) == 0


def test_opening_triple_delimiter_is_syntax_error() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema("User === id integer ===")

    assert exc_info.value.line == 1
    assert "expected STRUCT_BEGIN, found STRUCT_END" in str(exc_info.value)


def test_missing_struct_name_is_syntax_error() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema("\n\ninteger =\n===\n")

    assert exc_info.value.line == 3
    assert exc_info.value.code == "PARSER_EXPECTED_TOKEN"


def test_leading_delimiter_is_syntax_error() -> None:
    with pytest.raises(SchemaSyntaxError):
        parse_schema("= User\n")


def test_array_element_cannot_be_array_keyword() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema("S =\ntags array array\n===\n")

    assert exc_info.value.line == 2


def test_field_type_must_not_be_delimiter() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema("S =\nid\n===\n")

    assert exc_info.value.line == 3
    assert "expected type name or `array`" in str(exc_info.value)


def test_field_name_must_be_symbol() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema("S =\ninteger id\n===\n")

    assert exc_info.value.line == 2


def test_unterminated_struct_reports_unexpected_eof() -> None:
    source = textwrap.dedent(
        """\
        User =
        id integer
        """
    )

    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema(source)

    assert exc_info.value.code == "PARSER_UNEXPECTED_EOF"
    assert exc_info.value.line == 3


def test_unexpected_character_in_struct_body_is_lexical_error() -> None:
    with pytest.raises(LexicalError) as exc_info:
        parse_schema("User =\nid integer\nname @string\n===\n")

    assert exc_info.value.line == 3


def test_error_stops_at_first_problem() -> None:
    # The second struct's bad character is never reached.
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema("A === \nB =\n@\n")

    assert exc_info.value.line == 1


def test_parser_uses_given_lexer_and_options() -> None:
    lexer = Lexer("S =\nx integer\n===\n")
    parser = Parser(lexer, options=ParserOptions.for_mode(ParseMode.STRICT))

    model = parser.parse()

    assert parser.lexer is lexer
    assert parser.options.allow_begin_marker_as_end is False
    assert model.struct_names() == ("S",)
    assert lexer.at_end() is True


def test_default_options_are_standard_mode() -> None:
    options = ParserOptions()

    assert options.mode == ParseMode.STANDARD
    assert options.allow_begin_marker_as_end is True
    assert ParserOptions.for_mode(ParseMode.STANDARD) == options


def test_parse_schema_rejects_options_and_mode_together() -> None:
    with pytest.raises(ValueError, match="Pass either options or mode, not both"):
        parse_schema("", ParserOptions(), mode=ParseMode.STRICT)


def test_parse_schema_file_reads_bytes(tmp_path) -> None:
    path = tmp_path / "records.schema"
    path.write_bytes(b"# records\nPoint =\nx float\ny float\n===\n")

    model = parse_schema_file(path)

    assert model.struct_names() == ("Point",)
    assert model[0].field_names() == ("x", "y")


@pytest.mark.parametrize("element_type", ["string", "integer", "Item"])
def test_array_element_may_be_primitive_or_reference(element_type: str) -> None:
    model = parse_schema(f"S =\nitems array {element_type}\n===\n")

    assert model[0].fields == (FieldDeclaration("items", element_type, is_array=True),)


def test_closing_equals_at_end_of_input() -> None:
    model = parse_schema(case_source("single_equals_closes_struct_at_end_of_input"))

    assert model[0].fields == (
        FieldDeclaration("id", "integer"),
        FieldDeclaration("tags", "string", is_array=True),
    )


def test_closing_equals_at_end_of_input_strict_mode() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema(case_source("single_equals_closes_struct_at_end_of_input"), mode=ParseMode.STRICT)

    assert exc_info.value.code == "PARSER_UNEXPECTED_EOF"
    assert exc_info.value.line == 4


def test_equals_at_end_of_input_in_field_type_position_still_fails() -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema("S =\nid =")

    assert exc_info.value.code == "PARSER_UNEXPECTED_EOF"


@pytest.mark.parametrize(
    "source",
    [
        "S =\ninteger id\n===\n",
        "S =\nid array\n===\n",
        "S =\nid array\n=\n",
    ],
)
def test_wrong_token_in_field_position_is_unexpected_token(source: str) -> None:
    with pytest.raises(SchemaSyntaxError) as exc_info:
        parse_schema(source)

    assert exc_info.value.code == "PARSER_UNEXPECTED_TOKEN"
