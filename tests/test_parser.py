import textwrap

import pytest

from jackpy.lexer import TokenKind, tokenize
from jackpy.parser import (
    JackSyntaxError,
    ParseError,
    Parser,
    ParserOptions,
    TokenSource,
    UnexpectedEndOfInput,
    parse,
    parse_class,
    parse_parameter_list,
)
from jackpy.syntax import JackSyntaxKind
from jackpy.text import TextRange
from tests._shared_cases import PARSER_CASES, JackCase, case_id


def lines(text: str) -> str:
    return textwrap.dedent(text).lstrip()


def parser_for(source: str, options: ParserOptions | None = None) -> Parser:
    return Parser(TokenSource(tokenize(source), text_len=len(source)), options)


@pytest.mark.parametrize("case", PARSER_CASES, ids=case_id)
def test_shared_parser_cases(case: JackCase) -> None:
    if case.should_parse:
        output = parse(case.source)
        assert output.startswith("<class>\n")
        assert output.endswith("</class>\n")
    else:
        with pytest.raises(ParseError) as excinfo:
            parse(case.source)
        assert type(excinfo.value) is case.expected_error


def test_empty_class_has_only_class_tokens() -> None:
    assert parse("class Main { }") == lines(
        """
        <class>
        <keyword> class </keyword>
        <identifier> Main </identifier>
        <symbol> { </symbol>
        <symbol> } </symbol>
        </class>
        """
    )


def test_field_declaration_writes_primitive_type_as_identifier() -> None:
    assert parse("class Main { field int x; }") == lines(
        """
        <class>
        <keyword> class </keyword>
        <identifier> Main </identifier>
        <symbol> { </symbol>
        <classVarDec>
        <keyword> field </keyword>
        <identifier> int </identifier>
        <identifier> x </identifier>
        <symbol> ; </symbol>
        </classVarDec>
        <symbol> } </symbol>
        </class>
        """
    )


def test_strict_declared_types_reject_primitive_keywords() -> None:
    options = ParserOptions(primitive_types_as_identifiers=False)

    with pytest.raises(JackSyntaxError) as excinfo:
        parse("class Main { field int x; }", options=options)

    assert excinfo.value.expected_kind == TokenKind.IDENTIFIER
    assert excinfo.value.actual.text == "int"
    assert parse("class Main { field Point p; }", options=options).count("<classVarDec>") == 1


def test_void_is_not_a_declared_type() -> None:
    with pytest.raises(JackSyntaxError):
        parse("class Main { field void x; }")


def test_full_class_with_var_decs_and_subroutine() -> None:
    source = "class Main { static Point a, b; function void main(int x, Array y) { } }"

    assert parse(source) == lines(
        """
        <class>
        <keyword> class </keyword>
        <identifier> Main </identifier>
        <symbol> { </symbol>
        <classVarDec>
        <keyword> static </keyword>
        <identifier> Point </identifier>
        <identifier> a </identifier>
        <symbol> , </symbol>
        <identifier> b </identifier>
        <symbol> ; </symbol>
        </classVarDec>
        <subroutineDec>
        <keyword> function </keyword>
        <keyword> void </keyword>
        <identifier> main </identifier>
        <symbol> ( </symbol>
        <parameterList>
        <keyword> int </keyword>
        <identifier> x </identifier>
        <symbol> , </symbol>
        <identifier> Array </identifier>
        <identifier> y </identifier>
        </parameterList>
        <symbol> ) </symbol>
        <subroutineBody>
        <symbol> { </symbol>
        <symbol> } </symbol>
        </subroutineBody>
        </subroutineDec>
        <symbol> } </symbol>
        </class>
        """
    )


def test_empty_parameter_list_still_writes_its_tags() -> None:
    output = parse("class Main { method int size() { } }")

    assert "<symbol> ( </symbol>\n<parameterList>\n</parameterList>\n<symbol> ) </symbol>\n" in output


def test_string_constant_in_parameter_list_is_escaped() -> None:
    output = parse('class Main { function void f("a<b&c", x > y) { } }')

    assert '<stringConstant> "a&lt;b&amp;c" </stringConstant>\n' in output
    assert "<symbol> &gt; </symbol>\n" in output


def test_several_subroutines_in_order() -> None:
    source = textwrap.dedent(
        """
        class Counter {
            field int count;
            constructor Counter new() { }
        }
        """
    )

    # `Counter` is an identifier, and return types only accept keywords.
    with pytest.raises(JackSyntaxError):
        parse(source)

    output = parse(source.replace("constructor Counter", "constructor void"))
    assert output.count("<subroutineDec>") == 1
    assert output.index("</classVarDec>") < output.index("<subroutineDec>")


def test_output_is_balanced_pre_order() -> None:
    source = "class A { field B c; static D e, f; function void g() { } method char h(x) { } }"
    output = parse(source)

    stack: list[str] = []
    for line in output.splitlines():
        if line.startswith("</"):
            assert stack.pop() == line[2:-1]
        elif line.endswith(">") and " " not in line:
            stack.append(line[1:-1])
    assert stack == []


def test_semicolon_where_brace_expected_is_a_syntax_error() -> None:
    with pytest.raises(JackSyntaxError) as excinfo:
        parse("class Main ;")

    error = excinfo.value
    assert error.expected_kind == TokenKind.SYMBOL
    assert error.expected_text == "{"
    assert error.actual.text == ";"
    assert error.token_index == 2
    assert str(error) == "Expected symbol '{', found symbol ';'"
    assert error.diagnostic.code == "PARSER_EXPECTED_TOKEN"
    assert error.diagnostic.range == TextRange(11, 12)


def test_missing_closing_brace_is_unexpected_end_of_input() -> None:
    with pytest.raises(UnexpectedEndOfInput) as excinfo:
        parse("class Main {")

    error = excinfo.value
    assert error.token_index == 3
    assert error.expected == "symbol '}'"
    assert error.diagnostic.code == "PARSER_UNEXPECTED_END_OF_INPUT"
    assert error.diagnostic.range == TextRange(12, 12)


def test_empty_source_fails_on_the_class_keyword() -> None:
    with pytest.raises(UnexpectedEndOfInput) as excinfo:
        parse("")

    assert excinfo.value.expected == "keyword 'class'"
    assert excinfo.value.token_index == 0


def test_unterminated_parameter_list_runs_out_before_closing_paren() -> None:
    with pytest.raises(UnexpectedEndOfInput) as excinfo:
        parse("class Main { function void f(int x")

    error = excinfo.value
    assert error.expected == "symbol ')'"
    assert error.token_index == 9
    assert error.diagnostic.range == TextRange(34, 34)


def test_field_after_subroutine_fails_on_the_field_keyword() -> None:
    with pytest.raises(JackSyntaxError) as excinfo:
        parse("class Main { function void f() { } field int x; }")

    assert excinfo.value.actual.describe() == "keyword 'field'"
    assert excinfo.value.expected_text == "}"


def test_quoted_paren_stays_inside_parameter_list() -> None:
    output = parse('class A { function void f(")") { } }')

    assert '<parameterList>\n<stringConstant> ")" </stringConstant>\n</parameterList>\n' in output


def test_statements_in_subroutine_body_are_rejected() -> None:
    with pytest.raises(JackSyntaxError) as excinfo:
        parse("class Main { function void main() { return; } }")

    assert excinfo.value.actual.describe() == "keyword 'return'"
    assert excinfo.value.expected_text == "}"


def test_class_type_return_is_rejected() -> None:
    with pytest.raises(JackSyntaxError) as excinfo:
        parse("class Main { function Point make() { } }")

    assert excinfo.value.expected_kind == TokenKind.KEYWORD
    assert excinfo.value.actual.describe() == "identifier 'Point'"


def test_parameter_list_stops_at_end_of_input() -> None:
    parser = parser_for("a , b")
    completed = parse_parameter_list(parser)

    assert completed.kind == JackSyntaxKind.PARAMETER_LIST
    assert parser.source.is_exhausted
    assert parser.finish() == lines(
        """
        <parameterList>
        <identifier> a </identifier>
        <symbol> , </symbol>
        <identifier> b </identifier>
        </parameterList>
        """
    )


def test_parse_class_reports_covered_tokens() -> None:
    parser = parser_for("class Main { } extra")
    completed = parse_class(parser)

    assert completed.kind == JackSyntaxKind.CLASS
    assert (completed.start_token, completed.end_token) == (0, 4)
    assert completed.range(parser) == TextRange(0, 14)
    assert [token.text for token in parser.source.remaining] == ["extra"]


def test_peek_never_moves_the_cursor() -> None:
    parser = parser_for("class Main")

    assert parser.peek() is parser.peek()
    assert parser.position == 0
    assert parser.advance().text == "class"
    assert parser.advance().text == "Main"
    assert parser.peek() is None
    with pytest.raises(UnexpectedEndOfInput):
        parser.advance()
    assert parser.position == 2


def test_consume_checks_kind_before_text() -> None:
    parser = parser_for("class")

    with pytest.raises(JackSyntaxError) as excinfo:
        parser.consume(TokenKind.IDENTIFIER, "class")

    assert str(excinfo.value) == "Expected identifier 'class', found keyword 'class'"


def test_markers_must_complete_innermost_first() -> None:
    parser = parser_for("")
    outer = parser.start(JackSyntaxKind.CLASS)
    parser.start(JackSyntaxKind.SUBROUTINE_BODY)

    with pytest.raises(RuntimeError):
        outer.complete(parser)


def test_indent_option_indents_nested_lines() -> None:
    output = parse("class Main { field Point p; }", options=ParserOptions(indent=2))

    assert output == lines(
        """
        <class>
          <keyword> class </keyword>
          <identifier> Main </identifier>
          <symbol> { </symbol>
          <classVarDec>
            <keyword> field </keyword>
            <identifier> Point </identifier>
            <identifier> p </identifier>
            <symbol> ; </symbol>
          </classVarDec>
          <symbol> } </symbol>
        </class>
        """
    )


def test_negative_indent_is_rejected() -> None:
    with pytest.raises(ValueError):
        ParserOptions(indent=-1)


def test_repeated_parses_are_independent() -> None:
    source = "class Main { field Point p; }"

    first = parse(source)
    with pytest.raises(ParseError):
        parse("class Broken ;")
    assert parse(source) == first
