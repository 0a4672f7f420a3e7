"""Tests for the example scanner/parser."""

import pytest

from swiftui_synth.core import ir
from swiftui_synth.core.errors import ParseError, ParseErrorKind
from swiftui_synth.core.scanner import (
    parse_example,
    parse_examples,
    split_segments,
    unescape_value,
)


def _kind(text: str) -> ParseErrorKind:
    with pytest.raises(ParseError) as exc_info:
        parse_example(text)
    return exc_info.value.kind


def _text(example: ir.Example, key: str) -> str:
    value = example.elements.get(key)
    assert isinstance(value, ir.TextValue)
    return value.value


class TestParseValid:
    """Tests for well-formed examples."""

    def test_full_example(self, full_example_text: str) -> None:
        """Title and button example parses dimensions and elements."""
        example = parse_example(full_example_text)

        assert example.width == 390
        assert example.height == 844
        assert example.dimensions.keys() == ["width", "height"]
        assert example.elements.keys() == ["title", "button"]
        assert _text(example, "title") == "Hello"
        assert _text(example, "button") == "Click"

    def test_parse_examples_returns_single_example(self, full_example_text: str) -> None:
        """The format describes exactly one example."""
        result = parse_examples(full_example_text)
        assert len(result) == 1
        assert result[0] == parse_example(full_example_text)

    def test_small_dimensions(self) -> None:
        example = parse_example('{(width:1,height:2):{title:"x"}}')
        assert example.width == 1
        assert example.height == 2

    def test_dimension_order_is_normalized(self) -> None:
        """Height may be declared first; the mapping keeps width first."""
        example = parse_example('{(height:2,width:1):{title:"x"}}')
        assert example.dimensions.keys() == ["width", "height"]
        assert example.width == 1

    def test_signed_dimensions(self) -> None:
        example = parse_example('{(width:-5,height:+7):{}}')
        assert example.width == -5
        assert example.height == 7

    def test_dimension_trailing_comma(self) -> None:
        example = parse_example('{(width:10,height:20,):{}}')
        assert example.height == 20

    def test_title_only(self) -> None:
        example = parse_example('{(width:390,height:844):{title:"Welcome"}}')
        assert example.elements.keys() == ["title"]
        assert _text(example, "title") == "Welcome"

    def test_image(self) -> None:
        example = parse_example('{(width:390,height:844):{Image:"icon"}}')
        assert _text(example, "Image") == "icon"

    def test_empty_elements(self) -> None:
        example = parse_example("{(width:100, height:100):{}}")
        assert example.elements.entries == []

    def test_empty_button_is_kept(self) -> None:
        """An empty button label is a valid value; synthesis decides what to do."""
        example = parse_example('{(width:1,height:1):{title:"T",button:""}}')
        assert _text(example, "button") == ""

    def test_extra_whitespace(self) -> None:
        text = '  {  ( width : 390 , height : 844 ) : { title : "Hello" , button : "Click" }  }  '
        example = parse_example(text)
        assert example.width == 390
        assert example.height == 844
        assert _text(example, "title") == "Hello"
        assert _text(example, "button") == "Click"

    def test_multiline_input(self) -> None:
        text = '{\n  (width: 390, height: 844):\n  {\n    title: "Hello"\n  }\n}\n'
        example = parse_example(text)
        assert _text(example, "title") == "Hello"

    def test_duplicate_keys_preserved_in_order(self) -> None:
        """Duplicates are kept; lookups return the first."""
        example = parse_example('{(width:1,height:1):{title:"first",title:"second"}}')
        assert example.elements.keys() == ["title", "title"]
        assert _text(example, "title") == "first"

    def test_repeated_dimension_last_wins(self) -> None:
        example = parse_example('{(width:10,width:20,height:1):{title:"x"}}')
        assert example.width == 20
        assert example.dimensions.keys() == ["width", "height"]

    def test_value_may_contain_structural_characters(self) -> None:
        example = parse_example('{(width:1,height:1):{title:"a, b: {c} (d)"}}')
        assert _text(example, "title") == "a, b: {c} (d)"

    def test_value_keeps_inner_whitespace(self) -> None:
        example = parse_example('{(width:1,height:1):{title:"  padded  "}}')
        assert _text(example, "title") == "  padded  "


class TestEscapes:
    """Tests for quote and backslash escapes in element values."""

    def test_escaped_quote(self) -> None:
        example = parse_example(r'{(width:1,height:1):{title:"a\"b"}}')
        assert _text(example, "title") == 'a"b'

    def test_escaped_quotes_with_comma(self) -> None:
        text = r'{(width:390,height:844):{title:"Hello, \"World\"!", button:"\"OK\""}}'
        example = parse_example(text)
        assert _text(example, "title") == 'Hello, "World"!'
        assert _text(example, "button") == '"OK"'

    def test_escaped_backslash(self) -> None:
        example = parse_example(r'{(width:1,height:1):{title:"a\\b"}}')
        assert _text(example, "title") == "a\\b"

    def test_escaped_backslash_before_closing_quote(self) -> None:
        example = parse_example(r'{(width:1,height:1):{title:"a\\",button:"b"}}')
        assert _text(example, "title") == "a\\"
        assert _text(example, "button") == "b"

    def test_other_backslash_preserved(self) -> None:
        example = parse_example(r'{(width:1,height:1):{title:"a\nb"}}')
        assert _text(example, "title") == "a\\nb"

    def test_double_escaped_backslash_unescapes_once(self) -> None:
        example = parse_example(r'{(width:1,height:1):{title:"a\\\\"}}')
        assert _text(example, "title") == "a\\\\"

    def test_escaped_comma_does_not_split(self) -> None:
        segments = split_segments(r'title:"x"\,button:"y"')
        assert len(segments) == 1


class TestSplitSegments:
    """Tests for the quote- and escape-aware comma splitter."""

    def test_splits_on_top_level_commas(self) -> None:
        assert split_segments('title:"a", button:"b"') == ['title:"a"', 'button:"b"']

    def test_ignores_commas_in_quotes(self) -> None:
        assert split_segments('title:"a,b"') == ['title:"a,b"']

    def test_drops_empty_segments(self) -> None:
        assert split_segments(' , title:"a",, ') == ['title:"a"']

    def test_keeps_escape_pairs(self) -> None:
        assert split_segments(r'title:"a\"b"') == [r'title:"a\"b"']

    def test_trailing_backslash_kept(self) -> None:
        assert split_segments("abc\\") == ["abc\\"]


class TestUnescapeValue:
    """Tests for value unescaping."""

    def test_quote_and_backslash(self) -> None:
        assert unescape_value(r"a\"b\\c") == 'a"b\\c'

    def test_unknown_escape_kept(self) -> None:
        assert unescape_value(r"a\tb") == "a\\tb"

    def test_lone_trailing_backslash_kept(self) -> None:
        assert unescape_value("abc\\") == "abc\\"


class TestEnvelopeErrors:
    """Tests for outer brace and separator failures."""

    def test_missing_braces(self) -> None:
        assert _kind('(width:390,height:844):{title:"Hello"}') == ParseErrorKind.MALFORMED_ENVELOPE

    def test_not_an_example(self) -> None:
        assert _kind("not an example") == ParseErrorKind.MALFORMED_ENVELOPE

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_blank_input(self, text: str) -> None:
        assert _kind(text) == ParseErrorKind.MALFORMED_ENVELOPE

    @pytest.mark.parametrize("text", ["{}", "{   }"])
    def test_empty_braces(self, text: str) -> None:
        assert _kind(text) == ParseErrorKind.EMPTY_INPUT

    @pytest.mark.parametrize(
        "text",
        [
            '{(width:390,height:844){title:"Hello"}}',
            '{(width:390,height:844) {title:"Hello"}}',
            '{(width:390,height:844);{title:"Hello"}}',
            '{(width:390,height:844))):{title:"Hello"}}',
        ],
    )
    def test_missing_separator_after_dimensions(self, text: str) -> None:
        assert _kind(text) == ParseErrorKind.MISSING_SEPARATOR

    def test_no_dimensions_at_all(self) -> None:
        assert _kind("{abc}") == ParseErrorKind.MISSING_SEPARATOR

    def test_separator_before_dimensions(self) -> None:
        text = '{width:390,height:844):{title:"Hello"}}'
        assert _kind(text) == ParseErrorKind.SEPARATOR_BEFORE_DIMENSIONS

    def test_unclosed_dimensions(self) -> None:
        assert _kind('{(width:1,height:2:{title:"x"}}') == ParseErrorKind.UNBALANCED_PARENS

    def test_extra_closing_paren_first(self) -> None:
        assert _kind('{)(width:1,height:2):{title:"x"}}') == ParseErrorKind.UNBALANCED_PARENS

    @pytest.mark.parametrize(
        "text",
        [
            '{(width:1,height:2:{title:"x"}}',
            '{((width:1,height:2)):{title:"x"}}',
            '{(width:390,height:844:{title:"Hello"}}',
            '{((width:390,height:844)):{title:"Hello"}}',
        ],
    )
    def test_parenthesis_errors(self, text: str) -> None:
        assert _kind(text).is_parenthesis_error

    def test_scan_error_has_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example('  {(width:1,height:2)x:{}}')
        context = exc_info.value.context
        assert context is not None
        assert context.line == 1
        assert context.column == 22
        assert "^" in str(exc_info.value)


class TestDimensionErrors:
    """Tests for dimensions block failures."""

    def test_nested_parens(self) -> None:
        assert _kind('{((width:1,height:2)):{title:"x"}}') == ParseErrorKind.NESTED_PARENS

    def test_text_before_dimensions(self) -> None:
        assert _kind("{x(width:1,height:2):{}}") == ParseErrorKind.MALFORMED_DIMENSIONS

    def test_invalid_value(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example('{(width:abc,height:844):{title:"Hello"}}')
        assert exc_info.value.kind == ParseErrorKind.INVALID_DIMENSION_VALUE
        assert "Invalid width value" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["1.5", "1_000", "", "0x10", "2147483648", "-2147483649"])
    def test_non_i32_values(self, value: str) -> None:
        text = f"{{(width:{value},height:1):{{}}}}"
        assert _kind(text) == ParseErrorKind.INVALID_DIMENSION_VALUE

    def test_i32_bounds_accepted(self) -> None:
        example = parse_example("{(width:2147483647,height:-2147483648):{}}")
        assert example.width == 2147483647
        assert example.height == -2147483648

    def test_key_without_value(self) -> None:
        assert _kind("{(width,height:1):{}}") == ParseErrorKind.INVALID_DIMENSION_VALUE

    def test_unknown_key(self) -> None:
        assert _kind("{(width:1,depth:2):{}}") == ParseErrorKind.UNKNOWN_DIMENSION_KEY

    def test_positional_value_rejected(self) -> None:
        assert _kind('{(390,height:844):{title:"Hello"}}') == ParseErrorKind.UNKNOWN_DIMENSION_KEY

    def test_missing_height(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example('{(width:390):{title:"Hello"}}')
        assert exc_info.value.kind == ParseErrorKind.MISSING_DIMENSION
        assert "height" in exc_info.value.message

    def test_empty_dimensions(self) -> None:
        assert _kind('{():{title:"Hello"}}') == ParseErrorKind.MISSING_DIMENSION


class TestElementErrors:
    """Tests for element block failures."""

    def test_elements_without_braces(self) -> None:
        assert _kind('{(width:1,height:1):title:"x"}') == ParseErrorKind.MALFORMED_ELEMENTS

    def test_unsupported_key(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example('{(width:390,height:844):{TextField:"placeholder"}}')
        assert exc_info.value.kind == ParseErrorKind.UNKNOWN_ELEMENT_KEY
        assert "Unsupported element key 'TextField'" in str(exc_info.value)

    def test_keys_are_case_sensitive(self) -> None:
        assert _kind('{(width:1,height:1):{image:"x"}}') == ParseErrorKind.UNKNOWN_ELEMENT_KEY

    def test_missing_value(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example("{(width:390,height:844):{title}}")
        assert exc_info.value.kind == ParseErrorKind.MISSING_ELEMENT_VALUE
        assert "Missing value for element key 'title'" in str(exc_info.value)

    def test_unquoted_value(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example("{(width:1,height:1):{title:Hello}}")
        assert exc_info.value.kind == ParseErrorKind.UNQUOTED_VALUE
        assert "Value for key 'title' must be enclosed in double quotes" in str(exc_info.value)

    def test_single_quote_is_not_quoted(self) -> None:
        assert _kind('{(width:1,height:1):{title:"}}') == ParseErrorKind.UNQUOTED_VALUE


class TestHStack:
    """Tests for the HStack element block."""

    def test_valid_hstack(self, hstack_example_text: str) -> None:
        example = parse_example(hstack_example_text)

        assert example.elements.keys() == ["HStack"]
        children = example.elements.get("HStack")
        assert isinstance(children, ir.MappingValue)
        assert children.keys() == ["child0", "child1", "child2", "child3"]
        assert [str(v) for _, v in children.entries] == ["A", "B", "Spacer", "C"]

    def test_hstack_whitespace(self) -> None:
        example = parse_example('{ (width:1,height:1) : HStack: { "A" , "B" } }')
        children = example.elements.get("HStack")
        assert isinstance(children, ir.MappingValue)
        assert [str(v) for _, v in children.entries] == ["A", "B"]

    def test_empty_hstack(self) -> None:
        example = parse_example("{(width:1,height:1):HStack:{}}")
        children = example.elements.get("HStack")
        assert isinstance(children, ir.MappingValue)
        assert children.entries == []

    def test_missing_braces(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example('{(width:390,height:844):HStack:"A","B","Spacer","C"}')
        assert exc_info.value.kind == ParseErrorKind.MALFORMED_HSTACK
        assert "HStack elements must be enclosed in braces" in str(exc_info.value)

    def test_missing_quotes(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_example('{(width:390,height:844):HStack:{"A",B,"Spacer","C"}}')
        assert exc_info.value.kind == ParseErrorKind.UNQUOTED_HSTACK_CHILD
        assert "HStack child value must be quoted" in str(exc_info.value)
