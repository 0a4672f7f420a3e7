"""
Scanner/parser for the example text format.

Converts a single example string into an Example IR value:

    { ( width : 390 , height : 844 ) : { title:"Hello", button:"Click" } }
    { ( width : 390 , height : 844 ) : HStack:{ "A", "Spacer", "B" } }

The scanner is hand-written rather than grammar-driven. It tracks
parenthesis depth to find the dimensions/elements separator, and splits
the element block on commas while respecting quoted strings and
backslash escapes. Whitespace is insignificant outside quoted strings.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from . import ir
from .errors import ParseErrorKind, make_parse_error

logger = logging.getLogger(__name__)

DIMENSION_KEYS = ("width", "height")
ELEMENT_KEYS = ("title", "button", "Image")
HSTACK_PREFIX = "HStack:"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_examples(text: str, file: Path | None = None) -> list[ir.Example]:
    """
    Parse example text into a list of examples.

    The format describes exactly one example, so the list always has a
    single entry. The list shape is what synthesize_layout consumes.

    Args:
        text: Raw example text
        file: Optional source path, used only for error locations

    Returns:
        List containing the parsed Example

    Raises:
        ParseError: If the text is malformed in any way
    """
    return [parse_example(text, file)]


def parse_example(text: str, file: Path | None = None) -> ir.Example:
    """
    Parse example text into an Example.

    Args:
        text: Raw example text
        file: Optional source path, used only for error locations

    Returns:
        Parsed Example with dimensions and elements

    Raises:
        ParseError: If the text is malformed in any way
    """
    stripped = text.strip()
    if not stripped.startswith("{") or not stripped.endswith("}"):
        raise make_parse_error(
            ParseErrorKind.MALFORMED_ENVELOPE,
            "Input must be enclosed in curly braces, e.g., {example}",
        )

    inner = stripped[1:-1]
    if not inner.strip():
        raise make_parse_error(
            ParseErrorKind.EMPTY_INPUT,
            "Input must contain at least one example",
        )

    # Offset of inner[0] within the original text, for error locations
    base = len(text) - len(text.lstrip()) + 1
    colon = _find_separator(inner, text, base, file)

    dims_str = inner[:colon].strip()
    elements_str = inner[colon + 1 :].strip()
    logger.debug("Split example at offset %d: dims=%r elements=%r", colon, dims_str, elements_str)

    dimensions = _parse_dimensions(dims_str)
    if elements_str.startswith(HSTACK_PREFIX):
        elements = _parse_hstack(elements_str[len(HSTACK_PREFIX) :].strip())
    else:
        elements = _parse_elements(elements_str)

    return ir.Example(dimensions=dimensions, elements=elements)


def _find_separator(inner: str, text: str, base: int, file: Path | None) -> int:
    """
    Locate the ':' separating the dimensions block from the element block.

    Walks ``inner`` tracking parenthesis depth. The separator is the first
    ':' following (past whitespace) the ')' that brings depth back to zero.

    Returns:
        Index of the separator within ``inner``
    """
    depth = 0
    opened_at = 0

    for i, ch in enumerate(inner):
        if ch == "(":
            if depth == 0:
                opened_at = i
            depth += 1
        elif ch == ")":
            if depth == 0:
                raise make_parse_error(
                    ParseErrorKind.UNBALANCED_PARENS,
                    "Mismatched parenthesis in dimensions (extra closing parenthesis?)",
                    text,
                    base + i,
                    file,
                )
            depth -= 1
            if depth == 0:
                j = i + 1
                while j < len(inner) and inner[j].isspace():
                    j += 1
                if j < len(inner) and inner[j] == ":":
                    return j
                raise make_parse_error(
                    ParseErrorKind.MISSING_SEPARATOR,
                    "Expected ':' after dimensions '(...)', possibly missing or misplaced.",
                    text,
                    base + j,
                    file,
                )
        elif ch == ":" and depth == 0:
            raise make_parse_error(
                ParseErrorKind.SEPARATOR_BEFORE_DIMENSIONS,
                "Found ':' before dimensions '(..)' were closed or defined.",
                text,
                base + i,
                file,
            )

    if depth != 0:
        raise make_parse_error(
            ParseErrorKind.UNBALANCED_PARENS,
            "Mismatched parenthesis in dimensions (not closed)",
            text,
            base + opened_at,
            file,
        )

    raise make_parse_error(
        ParseErrorKind.MISSING_SEPARATOR,
        "Could not find dimensions-elements separator '):{'",
    )


def _parse_dimensions(dims_str: str) -> ir.MappingValue:
    """Parse '(width: W, height: H)' into a width/height mapping."""
    if not dims_str.startswith("(") or not dims_str.endswith(")"):
        raise make_parse_error(
            ParseErrorKind.MALFORMED_DIMENSIONS,
            "Dimensions part must be enclosed in parentheses, e.g., (width: W, height: H)",
        )

    content = dims_str[1:-1]
    if "(" in content or ")" in content:
        raise make_parse_error(
            ParseErrorKind.NESTED_PARENS,
            "Extra or mismatched parentheses within dimensions block.",
        )

    found: dict[str, int] = {}
    for part in content.split(","):
        part = part.strip()
        if not part:
            continue  # trailing comma
        key, sep, value = part.partition(":")
        key = key.strip()
        if key not in DIMENSION_KEYS:
            raise make_parse_error(
                ParseErrorKind.UNKNOWN_DIMENSION_KEY,
                f"Unsupported dimension key: '{key}'",
            )
        if not sep:
            raise make_parse_error(
                ParseErrorKind.INVALID_DIMENSION_VALUE,
                f"Missing dimension value for key '{key}'",
            )
        found[key] = _parse_integer(key, value.strip())

    for key in DIMENSION_KEYS:
        if key not in found:
            raise make_parse_error(
                ParseErrorKind.MISSING_DIMENSION,
                f"Missing {key} dimension",
            )

    return ir.MappingValue(
        entries=[(key, ir.IntValue(value=found[key])) for key in DIMENSION_KEYS]
    )


def _parse_integer(key: str, value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise make_parse_error(
            ParseErrorKind.INVALID_DIMENSION_VALUE,
            f"Invalid {key} value '{value}'",
        )
    number = int(value)
    if not ir.I32_MIN <= number <= ir.I32_MAX:
        raise make_parse_error(
            ParseErrorKind.INVALID_DIMENSION_VALUE,
            f"Invalid {key} value '{value}': number out of range for a 32-bit integer",
        )
    return number


def _parse_hstack(block: str) -> ir.MappingValue:
    """Parse '{"A", "B", ...}' into an HStack mapping of child0..childN."""
    if len(block) < 2 or not block.startswith("{") or not block.endswith("}"):
        raise make_parse_error(
            ParseErrorKind.MALFORMED_HSTACK,
            f"HStack elements must be enclosed in braces: '{block}'",
        )

    children: list[tuple[str, ir.Value]] = []
    for raw in block[1:-1].split(","):
        elem = raw.strip()
        if not elem:
            continue
        if not _is_quoted(elem):
            raise make_parse_error(
                ParseErrorKind.UNQUOTED_HSTACK_CHILD,
                f"HStack child value must be quoted: {elem}",
            )
        children.append((f"child{len(children)}", ir.TextValue(value=elem[1:-1])))

    logger.debug("Parsed HStack with %d children", len(children))
    return ir.MappingValue(entries=[("HStack", ir.MappingValue(entries=children))])


def _parse_elements(block: str) -> ir.MappingValue:
    """Parse '{key:"value", ...}' into an element mapping."""
    if len(block) < 2 or not block.startswith("{") or not block.endswith("}"):
        raise make_parse_error(
            ParseErrorKind.MALFORMED_ELEMENTS,
            f"Elements must be enclosed in braces: '{block}'",
        )

    segments = split_segments(block[1:-1])
    logger.debug("Element block has %d segments", len(segments))
    return ir.MappingValue(entries=[_parse_element(segment) for segment in segments])


def split_segments(text: str) -> list[str]:
    """
    Split an element block interior on commas outside quoted strings.

    A backslash escapes the following character: the pair is copied to the
    segment unchanged and never counts as a quote or a separator. A dangling
    backslash at the end of input is kept literally. Empty segments are
    dropped and the rest are stripped.
    """
    segments: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = False

    for ch in text:
        if escaped:
            current.append("\\")
            current.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == "," and not in_quotes:
            segments.append("".join(current))
            current = []
        else:
            current.append(ch)

    if escaped:
        current.append("\\")
    segments.append("".join(current))

    return [segment.strip() for segment in segments if segment.strip()]


def _parse_element(segment: str) -> tuple[str, ir.Value]:
    """Parse a single key:"value" segment."""
    key, sep, value = segment.partition(":")
    key = key.strip()
    if key not in ELEMENT_KEYS:
        raise make_parse_error(
            ParseErrorKind.UNKNOWN_ELEMENT_KEY,
            f"Unsupported element key '{key}': must be 'title', 'button', or 'Image'",
        )
    if not sep:
        raise make_parse_error(
            ParseErrorKind.MISSING_ELEMENT_VALUE,
            f"Missing value for element key '{key}'",
        )

    value = value.strip()
    if not _is_quoted(value):
        raise make_parse_error(
            ParseErrorKind.UNQUOTED_VALUE,
            f"Value for key '{key}' must be enclosed in double quotes: got '{value}'",
        )

    return key, ir.TextValue(value=unescape_value(value[1:-1]))


def unescape_value(raw: str) -> str:
    """
    Resolve ``\\"`` and ``\\\\`` escapes in a quoted value's interior.

    Any other backslash, including a trailing one, is kept literally.
    """
    out: list[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch == "\\" and i + 1 < len(raw) and raw[i + 1] in ('"', "\\"):
            out.append(raw[i + 1])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value.startswith('"') and value.endswith('"')
