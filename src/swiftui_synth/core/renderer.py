"""
SwiftUI source rendering for layout trees.

Turns a LayoutNode tree into declarative SwiftUI source using a
block/modifier-chain style:

    VStack {
        Text("Hello")
            .font(.title)
            .padding()
        Spacer()
        Button("Click") { }
            .padding()
    }
    .padding()
"""

from __future__ import annotations

from . import ir

DEFAULT_INDENT = 4

_STACK_KEYWORDS = {
    ir.Orientation.VERTICAL: "VStack",
    ir.Orientation.HORIZONTAL: "HStack",
}


def render_swiftui(node: ir.LayoutNode, indent: int = DEFAULT_INDENT) -> str:
    """
    Render a layout tree as SwiftUI source.

    Args:
        node: Root of the layout tree
        indent: Spaces per nesting level

    Returns:
        Source text with no trailing whitespace on any line; a top-level
        stack ends with a single newline
    """
    lines = _render(node, 0, indent)
    text = normalize_whitespace("\n".join(lines))
    if isinstance(node, ir.Stack):
        text += "\n"
    return text


def normalize_whitespace(text: str) -> str:
    """Strip trailing whitespace from every line and unify line endings."""
    return "\n".join(line.rstrip() for line in text.splitlines())


def swift_string(value: str) -> str:
    """Quote ``value`` as a Swift string literal, escaping embedded double quotes."""
    return '"' + value.replace('"', '\\"') + '"'


def _render(node: ir.LayoutNode, level: int, indent: int) -> list[str]:
    pad = " " * (level * indent)
    modifier = pad + " " * indent

    if isinstance(node, ir.Stack):
        lines = [f"{pad}{_STACK_KEYWORDS[node.orientation]} {{"]
        for child in node.children:
            lines.extend(_render(child, level + 1, indent))
        lines.append(f"{pad}}}")
        lines.append(f"{pad}.padding()")
        return lines

    if isinstance(node, ir.Label):
        return [
            f"{pad}Text({swift_string(node.text)})",
            f"{modifier}.font(.title)",
            f"{modifier}.padding()",
        ]

    if isinstance(node, ir.ActionControl):
        return [
            f"{pad}Button({swift_string(node.label)}) {{ }}",
            f"{modifier}.padding()",
        ]

    if isinstance(node, ir.Picture):
        return [f"{pad}Image({swift_string(node.name)})"]

    if isinstance(node, ir.Filler):
        return [f"{pad}Spacer()"]

    raise TypeError(f"Unsupported layout node: {type(node).__name__}")
