"""
Rich UI components for the swiftui-synth CLI.

Provides styled status lines and a tree view of synthesized layouts.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text
from rich.tree import Tree

from .core import ir

console = Console()
err_console = Console(stderr=True)


# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "highlight": Style(color="bright_cyan"),
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]), soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]), soft_wrap=True)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]), soft_wrap=True)


def layout_tree(example: ir.Example, layout: ir.LayoutNode) -> Tree:
    """Build a rich Tree describing an example's canvas and its layout."""
    root = Tree(
        Text(f"Canvas {example.width}×{example.height}", style=STYLES["title"]),
    )
    _add_node(root, layout)
    return root


def _add_node(parent: Tree, node: ir.LayoutNode) -> None:
    if isinstance(node, ir.Stack):
        keyword = "VStack" if node.is_vertical else "HStack"
        label = f"{keyword} ({len(node.children)} children)"
        branch = parent.add(Text(label, style=STYLES["highlight"]))
        for child in node.children:
            _add_node(branch, child)
    elif isinstance(node, ir.Label):
        parent.add(Text(f"Label {node.text!r}"))
    elif isinstance(node, ir.ActionControl):
        parent.add(Text(f"ActionControl {node.label!r}"))
    elif isinstance(node, ir.Picture):
        parent.add(Text(f"Picture {node.name!r}"))
    else:
        parent.add(Text("Filler", style=STYLES["muted"]))
