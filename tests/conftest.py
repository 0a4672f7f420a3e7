"""Shared pytest fixtures for swiftui-synth tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from swiftui_synth.core import ir

FULL_EXAMPLE = '{(width:390,height:844):{title:"Hello",button:"Click"}}'
HSTACK_EXAMPLE = '{(width:390,height:844):HStack:{"A","B","Spacer","C"}}'


@pytest.fixture
def full_example_text() -> str:
    """Return the canonical title + button example."""
    return FULL_EXAMPLE


@pytest.fixture
def hstack_example_text() -> str:
    """Return the canonical HStack example."""
    return HSTACK_EXAMPLE


@pytest.fixture
def examples_file(tmp_path: Path) -> Path:
    """Write the canonical example to a file and return its path."""
    path = tmp_path / "examples.txt"
    path.write_text(FULL_EXAMPLE + "\n", encoding="utf-8")
    return path


def build_example(
    title: str | None = None,
    button: str | None = None,
    image: str | None = None,
    hstack: list[str] | None = None,
) -> ir.Example:
    """Build an Example directly, bypassing the parser."""
    entries: list[tuple[str, ir.Value]] = []
    if title is not None:
        entries.append(("title", ir.TextValue(value=title)))
    if button is not None:
        entries.append(("button", ir.TextValue(value=button)))
    if image is not None:
        entries.append(("Image", ir.TextValue(value=image)))
    if hstack is not None:
        children: list[tuple[str, ir.Value]] = [
            (f"child{i}", ir.TextValue(value=child)) for i, child in enumerate(hstack)
        ]
        entries.append(("HStack", ir.MappingValue(entries=children)))

    return ir.Example(
        dimensions=ir.MappingValue(
            entries=[
                ("width", ir.IntValue(value=390)),
                ("height", ir.IntValue(value=844)),
            ]
        ),
        elements=ir.MappingValue(entries=entries),
    )


@pytest.fixture
def make_example() -> Callable[..., ir.Example]:
    """Return the Example factory."""
    return build_example
