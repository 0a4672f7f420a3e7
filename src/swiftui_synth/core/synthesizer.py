"""
Layout synthesis from parsed examples.

Synthesis here is a fixed structural mapping from the set of element keys
present in an example to a canned layout tree:

- ``HStack`` present: a horizontal stack of its children, where a child
  reading ``Spacer`` becomes a Filler and anything else a Label. No other
  keys are consulted.
- Otherwise: a vertical stack of Picture (``Image``), Label (``title``),
  an unconditional Filler, and ActionControl (``button``, omitted when the
  label is empty).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from . import ir

logger = logging.getLogger(__name__)

SPACER_TEXT = "Spacer"


def synthesize_layout(examples: Sequence[ir.Example]) -> ir.LayoutNode | None:
    """
    Synthesize a layout tree from examples.

    Only the first example is inspected.

    Args:
        examples: Parsed examples

    Returns:
        Root layout node, or None when no examples were given
    """
    if not examples:
        logger.debug("No examples given, nothing to synthesize")
        return None

    elements = examples[0].elements

    hstack = elements.get("HStack")
    if isinstance(hstack, ir.MappingValue):
        return _synthesize_hstack(hstack)

    return _synthesize_vstack(elements)


def _synthesize_hstack(children: ir.MappingValue) -> ir.Stack:
    nodes: list[ir.LayoutNode] = []
    for key, value in children.entries:
        if not isinstance(value, ir.TextValue):
            logger.warning("Unsupported HStack child type for %s: %s", key, value.kind)
            continue
        text = value.value.strip('"')
        if text == SPACER_TEXT:
            nodes.append(ir.Filler())
        else:
            nodes.append(ir.Label(text=text))

    logger.debug("Synthesized HStack with %d children", len(nodes))
    return ir.Stack(orientation=ir.Orientation.HORIZONTAL, children=nodes)


def _synthesize_vstack(elements: ir.MappingValue) -> ir.Stack:
    image = _text(elements, "Image")
    title = _text(elements, "title")
    button = _text(elements, "button")

    nodes: list[ir.LayoutNode] = []
    if image is not None:
        nodes.append(ir.Picture(name=image))
    if title is not None:
        nodes.append(ir.Label(text=title))
    nodes.append(ir.Filler())
    # An empty button label suppresses the control
    if button:
        nodes.append(ir.ActionControl(label=button))

    logger.debug("Synthesized VStack with %d children", len(nodes))
    return ir.Stack(orientation=ir.Orientation.VERTICAL, children=nodes)


def _text(elements: ir.MappingValue, key: str) -> str | None:
    value = elements.get(key)
    if isinstance(value, ir.TextValue):
        return value.value
    return None
