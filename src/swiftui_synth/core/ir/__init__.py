"""
swiftui-synth Intermediate Representation (IR) types.

Types are organized into two submodules:

- values.py: parsed example values (IntValue, TextValue, MappingValue, Example)
- layout.py: synthesized layout tree (Stack, Label, ActionControl, Picture, Filler)

All types are re-exported from this package.
"""

# Layout tree
from .layout import (
    ActionControl,
    Filler,
    Label,
    LayoutNode,
    Orientation,
    Picture,
    Stack,
)

# Parsed values
from .values import (
    I32_MAX,
    I32_MIN,
    Example,
    IntValue,
    MappingValue,
    TextValue,
    Value,
)

__all__ = [
    # Values
    "I32_MAX",
    "I32_MIN",
    "Example",
    "IntValue",
    "MappingValue",
    "TextValue",
    "Value",
    # Layout
    "ActionControl",
    "Filler",
    "Label",
    "LayoutNode",
    "Orientation",
    "Picture",
    "Stack",
]
