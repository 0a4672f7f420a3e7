"""
Layout tree types for swiftui-synth IR.

The synthesizer builds a LayoutNode tree from a parsed Example; the
renderer turns that tree into SwiftUI source text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Orientation(StrEnum):
    """Axis along which a stack arranges its children."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Label(BaseModel):
    """Static text display."""

    kind: Literal["label"] = "label"
    text: str

    model_config = ConfigDict(frozen=True)


class ActionControl(BaseModel):
    """Tappable control showing ``label``."""

    kind: Literal["action_control"] = "action_control"
    label: str

    model_config = ConfigDict(frozen=True)


class Picture(BaseModel):
    """Image referenced by asset name."""

    kind: Literal["picture"] = "picture"
    name: str

    model_config = ConfigDict(frozen=True)


class Filler(BaseModel):
    """Flexible empty space between siblings."""

    kind: Literal["filler"] = "filler"

    model_config = ConfigDict(frozen=True)


class Stack(BaseModel):
    """
    Container arranging children along one axis.

    Attributes:
        orientation: Vertical or horizontal arrangement
        children: Child nodes in render order
    """

    kind: Literal["stack"] = "stack"
    orientation: Orientation
    children: list[LayoutNode] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_vertical(self) -> bool:
        return self.orientation == Orientation.VERTICAL


LayoutNode = Stack | Label | ActionControl | Picture | Filler

Stack.model_rebuild()
