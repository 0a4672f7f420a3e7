"""
Parsed value types for swiftui-synth IR.

An example is a pair of key/value mappings: the canvas dimensions and the
declared UI elements. Values are a small tagged union of integers, text,
and ordered mappings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


class IntValue(BaseModel):
    """A signed 32-bit integer value (dimensions only)."""

    kind: Literal["int"] = "int"
    value: int = Field(ge=I32_MIN, le=I32_MAX)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class TextValue(BaseModel):
    """An unquoted, unescaped text value."""

    kind: Literal["text"] = "text"
    value: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.value


class MappingValue(BaseModel):
    """
    Ordered sequence of (key, value) pairs.

    Keys are not required to be unique; lookups by key return the first match.
    """

    kind: Literal["mapping"] = "mapping"
    entries: list[tuple[str, Value]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get(self, key: str) -> Value | None:
        """Return the first value stored under ``key``."""
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None

    def keys(self) -> list[str]:
        """Keys in declaration order."""
        return [key for key, _ in self.entries]

    def __contains__(self, key: object) -> bool:
        return any(entry_key == key for entry_key, _ in self.entries)


Value = IntValue | TextValue | MappingValue

MappingValue.model_rebuild()


class Example(BaseModel):
    """
    A single parsed example: canvas dimensions plus declared elements.

    Attributes:
        dimensions: Mapping holding exactly ``width`` and ``height`` integers
        elements: Mapping of ``title``/``button``/``Image`` text values, or a
            single ``HStack`` mapping of ``child0, child1, ...`` text values
    """

    dimensions: MappingValue
    elements: MappingValue

    model_config = ConfigDict(frozen=True)

    def _dimension(self, key: str) -> int:
        value = self.dimensions.get(key)
        if not isinstance(value, IntValue):
            raise KeyError(key)
        return value.value

    @property
    def width(self) -> int:
        """Canvas width."""
        return self._dimension("width")

    @property
    def height(self) -> int:
        """Canvas height."""
        return self._dimension("height")
