"""
End-to-end pipeline: parse → synthesize → render.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from . import ir
from .errors import SynthesisError
from .renderer import DEFAULT_INDENT, render_swiftui
from .scanner import parse_examples
from .synthesizer import synthesize_layout

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Result of one pipeline run.

    Attributes:
        example: The parsed example
        layout: Synthesized layout tree
        code: Rendered SwiftUI source
        elapsed: Seconds spent synthesizing and rendering
    """

    example: ir.Example
    layout: ir.LayoutNode
    code: str
    elapsed: float

    @property
    def elapsed_display(self) -> str:
        """Elapsed time formatted for humans, e.g. '0.42ms'."""
        if self.elapsed >= 1:
            return f"{self.elapsed:.2f}s"
        if self.elapsed >= 0.001:
            return f"{self.elapsed * 1000:.2f}ms"
        return f"{self.elapsed * 1_000_000:.2f}µs"


def synthesize_example(text: str, file: Path | None = None) -> tuple[ir.Example, ir.LayoutNode]:
    """
    Parse example text and synthesize its layout tree.

    Raises:
        ParseError: If the text is malformed
        SynthesisError: If no layout could be synthesized
    """
    examples = parse_examples(text, file)
    layout = synthesize_layout(examples)
    if layout is None:
        raise SynthesisError("No matching layout found for the given examples")
    return examples[0], layout


def process_example(
    text: str,
    *,
    indent: int = DEFAULT_INDENT,
    file: Path | None = None,
) -> PipelineResult:
    """
    Run the full pipeline on example text.

    Args:
        text: Raw example text
        indent: Spaces per nesting level in the rendered code
        file: Optional source path, used only for error locations

    Returns:
        PipelineResult with the example, layout tree and rendered code

    Raises:
        ParseError: If the text is malformed
        SynthesisError: If no layout could be synthesized
    """
    start = time.perf_counter()
    example, layout = synthesize_example(text, file)
    code = render_swiftui(layout, indent=indent)
    elapsed = time.perf_counter() - start

    logger.debug("Rendered %d lines in %.6fs", code.count("\n") + 1, elapsed)
    return PipelineResult(example=example, layout=layout, code=code, elapsed=elapsed)
