"""
swiftui-synth - SwiftUI layout synthesis from compact examples.

Parses a canvas/element example such as

    {(width:390,height:844):{title:"Hello",button:"Click"}}

into an intermediate layout tree and renders it as SwiftUI source.
"""

from __future__ import annotations

# Re-export commonly used types for convenience
from ._version import get_version
from .core import ir
from .core.errors import ConfigError, ParseError, ParseErrorKind, SynthError, SynthesisError
from .core.pipeline import PipelineResult, process_example
from .core.renderer import render_swiftui
from .core.scanner import parse_example, parse_examples
from .core.synthesizer import synthesize_layout

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "SynthError",
    "ParseError",
    "ParseErrorKind",
    "SynthesisError",
    "ConfigError",
    "PipelineResult",
    "parse_example",
    "parse_examples",
    "process_example",
    "render_swiftui",
    "synthesize_layout",
]
