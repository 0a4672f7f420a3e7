"""Version lookup for swiftui-synth, used by ``__version__`` and ``--version``."""

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "swiftui-synth"


def get_version() -> str:
    """
    Return the swiftui-synth version.

    A source checkout reads ``pyproject.toml`` so ``--version`` tracks the
    working tree; an installed package asks the distribution metadata.
    """
    pyproject = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)
    try:
        return _metadata_version(DISTRIBUTION)
    except Exception:
        return "0.0.0"
