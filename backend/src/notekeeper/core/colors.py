"""Hex color helpers shared by notes and categories.

Colors are stored lowercase without the leading ``#`` and always rendered
as ``#`` + stored value.
"""

import re
from typing import Optional

DEFAULT_COLOR = "ffffff"

HEX_COLOR_PATTERN = re.compile(r"^(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def normalize_color(value: Optional[str], default: Optional[str] = DEFAULT_COLOR) -> Optional[str]:
    """Strip a leading ``#``, expand 3-digit shorthand and lowercase; ``None``/empty gives ``default``.

    Raises:
        ValueError: if the value is not a 3- or 6-digit hex color
    """
    if value is None:
        return default
    clean = value.strip()
    if clean.startswith("#"):
        clean = clean[1:]
    if not clean:
        return default
    if not HEX_COLOR_PATTERN.match(clean):
        raise ValueError("Color must be a valid hex color code")
    if len(clean) == 3:
        # shorthand "abc" is stored as "aabbcc"
        clean = "".join(digit * 2 for digit in clean)
    return clean.lower()


def format_color(stored: Optional[str]) -> str:
    """Render a stored color for API responses."""
    return f"#{stored or DEFAULT_COLOR}"
