"""Primary colour conversion for the theme setting."""

from __future__ import annotations

import colorsys
import re
from typing import Optional

HEX_COLOR_PATTERN = r"^#?[0-9a-fA-F]{6}$"

_HEX_RE = re.compile(HEX_COLOR_PATTERN)


def normalize_hex(value: str) -> Optional[str]:
    """``"16A34A"`` -> ``"#16a34a"``; ``None`` for anything that is not 6 hex digits."""
    value = value.strip()
    if not _HEX_RE.match(value):
        return None
    return "#" + value.lstrip("#").lower()


def hex_to_hsl_string(value: str) -> Optional[str]:
    """Convert ``#rrggbb`` to the ``"H S% L%"`` form the frontend CSS variables use.

    Components are rounded to whole numbers, e.g. ``#16a34a`` -> ``"142 76% 36%"``.
    """
    normalized = normalize_hex(value)
    if normalized is None:
        return None

    r, g, b = (int(normalized[i:i + 2], 16) / 255 for i in (1, 3, 5))
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    return f"{round(hue * 360) % 360} {round(saturation * 100)}% {round(lightness * 100)}%"
