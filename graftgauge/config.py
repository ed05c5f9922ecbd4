"""
Runtime settings (from environment variables) and the display palette.
"""

from __future__ import annotations

import os

from graftgauge.api.gauge_models import ZoneCategory


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


GAUGE_SIZE = _get_float("GRAFTGAUGE_GAUGE_SIZE", 200.0)
LOG_LEVEL = os.getenv("GRAFTGAUGE_LOG_LEVEL", "WARNING").upper()
VALIDATE_ON_STARTUP = os.getenv("GRAFTGAUGE_VALIDATE_ON_STARTUP", "true").lower() != "false"

# Zone colours for arcs and the value readout
ZONE_COLORS: dict[ZoneCategory, str] = {
    ZoneCategory.OPTIMAL: "#2E7D32",
    ZoneCategory.CAUTION: "#F9A825",
    ZoneCategory.CONCERNING: "#C62828",
}

# Readout colour when a category has no palette entry
DEFAULT_TEXT_COLOR = "#212121"
