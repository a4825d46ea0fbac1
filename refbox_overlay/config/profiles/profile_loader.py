"""Profile loader: parses YAML viewer profiles into typed dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from refbox_overlay.config.settings import RENDER_FPS, RULE_WINDOW
from refbox_overlay.entities.game.field import FieldGeometry

_PROFILES_DIR = Path(__file__).parent


class ProfileError(ValueError):
    """Raised when a profile file exists but its content is unusable."""


# ---------------------------------------------------------------------------
# Display config
# ---------------------------------------------------------------------------


@dataclass
class DisplayConfig:
    window_width: int = 1000
    window_height: int = 730
    render_fps: int = RENDER_FPS
    # Violations older than this (in timestamp units) are no longer drawn
    rule_window: float = RULE_WINDOW

    @property
    def window_size(self) -> tuple[int, int]:
        return (self.window_width, self.window_height)


# ---------------------------------------------------------------------------
# Top-level profile
# ---------------------------------------------------------------------------


@dataclass
class ViewerProfile:
    profile_name: str
    geometry: FieldGeometry = field(default_factory=FieldGeometry.standard)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def load_profile(name_or_path: str) -> ViewerProfile:
    """Load a ViewerProfile from a built-in name or an absolute/relative path.

    Built-in names: "default", "small".
    """
    p = Path(name_or_path)
    if not p.is_absolute():
        # Try built-in profiles directory
        candidate = _PROFILES_DIR / f"{name_or_path}.yaml"
        if candidate.exists():
            p = candidate
        elif not p.exists():
            raise FileNotFoundError(f"Profile '{name_or_path}' not found as a built-in name or file path.")

    with open(p, "r") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ProfileError(f"Profile '{name_or_path}' must be a mapping, got {type(data).__name__}")
    return _parse_profile(data)


def _parse_profile(data: dict) -> ViewerProfile:
    standard = FieldGeometry.standard()
    geo_d = data.get("geometry") or {}
    unknown = set(geo_d) - {f.name for f in fields(FieldGeometry)}
    if unknown:
        raise ProfileError(f"Unknown geometry keys: {sorted(unknown)}")
    try:
        geometry = FieldGeometry(**{f.name: geo_d.get(f.name, getattr(standard, f.name)) for f in fields(FieldGeometry)})
    except (TypeError, ValueError) as e:
        raise ProfileError(f"Invalid geometry: {e}") from e

    display_d = data.get("display") or {}
    display = DisplayConfig(
        window_width=int(display_d.get("window_width", 1000)),
        window_height=int(display_d.get("window_height", 730)),
        render_fps=int(display_d.get("render_fps", RENDER_FPS)),
        rule_window=float(display_d.get("rule_window", RULE_WINDOW)),
    )
    if display.window_width <= 0 or display.window_height <= 0 or display.render_fps <= 0:
        raise ProfileError(f"Window size and fps must be positive: {display}")

    return ViewerProfile(
        profile_name=data.get("profile_name", "unknown"),
        geometry=geometry,
        display=display,
    )
