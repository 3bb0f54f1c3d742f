"""Theme and transition names understood by the bundled reveal.js.

Names are documented and checked, never enforced: an unknown value is
handed to the browser as-is and reveal.js falls back to its defaults.
"""

from __future__ import annotations

THEMES: tuple[str, ...] = (
    "beige",
    "black-contrast",
    "black",
    "blood",
    "dracula",
    "league",
    "moon",
    "night",
    "serif",
    "simple",
    "sky",
    "solarized",
    "white-contrast",
    "white",
    "white_contrast_compact_verbatim_headers",
)

TRANSITIONS: tuple[str, ...] = (
    "none",
    "fade",
    "slide",
    "convex",
    "concave",
    "zoom",
)


def is_known_theme(name: str) -> bool:
    return name in THEMES


def is_known_transition(name: str) -> bool:
    return name in TRANSITIONS


def unknown_choices(theme: str, transition: str) -> list[str]:
    """Describe theme/transition values outside the documented sets.

    Returns:
        Human-readable warnings, empty when both values are known.
    """
    warnings = []
    if not is_known_theme(theme):
        warnings.append(f"unknown theme '{theme}' (see -help for the list)")
    if not is_known_transition(transition):
        warnings.append(f"unknown transition '{transition}' (see -help for the list)")
    return warnings

