"""Package data resolution.

Locates the resources shipped inside the revealmd package. Both are
read-only and live for the whole process:

    templates/slides.html.j2 — default presentation shell template
    reveal.js/               — reveal.js distribution served under /reveal.js/
"""

from __future__ import annotations

from importlib.resources import files
from importlib.resources.abc import Traversable

_PACKAGE = "revealmd"
_DEFAULT_TEMPLATE = "templates/slides.html.j2"
_ASSET_DIR = "reveal.js"

# Files a usable reveal.js distribution must contain
REQUIRED_ASSETS = (
    "dist/reveal.js",
    "dist/reveal.css",
    "plugin/markdown/markdown.js",
)


def package_root() -> Traversable:
    """Return the root of the installed revealmd package."""
    return files(_PACKAGE)


def default_template() -> Traversable:
    """Return the bundled default template resource."""
    return package_root().joinpath(_DEFAULT_TEMPLATE)


def asset_root() -> Traversable:
    """Return the bundled reveal.js asset tree."""
    return package_root().joinpath(_ASSET_DIR)


def missing_assets(root: Traversable | None = None) -> list[str]:
    """List required reveal.js files absent from the asset tree."""
    base = root if root is not None else asset_root()
    return [name for name in REQUIRED_ASSETS if not base.joinpath(name).is_file()]
