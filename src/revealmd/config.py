"""Presentation configuration — flags, with optional YAML defaults.

A config file is a YAML mapping using the flag names as keys:

    port: 8080
    title: Quarterly review
    theme: night
    transition: slide
    template: ./slides.html.j2

Values given on the command line override the file. A relative
template path is taken relative to the config file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from revealmd import DEFAULT_PORT
from revealmd.deck import DEFAULT_THEME, DEFAULT_TRANSITION

CONFIG_KEYS = ("port", "title", "theme", "transition", "template")
TEXT_KEYS = ("title", "theme", "transition", "template")
MAX_PORT = 65535


@dataclass(frozen=True)
class DeckConfig:
    """Everything needed to serve one presentation."""

    files: list[str] = field(default_factory=list)
    port: int = DEFAULT_PORT
    title: str = ""
    theme: str = DEFAULT_THEME
    transition: str = DEFAULT_TRANSITION
    template: str | None = None
    open_browser: bool = True
    verbose: bool = False

    @property
    def url(self) -> str:
        return f"http://localhost:{self.port}/"


def read_config_file(path: Path | str) -> dict[str, Any]:
    """Read and parse a revealmd YAML config file.

    Args:
        path: Path to the YAML file.

    Returns:
        Mapping restricted to the known configuration keys.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the document is not a mapping, has unknown keys,
            or holds a non-integer port or a non-string text value.
    """
    config_path = Path(path)
    with open(config_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {config_path} is not a YAML mapping")

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ValueError(f"config file {config_path}: unknown key(s) {', '.join(unknown)}")

    port = data.get("port")
    if port is not None and (isinstance(port, bool) or not isinstance(port, int)):
        raise ValueError(f"config file {config_path}: port must be an integer")

    for key in TEXT_KEYS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"config file {config_path}: {key} must be a string")

    template = data.get("template")
    if template:
        data["template"] = str(config_path.parent / Path(template).expanduser())

    return {key: value for key, value in data.items() if value is not None}


def build_config(
    files: list[str],
    overrides: dict[str, Any],
    defaults: dict[str, Any] | None = None,
) -> DeckConfig:
    """Merge config-file defaults with explicit flag values.

    Args:
        files: Presentation files from the command line.
        overrides: Flag values; None means "not given".
        defaults: Values read from a config file.

    Raises:
        ValueError: If the resulting port is outside 1-65535.
    """
    merged: dict[str, Any] = dict(defaults or {})
    merged.update({key: value for key, value in overrides.items() if value is not None})

    config = DeckConfig(files=list(files), **merged)
    if not 0 < config.port <= MAX_PORT:
        raise ValueError(f"port must be between 1 and {MAX_PORT}, got {config.port}")
    return config
