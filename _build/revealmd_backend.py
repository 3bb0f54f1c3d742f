"""Build backend — setuptools, plus the bundled reveal.js distribution.

Before an sdist, wheel or editable install is built, the dist/ and
plugin/ trees and the LICENSE of a pinned reveal.js release are unpacked
into src/revealmd/reveal.js/, where package-data picks them up.

Environment variables:
    REVEALMD_REVEAL_ARCHIVE — local reveal.js release tarball (offline builds)
"""

from __future__ import annotations

import io
import os
import sys
import tarfile
import urllib.request
from pathlib import Path

from setuptools import build_meta as _setuptools
from setuptools.build_meta import *  # noqa: F401,F403 - re-export the other PEP 517 hooks

REVEAL_VERSION = "5.1.0"
REVEAL_URL = f"https://github.com/hakimel/reveal.js/archive/refs/tags/{REVEAL_VERSION}.tar.gz"

ASSET_DIR = Path(__file__).resolve().parent.parent / "src" / "revealmd" / "reveal.js"
# Top-level entries of the release copied into the package
KEEP = ("dist", "plugin", "LICENSE")
# Checked to decide whether a fetch is needed; mirrors revealmd.paths.REQUIRED_ASSETS
REQUIRED = ("dist/reveal.js", "dist/reveal.css", "plugin/markdown/markdown.js")


def _complete(root: Path) -> bool:
    return all((root / name).is_file() for name in REQUIRED)


def _read_archive() -> bytes:
    local = os.environ.get("REVEALMD_REVEAL_ARCHIVE")
    if local:
        return Path(local).expanduser().read_bytes()
    with urllib.request.urlopen(REVEAL_URL, timeout=60) as resp:
        return resp.read()


def _extract(data: bytes, target: Path) -> int:
    """Unpack the kept entries of a release tarball into target.

    The release's top-level directory (reveal.js-<version>/) is stripped.

    Returns:
        Number of files written.
    """
    count = 0
    # extraction filters arrived in 3.11.4
    options = {"filter": "data"} if hasattr(tarfile, "data_filter") else {}
    with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as tar:
        for member in tar.getmembers():
            parts = member.name.split("/", 1)
            if len(parts) != 2 or not parts[1].startswith(KEEP):
                continue
            if not (member.isfile() or member.isdir()) or ".." in parts[1].split("/"):
                continue
            member.name = parts[1]
            tar.extract(member, target, **options)
            count += member.isfile()
    return count


def ensure_assets(required: bool = True) -> None:
    """Fetch reveal.js into the package unless it is already there.

    Raises:
        RuntimeError: If required and the release cannot be fetched.
    """
    if _complete(ASSET_DIR):
        return
    try:
        count = _extract(_read_archive(), ASSET_DIR)
    except (OSError, tarfile.TarError) as e:
        message = f"could not bundle reveal.js {REVEAL_VERSION}: {e}"
        if required:
            raise RuntimeError(
                f"{message}\nSet REVEALMD_REVEAL_ARCHIVE to a local copy of {REVEAL_URL}"
            ) from e
        print(f"Warning: {message}; /reveal.js/ will answer 404", file=sys.stderr)
        return
    print(f"Bundled reveal.js {REVEAL_VERSION} ({count} files)", file=sys.stderr)


def build_sdist(sdist_directory, config_settings=None):
    ensure_assets()
    return _setuptools.build_sdist(sdist_directory, config_settings)


def build_wheel(wheel_directory, config_settings=None, metadata_directory=None):
    ensure_assets()
    return _setuptools.build_wheel(wheel_directory, config_settings, metadata_directory)


def build_editable(wheel_directory, config_settings=None, metadata_directory=None):
    # Development installs still work offline; the CLI warns about missing files
    ensure_assets(required=False)
    return _setuptools.build_editable(wheel_directory, config_settings, metadata_directory)
