"""Open a URL with the operating system's default browser."""

from __future__ import annotations

import subprocess
import sys

# sys.platform prefix -> launcher command (URL is appended)
LAUNCHERS: dict[str, list[str]] = {
    "linux": ["xdg-open"],
    "win32": ["rundll32", "url.dll,FileProtocolHandler"],
    "darwin": ["open"],
}


def launcher_for(platform: str | None = None) -> list[str]:
    """Return the launcher command for a platform.

    Raises:
        RuntimeError: If the platform has no known launcher.
    """
    name = platform if platform is not None else sys.platform
    for prefix, command in LAUNCHERS.items():
        if name.startswith(prefix):
            return list(command)
    raise RuntimeError(f"unsupported platform {name!r}")


def open_url(url: str, platform: str | None = None) -> None:
    """Open url in the default browser and wait for the launcher to exit.

    Raises:
        RuntimeError: If the platform is unsupported.
        FileNotFoundError: If the launcher program is not installed.
        subprocess.CalledProcessError: If the launcher exits non-zero.
    """
    command = launcher_for(platform) + [url]
    subprocess.run(command, check=True, capture_output=True, text=True)
