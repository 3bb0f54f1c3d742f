"""Request routing — shell, bundled assets, or source files.

Every request is answered from one of three places, decided by the
normalised URL path:

    /               the rendered presentation shell
    /reveal.js/...  the bundled reveal.js asset tree
    anything else   the directory holding the markdown files

The handler keeps no state between requests; the Site it is bound to is
built once at startup and only read afterwards.
"""

from __future__ import annotations

import http.server
import io
import posixpath
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from urllib.parse import quote, unquote

from revealmd import ASSET_PREFIX


@dataclass(frozen=True)
class Site:
    """Read-only content of a running presentation."""

    shell: bytes
    content_root: Path
    asset_root: Path


def normalize_path(raw: str) -> str:
    """Reduce a request target to a clean absolute URL path.

    Drops the query and fragment, percent-decodes, and collapses "."
    and ".." segments so they can never climb above "/". A trailing
    slash is kept, since it marks a directory request.
    """
    path = unquote(raw.split("?", 1)[0].split("#", 1)[0])
    trailing = path.endswith("/")
    path = posixpath.normpath("/" + path.lstrip("/"))
    if trailing and path != "/":
        path += "/"
    return path


def route(path: str) -> str:
    """Name the source a normalised path is served from.

    Returns:
        "shell", "asset" or "content".
    """
    if path == "/":
        return "shell"
    if path.startswith(ASSET_PREFIX) or path == ASSET_PREFIX.rstrip("/"):
        return "asset"
    return "content"


class PresentationHandler(http.server.SimpleHTTPRequestHandler):
    """Serve a presentation shell, its reveal.js assets and its files."""

    server_version = "revealmd"

    def __init__(self, *args, site: Site, verbose: bool = False, **kwargs):
        self.site = site
        self.verbose = verbose
        super().__init__(*args, directory=str(site.content_root), **kwargs)

    def send_head(self):
        path = normalize_path(self.path)
        # No file name can hold a NUL byte
        if "\x00" in path:
            self.send_error(http.HTTPStatus.NOT_FOUND, "File not found")
            return None
        if route(path) == "shell":
            self.send_response(200)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(self.site.shell)))
            self.send_header("Cache-Control", "no-cache")
            self.end_headers()
            return io.BytesIO(self.site.shell)
        return super().send_head()

    def translate_path(self, path):
        path = normalize_path(path)
        if route(path) == "asset":
            self.directory = str(self.site.asset_root)
            path = path[len(ASSET_PREFIX) - 1:]
        else:
            self.directory = str(self.site.content_root)
        # The base class decodes again, so pass the cleaned path re-quoted
        return super().translate_path(quote(path))

    def log_message(self, format, *args):  # noqa: A002 - http.server signature
        if self.verbose:
            super().log_message(format, *args)


def make_handler(site: Site, verbose: bool = False):
    """Return a handler factory bound to a site, for use as RequestHandlerClass."""
    return partial(PresentationHandler, site=site, verbose=verbose)
