"""revealmd — present markdown files as reveal.js slides in the browser.

Renders an HTML shell around one or more markdown files, serves it
together with the bundled reveal.js assets on a local port, and opens
the default browser on it.
"""

__version__ = "0.1.0"

DEFAULT_PORT = 12345
ASSET_PREFIX = "/reveal.js/"
