"""Background HTTP listener."""

from __future__ import annotations

import http.server
import threading
import time

from revealmd.server.router import Site, make_handler


class PresentationServer(http.server.ThreadingHTTPServer):
    """Threaded server whose request threads never block process exit."""

    daemon_threads = True


def start_listener(
    site: Site,
    port: int,
    host: str = "",
    verbose: bool = False,
) -> PresentationServer:
    """Bind the port, then serve requests on a daemon thread.

    Binding happens before this returns, so a busy port is reported to
    the caller instead of from inside the serving thread.

    Args:
        site: Presentation content to serve.
        port: TCP port; 0 picks a free one (see server.server_address).
        host: Interface to bind; empty means all interfaces.
        verbose: Log each request to stderr.

    Returns:
        The running server. Call shutdown() then server_close() to stop it.

    Raises:
        OSError: If the address cannot be bound.
    """
    server = PresentationServer((host, port), make_handler(site, verbose=verbose))
    thread = threading.Thread(
        target=server.serve_forever,
        name=f"revealmd-http-{server.server_address[1]}",
        daemon=True,
    )
    thread.start()
    return server


def wait_for_interrupt(server: PresentationServer, poll_interval: float = 0.5) -> None:
    """Block until Ctrl-C, then stop the listener.

    In-flight requests are not drained; their daemon threads end with
    the process.
    """
    try:
        while True:
            time.sleep(poll_interval)
    except KeyboardInterrupt:
        return
    finally:
        server.shutdown()
        server.server_close()
