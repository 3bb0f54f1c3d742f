"""Shared test fixtures for revealmd."""

from pathlib import Path

import pytest

from revealmd.server.listener import start_listener
from revealmd.server.router import Site

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def deck_dir(tmp_path):
    """A source directory with two markdown files and an image."""
    deck = tmp_path / "deck"
    deck.mkdir()
    (deck / "intro.md").write_text("# Intro\n\n---\n\n## Second slide\n")
    (deck / "outro.md").write_text("# Thanks\n")
    (deck / "chart.png").write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return deck


@pytest.fixture
def asset_dir(tmp_path):
    """A minimal stand-in for the reveal.js distribution."""
    assets = tmp_path / "reveal"
    (assets / "dist" / "theme").mkdir(parents=True)
    (assets / "plugin" / "markdown").mkdir(parents=True)
    (assets / "dist" / "reveal.js").write_text("/* reveal */")
    (assets / "dist" / "reveal.css").write_text(".reveal {}")
    (assets / "dist" / "theme" / "league.css").write_text(".league {}")
    (assets / "plugin" / "markdown" / "markdown.js").write_text("/* markdown */")
    return assets


@pytest.fixture
def running_site(deck_dir, asset_dir):
    """Serve deck_dir and asset_dir on a free port; yields the base URL."""
    site = Site(
        shell=b"<html><title>shell</title></html>",
        content_root=deck_dir,
        asset_root=asset_dir,
    )
    server = start_listener(site, 0, host="127.0.0.1")
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
