"""Present command — validate, render, serve, open, wait."""

from __future__ import annotations

import argparse
import subprocess
import sys
from importlib.resources import as_file

import yaml
from jinja2 import TemplateError, TemplateSyntaxError

from revealmd.config import DeckConfig, build_config, read_config_file
from revealmd.deck.files import resolve_files
from revealmd.deck.generator import derive_title, load_template, render_shell
from revealmd.deck.themes import unknown_choices
from revealmd.paths import asset_root, missing_assets
from revealmd.server.browser import open_url
from revealmd.server.listener import start_listener, wait_for_interrupt
from revealmd.server.router import Site


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _stop(server) -> None:
    server.shutdown()
    server.server_close()


def cmd_present(args: argparse.Namespace) -> int:
    defaults = {}
    if args.config:
        try:
            defaults = read_config_file(args.config)
        except (OSError, yaml.YAMLError, ValueError) as e:
            _error(f"Error reading config file: {e}")
            return 1

    try:
        config = build_config(
            args.files,
            {
                "port": args.port,
                "title": args.title,
                "theme": args.theme,
                "transition": args.transition,
                "template": args.template,
                "open_browser": False if args.no_browser else None,
                "verbose": args.verbose or None,
            },
            defaults,
        )
    except (TypeError, ValueError) as e:
        _error(f"Error: {e}")
        return 2

    return present(config)


def present(config: DeckConfig) -> int:
    """Serve a presentation until interrupted.

    Returns:
        Process exit code: 0 after Ctrl-C, 1 on a runtime error,
        2 when the files do not share a directory.
    """
    try:
        deck = resolve_files(config.files)
    except (FileNotFoundError, IsADirectoryError) as e:
        _error(f"Error accessing file {e.filename}")
        return 1
    except ValueError as e:
        _error(f"Error: {e}")
        return 2

    for warning in unknown_choices(config.theme, config.transition):
        _error(f"Warning: {warning}")

    try:
        template = load_template(config.template or None)
    except OSError as e:
        _error(f"Error reading custom template: {e}")
        return 1
    except TemplateSyntaxError as e:
        _error(f"Error parsing template: {e}")
        return 1

    try:
        shell = render_shell(
            template,
            title=derive_title(config.title, deck.filenames),
            filenames=deck.filenames,
            theme=config.theme,
            transition=config.transition,
        )
    except TemplateError as e:
        _error(f"Error parsing template: {e}")
        return 1

    missing = missing_assets()
    if missing:
        _error(f"Warning: bundled reveal.js is incomplete, missing {', '.join(missing)}")

    with as_file(asset_root()) as assets:
        site = Site(shell=shell, content_root=deck.root, asset_root=assets)
        try:
            server = start_listener(site, config.port, verbose=config.verbose)
        except OSError as e:
            _error(f"Error starting web server: {e}")
            return 1

        print(f"Revealing presentation on {config.url}")

        if config.open_browser:
            try:
                open_url(config.url)
            except KeyboardInterrupt:
                _stop(server)
                return 0
            except (RuntimeError, OSError, subprocess.CalledProcessError) as e:
                _error(f"Error opening {config.url} in browser: {e}")
                _stop(server)
                return 1

        wait_for_interrupt(server)

    return 0
