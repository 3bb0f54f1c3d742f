"""Command line interface for revealmd.

Usage:
    revealmd [flags] <file> [<file> ...]
    revealmd -help

Flags use a single dash (-port 8080); the double-dash spelling
(--port 8080) is accepted too.
"""

import argparse
import sys

from revealmd import DEFAULT_PORT
from revealmd.cli.present import cmd_present
from revealmd.deck import DEFAULT_THEME, DEFAULT_TRANSITION
from revealmd.deck.reference import reference_text


class _ReferenceHelpAction(argparse.Action):
    """Print usage, flag defaults and the authoring reference, then exit 0."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):  # noqa: A002
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        print(reference_text())
        parser.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="revealmd",
        usage="%(prog)s [flags] <file> [<file> ...]",
        description="Present markdown files as reveal.js slides in the browser",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "files", nargs="+", metavar="file",
        help="Markdown file(s), all in the same directory",
    )
    parser.add_argument(
        "-h", "-help", "--help", action=_ReferenceHelpAction,
        help="Print help and exit",
    )
    parser.add_argument(
        "-port", "--port", type=int, default=None,
        help=f"The port where the presentation is served (default {DEFAULT_PORT})",
    )
    parser.add_argument(
        "-title", "--title", default=None,
        help="The title of the presentation (default: the file names)",
    )
    parser.add_argument(
        "-theme", "--theme", default=None,
        help=f"The theme (default {DEFAULT_THEME}). See -help for details",
    )
    parser.add_argument(
        "-transition", "--transition", default=None,
        help=f"The transition (default {DEFAULT_TRANSITION}). See -help for details",
    )
    parser.add_argument(
        "-template", "--template", default=None,
        help="The path to a file containing a custom template",
    )
    parser.add_argument(
        "-config", "--config", default=None,
        help="YAML file with default values for the flags above",
    )
    parser.add_argument(
        "-no-browser", "--no-browser", action="store_true", dest="no_browser",
        help="Serve without opening a browser",
    )
    parser.add_argument(
        "-verbose", "--verbose", action="store_true",
        help="Log every request to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return cmd_present(args)


if __name__ == "__main__":
    sys.exit(main())
