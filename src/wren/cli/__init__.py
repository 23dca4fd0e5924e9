"""Wren CLI: generate route types, list routes, and try URLs.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="wren: typed file-system routes for Python web apps.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every discovered endpoint",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren generate ----------------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Generate the route types module")
    generate_parser.add_argument("base_dir", help="Directory containing the routes")
    generate_parser.add_argument("output", help="Path of the generated module")
    generate_parser.add_argument(
        "-p",
        "--params-file",
        default=None,
        metavar="FILENAME",
        help="Also write a Params module with this name into each parameterised directory",
    )

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List discovered routes")
    routes_parser.add_argument("base_dir", help="Directory containing the routes")

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a URL belongs to")
    match_parser.add_argument("base_dir", help="Directory containing the routes")
    match_parser.add_argument("url", help="URL or path to match (e.g. /users/42?tab=posts)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "generate":
        from wren.cli._generate import run_generate

        run_generate(args)
    elif args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
