"""``wren match``: show which route a URL belongs to.

Prints the matched route with its params, query and fragment as JSON.
Exits with code 1 when no route matches.
"""

import argparse
import json
import sys

from wren.cli._scan import scan_or_exit
from wren.errors import MalformedURLError
from wren.routing.table import RouteTable


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.url`` against the routes under ``args.base_dir``."""
    table = RouteTable.from_tree(scan_or_exit(args.base_dir).tree)
    try:
        hit = table.match(args.url)
    except MalformedURLError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if hit is None:
        print(f"No route matches {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    path, result = hit
    payload = {
        "route": "/" + path,
        "params": result.params,
        "query": result.query,
        "fragment": result.fragment,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
