"""``wren generate``: write the route types module.

Scans the route directory and writes the path structure module, plus a
params module per parameterised directory when ``--params-file`` is set.
"""

import argparse
import sys

from wren.codegen.generator import generate
from wren.config import GeneratorConfig
from wren.errors import ConfigurationError


def run_generate(args: argparse.Namespace) -> None:
    """Generate route types for ``args.base_dir`` into ``args.output``.

    Prints a one-line summary. Exits with code 1 if the layout is
    invalid or a file cannot be read or written.
    """
    config = GeneratorConfig(
        base_dir=args.base_dir,
        output_path=args.output,
        params_file=args.params_file,
    )
    try:
        result = generate(config)
    except (ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = sum(1 for node in result.scan.tree.walk() if node.is_endpoint)
    print(
        f"Generated {result.output_path} "
        f"({routes} route(s), {len(result.scan.imports)} import(s), "
        f"{len(result.params_paths)} params file(s))"
    )
