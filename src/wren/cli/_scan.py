"""Shared scan helper for ``wren routes`` and ``wren match``."""

import sys
from pathlib import Path

from wren.codegen.scanner import scan_routes
from wren.codegen.types import ScanResult
from wren.errors import ConfigurationError


def scan_or_exit(base_dir: str) -> ScanResult:
    """Scan *base_dir*, printing the error and exiting 1 on failure.

    Nothing is written, so the output path only anchors import paths.
    """
    output = Path(base_dir) / "routes_gen.py"
    try:
        return scan_routes(output, base_dir)
    except (ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
