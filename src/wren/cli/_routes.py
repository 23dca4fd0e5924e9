"""``wren routes``: list discovered routes.

Scans a route directory and prints every endpoint with its methods,
URL template, and the module that defines it.
"""

import argparse

from wren.cli._scan import scan_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """List routes found under ``args.base_dir``.

    Prints a table of METHOD, PATH, and MODULE.
    """
    result = scan_or_exit(args.base_dir)

    # Build rows: (methods_str, path, module)
    rows: list[tuple[str, str, str]] = []
    for node in result.tree.walk():
        if not node.is_endpoint:
            continue
        methods_str = ", ".join(node.handlers)
        modules = sorted({binding.path for binding in node.handlers.values()})
        rows.append((methods_str, node.url_path, ", ".join(modules)))

    if not rows:
        print("No routes found.")
        return

    # Column widths
    max_methods = max(len(r[0]) for r in rows)
    max_path = max(len(r[1]) for r in rows)
    max_methods = max(max_methods, 6)  # "METHOD" header
    max_path = max(max_path, 4)  # "PATH" header

    # Print table
    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "MODULE"))
    sep_len = max_methods + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for methods_str, path, module in rows:
        print(fmt.format(methods_str, path, module))
