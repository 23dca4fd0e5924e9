"""Code generation: scan a route directory and emit typed Python.

Usage::

    from wren.codegen import generate
    from wren.config import GeneratorConfig

    generate(GeneratorConfig("myapp/app", "myapp/routes_gen.py", params_file="params.py"))

Conventions:

    app/
      route.py             # def get(request): ...        -> "$get"
      users/
        _id/
          route.py         # class Query(TypedDict): ...   -> "$query"
          params.py        # written: Params = {"id": str}
      blog/
        ___slug/
          page.py          # Params = {"slug": list[str]}
      docs/
        _____path/
          page.py          # Params = {"path": list[str] | None}
"""

from wren.codegen.alias import ImportBinding, ImportTable, create_alias
from wren.codegen.emit import render_params, render_path_structure
from wren.codegen.exports import ExportForm, find_export
from wren.codegen.generator import GenerateResult, generate
from wren.codegen.scanner import scan_routes
from wren.codegen.types import ParamsDeclaration, ParamsField, QueryRef, RouteNode, ScanResult

__all__ = [
    "ExportForm",
    "GenerateResult",
    "ImportBinding",
    "ImportTable",
    "ParamsDeclaration",
    "ParamsField",
    "QueryRef",
    "RouteNode",
    "ScanResult",
    "create_alias",
    "find_export",
    "generate",
    "render_params",
    "render_path_structure",
    "scan_routes",
]
