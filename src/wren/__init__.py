"""Wren: typed file-system routes for Python web apps.

One segment grammar drives two artifacts: a generated module describing
every route's handlers, query type and params, and a runtime matcher
that extracts the same params from a URL.

Generate types::

    from wren import GeneratorConfig, generate

    generate(GeneratorConfig("myapp/app", "myapp/routes_gen.py"))

Match URLs::

    from wren import compile_path, match_path

    pattern = compile_path("users/_id")
    match_path(pattern, pattern.keys, "/users/42?tab=posts")
    # MatchResult(params={'id': '42'}, query={'tab': 'posts'}, fragment=None)
"""

__version__ = "0.1.0"
__all__ = [
    "CompiledPattern",
    "ConfigurationError",
    "GeneratorConfig",
    "MalformedURLError",
    "MatchResult",
    "RouteTable",
    "Segment",
    "SegmentKind",
    "WrenError",
    "build_path",
    "classify",
    "compile_path",
    "compile_pattern",
    "create_alias",
    "generate",
    "match_path",
    "scan_routes",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "CompiledPattern": "wren.routing.pattern",
    "ConfigurationError": "wren.errors",
    "GeneratorConfig": "wren.config",
    "MalformedURLError": "wren.errors",
    "MatchResult": "wren.routing.match",
    "RouteTable": "wren.routing.table",
    "Segment": "wren.routing.segments",
    "SegmentKind": "wren.routing.segments",
    "WrenError": "wren.errors",
    "build_path": "wren.routing.match",
    "classify": "wren.routing.segments",
    "compile_path": "wren.routing.pattern",
    "compile_pattern": "wren.routing.pattern",
    "create_alias": "wren.codegen.alias",
    "generate": "wren.codegen.generator",
    "match_path": "wren.routing.match",
    "scan_routes": "wren.codegen.scanner",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast (and kida unloaded) for code that only
    matches URLs.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
