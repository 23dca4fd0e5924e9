"""Directory tree scanner.

Walks a route directory and builds the typed route tree the emitter
renders. Each directory name is classified with the shared segment
grammar; each endpoint file (``route.py``, ``page.py``) is inspected
for handler and query exports without being imported.

Layout::

    app/
      route.py              # GET /
      users/
        route.py            # GET, POST /users
        _id/
          route.py          # GET /users/[id]   (Params: {"id": str})
      docs/
        _____path/
          page.py           # GET /docs/[[...path]]

Directories with no endpoint file anywhere below them are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wren.codegen.alias import ImportBinding, ImportTable
from wren.codegen.exports import ModuleExports
from wren.codegen.paths import module_reference, natural_key, relative_import_path
from wren.codegen.types import ParamsDeclaration, ParamsField, QueryRef, RouteNode, ScanResult
from wren.config import GeneratorConfig
from wren.errors import ConfigurationError
from wren.routing.segments import Segment, classify

logger = logging.getLogger("wren.codegen")


@dataclass(slots=True)
class _ScanContext:
    """State owned by a single scan."""

    config: GeneratorConfig
    root: Path
    output: Path
    imports: ImportTable = field(default_factory=ImportTable)
    params: list[ParamsDeclaration] = field(default_factory=list)
    has_targets: dict[Path, bool] = field(default_factory=dict)


def scan_routes(
    output_path: str | Path,
    base_dir: str | Path,
    *,
    config: GeneratorConfig | None = None,
) -> ScanResult:
    """Scan *base_dir* and return the route tree, imports and params types.

    Args:
        output_path: Where the generated module will be written. Only
            used to compute relative imports; never opened.
        base_dir: Root of the route directory.
        config: Scan settings. Defaults to ``GeneratorConfig`` defaults.

    Raises:
        FileNotFoundError: If *base_dir* is not a directory.
        OSError: If a directory or endpoint file cannot be read.
        ConfigurationError: If the layout cannot be expressed by the
            segment grammar or imported from the output module.
    """
    root = Path(base_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Route directory not found: {root}")

    ctx = _ScanContext(
        config=config or GeneratorConfig(base_dir=base_dir, output_path=output_path),
        root=root,
        output=Path(output_path).resolve(),
    )
    tree = _walk_directory(root, ctx, key="", segments=())
    logger.debug(
        "Scanned %s: %d import(s), %d params type(s)",
        root,
        len(ctx.imports),
        len(ctx.params),
    )
    return ScanResult(
        tree=tree,
        imports=tuple(ctx.imports.bindings()),
        params=tuple(ctx.params),
    )


def _is_ignored(item: Path, config: GeneratorConfig) -> bool:
    return item.name.startswith(".") or item.name in config.ignore_dirs


def has_target_files(directory: Path, ctx: _ScanContext) -> bool:
    """True if *directory* or any directory below it holds an endpoint file."""
    cached = ctx.has_targets.get(directory)
    if cached is not None:
        return cached

    found = False
    for item in sorted(directory.iterdir()):
        if _is_ignored(item, ctx.config):
            continue
        if item.is_file() and item.name in ctx.config.endpoint_files:
            found = True
            break
        if item.is_dir() and has_target_files(item, ctx):
            found = True
            break

    ctx.has_targets[directory] = found
    return found


def _walk_directory(
    directory: Path,
    ctx: _ScanContext,
    *,
    key: str,
    segments: tuple[Segment, ...],
) -> RouteNode:
    """Build the node for *directory* and recurse into its route children.

    Args:
        directory: Current directory being walked.
        ctx: State of the running scan.
        key: Raw directory name (``""`` for the root).
        segments: Classified segments accumulated from the root.
    """
    relative = directory.relative_to(ctx.root).as_posix()
    node = RouteNode(
        key=key,
        segments=segments,
        relative_path="" if relative == "." else relative,
    )

    for file_name in ctx.config.endpoint_files:
        endpoint = directory / file_name
        if endpoint.is_file():
            _scan_endpoint(endpoint, node, ctx)

    if any(seg.is_param for seg in segments):
        declaration = ParamsDeclaration(
            directory=directory,
            relative_path=node.relative_path,
            fields=tuple(ParamsField(seg.name, seg.kind) for seg in segments if seg.is_param),
        )
        node.params = declaration
        ctx.params.append(declaration)

    children = [
        item
        for item in directory.iterdir()
        if item.is_dir() and not _is_ignored(item, ctx.config) and has_target_files(item, ctx)
    ]
    for child in sorted(children, key=lambda item: natural_key(item.name)):
        segment = classify(child.name)
        _check_segment(child, segment, segments, ctx)
        node.children[child.name] = _walk_directory(
            child,
            ctx,
            key=child.name,
            segments=(*segments, segment),
        )

    return node


def _check_segment(
    directory: Path,
    segment: Segment,
    parents: tuple[Segment, ...],
    ctx: _ScanContext,
) -> None:
    """Reject layouts the segment grammar cannot express."""
    where = directory.relative_to(ctx.root).as_posix()
    catch_all = next((seg for seg in parents if seg.is_catch_all), None)
    if catch_all is not None:
        msg = (
            f"{where!r}: catch-all segment {catch_all.raw!r} must be the last "
            "segment of its route; move the routes below it elsewhere."
        )
        raise ConfigurationError(msg)
    if not segment.is_param:
        return
    if not segment.name:
        msg = f"{where!r}: parameter directory {segment.raw!r} has no name after its marker."
        raise ConfigurationError(msg)
    if any(seg.name == segment.name for seg in parents if seg.is_param):
        msg = f"{where!r}: parameter {segment.name!r} is bound twice in one route."
        raise ConfigurationError(msg)


def _scan_endpoint(endpoint: Path, node: RouteNode, ctx: _ScanContext) -> None:
    """Record the handlers and query type exported by one endpoint file."""
    exports = ModuleExports(endpoint.read_bytes(), filename=str(endpoint))
    import_path = relative_import_path(ctx.output, endpoint)
    config = ctx.config

    def request(name: str) -> ImportBinding:
        return ctx.imports.request(import_path, module_reference(import_path), name)

    if node.query is None:
        if config.query_type in exports:
            node.query = QueryRef(binding=request(config.query_type), required=True)
        elif config.optional_query_type in exports:
            node.query = QueryRef(binding=request(config.optional_query_type), required=False)

    for method in config.http_methods:
        symbol = method.lower()
        if symbol not in exports:
            continue
        if method in node.handlers:
            logger.warning(
                "%s: %s is already defined in %s; ignoring this one",
                endpoint,
                method,
                node.handlers[method].path,
            )
            continue
        node.handlers[method] = request(symbol)
        logger.debug("Found %s %s in %s", method, node.url_path, endpoint)
