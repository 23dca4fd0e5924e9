"""Export detection for endpoint files.

Answers "does this module export *name*, and how?" from source text
alone, without importing the module. Four forms count as exported::

    def get(request): ...               # DIRECT (also async def, class)
    get = make_handler()                # ASSIGNED (also annotated, ``type``)
    get, post = make_handlers()         # DESTRUCTURED
    from .handlers import get           # REEXPORT

Only module-level statements are considered. Underscore names are
private. A literal ``__all__`` restricts the exported set.
"""

import ast
import logging
from enum import Enum

logger = logging.getLogger("wren.codegen")


class ExportForm(Enum):
    """How a module binds an exported name."""

    DIRECT = "direct"
    ASSIGNED = "assigned"
    DESTRUCTURED = "destructured"
    REEXPORT = "reexport"


def _target_names(target: ast.expr) -> list[str]:
    if isinstance(target, ast.Name):
        return [target.id]
    if isinstance(target, ast.Starred):
        return _target_names(target.value)
    if isinstance(target, ast.Tuple | ast.List):
        names: list[str] = []
        for element in target.elts:
            names.extend(_target_names(element))
        return names
    return []


def _bindings(stmt: ast.stmt) -> list[tuple[str, ExportForm]]:
    """Names bound at module level by one statement."""
    match stmt:
        case ast.FunctionDef(name=name) | ast.AsyncFunctionDef(name=name) | ast.ClassDef(name=name):
            return [(name, ExportForm.DIRECT)]
        case ast.Assign(targets=targets):
            found: list[tuple[str, ExportForm]] = []
            for target in targets:
                form = ExportForm.ASSIGNED if isinstance(target, ast.Name) else ExportForm.DESTRUCTURED
                found.extend((name, form) for name in _target_names(target))
            return found
        case ast.AnnAssign(target=ast.Name(id=name), value=value) if value is not None:
            return [(name, ExportForm.ASSIGNED)]
        case ast.ImportFrom(names=aliases):
            return [
                (alias.asname or alias.name, ExportForm.REEXPORT)
                for alias in aliases
                if alias.name != "*"
            ]
        case ast.Import(names=aliases):
            return [
                (alias.asname or alias.name.partition(".")[0], ExportForm.REEXPORT)
                for alias in aliases
            ]
        case ast.TypeAlias(name=ast.Name(id=name)):
            return [(name, ExportForm.ASSIGNED)]
    return []


def _declared_all(tree: ast.Module) -> set[str] | None:
    """Names listed in a literal ``__all__``, or None if there is none."""
    for stmt in tree.body:
        if not isinstance(stmt, ast.Assign):
            continue
        if not any(isinstance(t, ast.Name) and t.id == "__all__" for t in stmt.targets):
            continue
        try:
            value = ast.literal_eval(stmt.value)
        except (ValueError, TypeError):
            return None
        if isinstance(value, list | tuple):
            return {item for item in value if isinstance(item, str)}
    return None


class ModuleExports:
    """Parsed export table of one module's source.

    Pass raw bytes to have a PEP 263 coding cookie honoured.
    """

    __slots__ = ("_exports",)

    def __init__(self, source: str | bytes, filename: str = "<unknown>") -> None:
        self._exports: dict[str, ExportForm] = {}
        try:
            tree = ast.parse(source, filename=filename)
        except SyntaxError as exc:
            logger.warning("Skipping %s: %s (line %s)", filename, exc.msg, exc.lineno)
            return

        public = _declared_all(tree)
        for stmt in tree.body:
            for name, form in _bindings(stmt):
                if name.startswith("_"):
                    continue
                if public is not None and name not in public:
                    continue
                # A later binding replaces an earlier one, as at runtime.
                self._exports[name] = form

    def __contains__(self, name: object) -> bool:
        return name in self._exports

    def form(self, name: str) -> ExportForm | None:
        """Return how *name* is exported, or None if it is not."""
        return self._exports.get(name)


def find_export(source: str | bytes, name: str) -> ExportForm | None:
    """Return how *source* exports *name*, or None."""
    return ModuleExports(source).form(name)
