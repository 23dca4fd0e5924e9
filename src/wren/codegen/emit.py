"""Render scan results as Python source.

The path structure module nests one ``TypedDict`` per directory, keyed
by raw directory name, children declared before their parents::

    from .app.users._id.route import get as get_1f0c...

    Params_9b2e... = TypedDict("Params_9b2e...", {'id': str})
    Route_5d7a... = TypedDict(
        "Route_5d7a...",
        {'$get': Annotated[Handler, get_1f0c...], '$params': Params_9b2e...},
    )
    PathStructure = TypedDict("PathStructure", {'users': Route_...})

Per-directory params modules hold a single ``Params`` TypedDict.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from kida import DictLoader, Environment

from wren.codegen._templates import TEMPLATES
from wren.codegen.alias import create_alias
from wren.codegen.types import ParamsDeclaration, RouteNode, ScanResult

ROOT_TYPE_NAME = "PathStructure"


@dataclass(frozen=True, slots=True)
class _Field:
    key: str
    annotation: str

    @property
    def literal(self) -> str:
        """*key* as a Python string literal; directory names may hold quotes."""
        return repr(self.key)


@dataclass(frozen=True, slots=True)
class _TypedDict:
    name: str
    fields: tuple[_Field, ...]


@cache
def _environment() -> Environment:
    return Environment(
        loader=DictLoader(TEMPLATES),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _docstring_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def route_type_name(node: RouteNode) -> str:
    """Name of the TypedDict describing *node*."""
    if not node.key:
        return ROOT_TYPE_NAME
    return create_alias(node.relative_path, "Route")


def params_type_name(declaration: ParamsDeclaration) -> str:
    """Name of the params TypedDict for *declaration* inside the path structure."""
    return create_alias(declaration.relative_path, "Params")


def _params_fields(declaration: ParamsDeclaration) -> tuple[_Field, ...]:
    return tuple(_Field(item.name, item.annotation) for item in declaration.fields)


def _route_fields(node: RouteNode) -> tuple[_Field, ...]:
    fields = [
        _Field(f"${method.lower()}", f"Annotated[Handler, {binding.alias}]")
        for method, binding in node.handlers.items()
    ]
    if node.query is not None:
        alias = node.query.binding.alias
        fields.append(_Field("$query", alias if node.query.required else f"NotRequired[{alias}]"))
    if node.params is not None:
        fields.append(_Field("$params", params_type_name(node.params)))
    fields.extend(_Field(key, route_type_name(child)) for key, child in node.children.items())
    return tuple(fields)


def _route_declarations(node: RouteNode) -> list[_TypedDict]:
    """Children first, so every name is bound before it is referenced."""
    declarations: list[_TypedDict] = []
    for child in node.children.values():
        declarations.extend(_route_declarations(child))
    declarations.append(_TypedDict(route_type_name(node), _route_fields(node)))
    return declarations


def _typing_names(result: ScanResult) -> list[str]:
    nodes = list(result.tree.walk())
    names = {"TypedDict"}
    if any(node.handlers for node in nodes):
        names.add("Annotated")
    if any(node.query is not None and not node.query.required for node in nodes):
        names.add("NotRequired")
    return sorted(names)


def render_path_structure(result: ScanResult, *, source: str = "the route directory") -> str:
    """Render the path structure module for a scan.

    Output depends only on *result*, so an unchanged tree renders
    byte-identical text.
    """
    declarations = [
        _TypedDict(params_type_name(decl), _params_fields(decl)) for decl in result.params
    ]
    declarations.extend(_route_declarations(result.tree))
    typing_names = _typing_names(result)
    template = _environment().get_template("path_structure.py")
    return template.render(
        {
            "source": _docstring_text(source),
            "typing_names": ", ".join(typing_names),
            "uses_handler": "Annotated" in typing_names,
            "imports": [binding.statement for binding in result.imports],
            "declarations": declarations,
        }
    )


def render_params(declaration: ParamsDeclaration) -> str:
    """Render the standalone ``Params`` module for one directory."""
    template = _environment().get_template("params.py")
    return template.render(
        {
            "route": _docstring_text("/" + declaration.relative_path),
            "fields": _params_fields(declaration),
        }
    )
