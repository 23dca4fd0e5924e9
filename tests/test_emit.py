"""Tests for wren.codegen.emit: rendering generated modules."""

import ast
from pathlib import Path

from conftest import MakeTree
from wren.codegen.alias import create_alias
from wren.codegen.emit import (
    ROOT_TYPE_NAME,
    params_type_name,
    render_params,
    render_path_structure,
    route_type_name,
)
from wren.codegen.scanner import scan_routes


def _render(root: Path) -> str:
    return render_path_structure(scan_routes(root.parent / "routes_gen.py", root))


class TestPathStructure:
    def test_is_valid_python(self, sample_tree: Path) -> None:
        ast.parse(_render(sample_tree))

    def test_import_per_alias(self, sample_tree: Path) -> None:
        source = _render(sample_tree)
        alias = create_alias("./app/users/_id/route", "Query")
        assert f"from .app.users._id.route import Query as {alias}" in source
        assert source.count(" import get as ") == 5

    def test_method_fields(self, sample_tree: Path) -> None:
        source = _render(sample_tree)
        alias = create_alias("./app/users/route", "post")
        assert f"'$post': Annotated[Handler, {alias}]," in source
        assert "from wren.types import Handler" in source

    def test_query_fields(self, sample_tree: Path) -> None:
        source = _render(sample_tree)
        required = create_alias("./app/users/_id/route", "Query")
        optional = create_alias("./app/docs/_____path/page", "OptionalQuery")
        assert f"'$query': {required}," in source
        assert f"'$query': NotRequired[{optional}]," in source
        assert "from typing import Annotated, NotRequired, TypedDict" in source

    def test_children_keyed_by_raw_name(self, sample_tree: Path) -> None:
        scan = scan_routes(sample_tree.parent / "routes_gen.py", sample_tree)
        source = render_path_structure(scan)
        users = scan.tree.children["users"]
        assert f"'_id': {route_type_name(users.children['_id'])}," in source
        assert f"'users': {route_type_name(users)}," in source

    def test_params_fields(self, sample_tree: Path) -> None:
        scan = scan_routes(sample_tree.parent / "routes_gen.py", sample_tree)
        source = render_path_structure(scan)
        slug = scan.tree.children["blog"].children["___slug"]
        assert slug.params is not None
        assert f"'$params': {params_type_name(slug.params)}," in source
        assert "'slug': list[str]," in source

    def test_names_defined_before_use(self, sample_tree: Path) -> None:
        tree = ast.parse(_render(sample_tree))
        defined: set[str] = set()
        for stmt in tree.body:
            if not isinstance(stmt, ast.Assign):
                continue
            for node in ast.walk(stmt.value):
                if isinstance(node, ast.Name) and node.id.startswith(("Route_", "Params_")):
                    assert node.id in defined
            defined.update(t.id for t in stmt.targets if isinstance(t, ast.Name))
        assert ROOT_TYPE_NAME in defined

    def test_byte_stable(self, sample_tree: Path) -> None:
        assert _render(sample_tree) == _render(sample_tree)

    def test_minimal_imports_without_handlers(self, make_tree: MakeTree) -> None:
        root = make_tree({"route.py": "VALUE = 1\n"})
        source = _render(root)
        ast.parse(source)
        assert "from typing import TypedDict" in source
        assert "Handler" not in source
        assert "NotRequired" not in source

    def test_quotes_and_backslashes_in_directory_names(self, make_tree: MakeTree) -> None:
        root = make_tree(
            {
                'say "hi"/route.py': "VALUE = 1\n",
                "back\\slash/route.py": "VALUE = 1\n",
                '_a"b/route.py': "VALUE = 1\n",
            }
        )
        scan = scan_routes(root.parent / "routes_gen.py", root)
        tree = ast.parse(render_path_structure(scan, source='dir "x"\\N'))
        keys = {
            node.value
            for node in ast.walk(tree)
            if isinstance(node, ast.Constant) and isinstance(node.value, str)
        }
        assert {'say "hi"', "back\\slash", '_a"b', 'a"b'} <= keys
        for declaration in scan.params:
            ast.parse(render_params(declaration))

    def test_type_names(self, sample_tree: Path) -> None:
        scan = scan_routes(sample_tree.parent / "routes_gen.py", sample_tree)
        assert route_type_name(scan.tree) == "PathStructure"
        assert route_type_name(scan.tree.children["users"]) == create_alias("users", "Route")


class TestParamsModule:
    def test_render(self, sample_tree: Path) -> None:
        scan = scan_routes(sample_tree.parent / "routes_gen.py", sample_tree)
        declaration = next(p for p in scan.params if p.relative_path == "docs/_____path")
        source = render_params(declaration)
        ast.parse(source)
        assert "Params = TypedDict(" in source
        assert "'path': list[str] | None," in source
        assert "/docs/_____path" in source
