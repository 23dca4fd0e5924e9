"""Shared fixtures: build route directories on disk."""

from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

MakeTree = Callable[[dict[str, str]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> MakeTree:
    """Return a factory that writes ``{relative_path: source}`` under ``tmp_path/app``."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "app"
        root.mkdir(exist_ok=True)
        for relative, source in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(source), encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_tree(make_tree: MakeTree) -> Path:
    """A small app covering every segment kind."""
    return make_tree(
        {
            "route.py": """
                def get(request):
                    return "home"
            """,
            "users/route.py": """
                def get(request):
                    return "users"

                async def post(request):
                    return "created"
            """,
            "users/_id/route.py": """
                from typing import TypedDict

                class Query(TypedDict):
                    tab: str

                def get(request):
                    return "user"
            """,
            "blog/___slug/page.py": """
                def _make():
                    return lambda request: "post"

                get = _make()
            """,
            "docs/_____path/page.py": """
                from typing import TypedDict

                OptionalQuery = TypedDict("OptionalQuery", {"lang": str})

                def get(request):
                    return "docs"
            """,
            "empty/README.md": "nothing routable here\n",
            "__pycache__/route.py": "def get(request): ...\n",
        }
    )
