"""Path helpers for the scanner: import paths and stable ordering."""

import keyword
import os
import re
from pathlib import Path

from wren.errors import ConfigurationError

_DIGITS_RE = re.compile(r"(\d+)")


def to_posix(path: str) -> str:
    """Replace Windows separators with forward slashes."""
    return path.replace("\\", "/")


def natural_key(text: str) -> tuple[tuple[int, str | int], ...]:
    """Numeric-aware, case-insensitive sort key with a case-sensitive tiebreak.

    ``"page2"`` sorts before ``"page10"``.
    """
    parts: list[tuple[int, str | int]] = []
    for token in _DIGITS_RE.split(text):
        if not token:
            continue
        if token.isdigit():
            parts.append((0, int(token)))
        else:
            parts.append((1, token.casefold()))
    parts.append((-1, text))
    return tuple(parts)


def relative_import_path(output_file: str | Path, input_file: str | Path) -> str:
    """Posix path from *output_file*'s directory to *input_file*, suffix stripped.

    ``./`` is prepended unless the path already climbs with ``../``::

        relative_import_path("pkg/routes_gen.py", "pkg/app/users/route.py")
        # './app/users/route'
    """
    relative = to_posix(os.path.relpath(Path(input_file), Path(output_file).parent))
    relative = re.sub(r"\.pyi?$", "", relative)
    if not relative.startswith("../"):
        relative = "./" + relative
    return relative


def module_reference(import_path: str) -> str:
    """Turn a relative import path into a dotted relative module reference.

    ``./app/users/_id/route`` -> ``.app.users._id.route``;
    ``../app/route`` -> ``..app.route``.

    Raises:
        ConfigurationError: If a component is not a valid Python identifier.
    """
    parts = import_path.split("/")
    dots = 1
    if parts and parts[0] == ".":
        parts = parts[1:]
    while parts and parts[0] == "..":
        dots += 1
        parts = parts[1:]
    for part in parts:
        if not part.isidentifier() or keyword.iskeyword(part):
            msg = (
                f"Cannot import {import_path!r}: {part!r} is not a valid Python identifier. "
                "Rename the directory or file so it can appear in an import."
            )
            raise ConfigurationError(msg)
    return "." * dots + ".".join(parts)
