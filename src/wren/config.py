"""Generator configuration.

Every knob the scanner and emitter read lives on :class:`GeneratorConfig`.
"""

from dataclasses import dataclass
from pathlib import Path

# OPTIONS is answered by the host framework and never scanned.
HTTP_METHODS: tuple[str, ...] = ("GET", "HEAD", "POST", "PUT", "DELETE", "PATCH")


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Generator configuration. Immutable after creation.

    Only the two paths are required. Override what you need::

        config = GeneratorConfig("app", "routes_gen.py", params_file="params.py")
    """

    # Where routes live and where the generated module goes
    base_dir: str | Path
    output_path: str | Path

    # File name written next to each parameterised endpoint (None = skip)
    params_file: str | None = None

    # Files that turn a directory into an endpoint
    endpoint_files: tuple[str, ...] = ("route.py", "page.py")

    # Handler names looked up in endpoint files (lowercased: GET -> get)
    http_methods: tuple[str, ...] = HTTP_METHODS

    # Query type names looked up in endpoint files
    query_type: str = "Query"
    optional_query_type: str = "OptionalQuery"

    # Directory names never walked (dot-directories are always skipped)
    ignore_dirs: frozenset[str] = frozenset({"__pycache__", "node_modules"})
