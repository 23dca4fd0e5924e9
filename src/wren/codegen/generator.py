"""Generate the path structure module and per-directory params modules."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from wren.codegen.emit import render_params, render_path_structure
from wren.codegen.paths import to_posix
from wren.codegen.scanner import scan_routes
from wren.codegen.types import ScanResult
from wren.config import GeneratorConfig

logger = logging.getLogger("wren.codegen")


@dataclass(frozen=True, slots=True)
class GenerateResult:
    """What a generator run produced.

    Attributes:
        scan: The scan the files were rendered from.
        output_path: The path structure module.
        params_paths: Params modules, one per parameterised directory.
        written: Files whose contents changed on disk.
    """

    scan: ScanResult
    output_path: Path
    params_paths: tuple[Path, ...] = ()
    written: tuple[Path, ...] = ()


def write_if_changed(path: Path, content: str) -> bool:
    """Write *content* to *path* unless it already holds exactly that.

    Returns True if the file was written.
    """
    try:
        if path.read_text(encoding="utf-8") == content:
            return False
    except FileNotFoundError:
        pass
    path.write_text(content, encoding="utf-8")
    return True


def generate(config: GeneratorConfig) -> GenerateResult:
    """Scan ``config.base_dir`` and write the generated modules.

    Raises:
        FileNotFoundError: If the route directory does not exist.
        OSError: If a file cannot be read or written.
        ConfigurationError: If the route layout is invalid. Nothing is
            written in that case.
    """
    output = Path(config.output_path)
    logger.info("Generating route types for %s", config.base_dir)
    scan = scan_routes(output, config.base_dir, config=config)

    source = to_posix(os.path.relpath(config.base_dir, output.parent))
    outputs: list[tuple[Path, str]] = [(output, render_path_structure(scan, source=source))]
    params_paths: list[Path] = []
    if config.params_file:
        for declaration in scan.params:
            path = declaration.directory / config.params_file
            params_paths.append(path)
            outputs.append((path, render_params(declaration)))

    output.parent.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for path, content in outputs:
        if write_if_changed(path, content):
            written.append(path)
            logger.info("  wrote %s", path)
        else:
            logger.debug("  unchanged %s", path)

    return GenerateResult(
        scan=scan,
        output_path=output,
        params_paths=tuple(params_paths),
        written=tuple(written),
    )
