"""Import aliases for generated route modules.

Every endpoint file exports its handlers under the same names (``get``,
``post``, ``Query``), so the generated module imports each one under an
alias derived from where it was declared::

    create_alias("./app/users/_id/route", "get")
    # 'get_<16 hex characters>'

The alias is a pure function of its two inputs. The per-scan
:class:`ImportTable` only memoizes which pairs have been requested.
"""

import hashlib
from dataclasses import dataclass

from wren.codegen.paths import natural_key

_DIGEST_LENGTH = 16
_SEPARATOR = "::"


def create_alias(path: str, name: str) -> str:
    """Return ``f"{name}_{digest}"`` for a declaration site and symbol.

    ``digest`` is the first 16 hex characters of SHA-256 over
    ``f"{path}::{name}"``. No normalisation happens here: ``a/b`` and
    ``a\\b`` get different aliases.
    """
    digest = hashlib.sha256(f"{path}{_SEPARATOR}{name}".encode()).hexdigest()
    return f"{name}_{digest[:_DIGEST_LENGTH]}"


@dataclass(slots=True)
class ImportBinding:
    """One aliased import in a generated module.

    Attributes:
        name: Symbol exported by the endpoint file (``get``, ``Query``).
        path: Posix import path relative to the output file, extension
            stripped (``./app/users/_id/route``).
        module: Dotted relative module reference (``.app.users._id.route``).
        alias: Identifier the symbol is bound to.
        count: How many times this (path, name) pair was requested.
    """

    name: str
    path: str
    module: str
    alias: str
    count: int = 1

    @property
    def statement(self) -> str:
        return f"from {self.module} import {self.name} as {self.alias}"


class ImportTable:
    """Bindings requested during one scan.

    Create one per scan and pass it down the walk; never share one
    between scans.
    """

    __slots__ = ("_bindings",)

    def __init__(self) -> None:
        self._bindings: dict[tuple[str, str], ImportBinding] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, key: object) -> bool:
        return key in self._bindings

    def request(self, path: str, module: str, name: str) -> ImportBinding:
        """Return the binding for (*path*, *name*), creating it on first use."""
        binding = self._bindings.get((path, name))
        if binding is not None:
            binding.count += 1
            return binding
        binding = ImportBinding(
            name=name,
            path=path,
            module=module,
            alias=create_alias(path, name),
        )
        self._bindings[(path, name)] = binding
        return binding

    def bindings(self) -> list[ImportBinding]:
        """All bindings in emission order: import path (numeric-aware), then alias."""
        return sorted(self._bindings.values(), key=lambda b: (natural_key(b.path), b.alias))
