"""Wren exception hierarchy.

Shared across the scanner, the code generator, and the matcher so every
module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route directory layout cannot be expressed.

    Typically raised during a scan, before anything is written.
    """


class MalformedURLError(WrenError, ValueError):
    """Raised when a string handed to the matcher is not a parseable URL.

    A URL that parses but matches no route is not an error; the matcher
    returns ``None`` for it.
    """

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        detail = f"Malformed URL {url!r}"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)
