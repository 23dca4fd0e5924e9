"""Type aliases shared by generated route modules and the matcher.

Generated modules reference :data:`Handler` for every method field::

    "$get": Annotated[Handler, get_0c4f0e1bd7a3f6a2]
"""

from collections.abc import Callable
from typing import Any, TypeAlias

Handler: TypeAlias = Callable[..., Any]

# A captured path parameter: Dynamic -> str, CatchAll -> list[str],
# OptionalCatchAll -> list[str] | None.
ParamValue: TypeAlias = str | list[str] | None

# A parsed query value: str when the key appears once, list otherwise.
QueryValue: TypeAlias = str | list[str]
