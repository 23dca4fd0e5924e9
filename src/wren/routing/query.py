"""Query string parsing for matched URLs."""

from urllib.parse import parse_qs

from wren.types import QueryValue


def parse_query(query_string: str) -> dict[str, QueryValue]:
    """Parse a raw query string, collapsing values by arity.

    A key seen once maps to a ``str``; a repeated key maps to the
    ``list`` of its values in encounter order. Keys keep first-occurrence
    order and blank values are kept::

        parse_query("id=1&id=2&page=5&flag=")
        # {'id': ['1', '2'], 'page': '5', 'flag': ''}
    """
    parsed = parse_qs(query_string.lstrip("?"), keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}
