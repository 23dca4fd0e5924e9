"""Templates for generated modules.

Rendered with kida (``autoescape=False``, ``trim_blocks``,
``lstrip_blocks``). Every value is pre-formatted by
:mod:`wren.codegen.emit`; the templates only lay out lines.
"""

PATH_STRUCTURE = '''\
"""Route structure for {{ source }}.

Generated by wren. Do not edit by hand; run ``wren generate`` instead.
"""

from typing import {{ typing_names }}
{% if uses_handler %}

from wren.types import Handler
{% end %}
{% if imports %}

{% for statement in imports %}
{{ statement }}
{% end %}
{% end %}
{% for decl in declarations %}

{{ decl.name }} = TypedDict(
    "{{ decl.name }}",
    {
{% for item in decl.fields %}
        {{ item.literal }}: {{ item.annotation }},
{% end %}
    },
)
{% end %}
'''

PARAMS = '''\
"""Path parameters for {{ route }}.

Generated by wren. Do not edit by hand; run ``wren generate`` instead.
"""

from typing import TypedDict

Params = TypedDict(
    "Params",
    {
{% for item in fields %}
        {{ item.literal }}: {{ item.annotation }},
{% end %}
    },
)
'''

TEMPLATES: dict[str, str] = {
    "path_structure.py": PATH_STRUCTURE,
    "params.py": PARAMS,
}
