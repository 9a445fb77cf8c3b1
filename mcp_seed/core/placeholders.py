"""
Placeholder handling for catalog string values.

Catalog values embed deployment-time variables as ``{{name}}`` or
``{{name|modifier...}}``. The registry schema expects ``{name}`` instead and a
``variables`` map declaring each one.
"""

from typing import Dict, Iterator, List, Tuple, Mapping, Any
from mcp_seed.models import InputSchema

OPEN = "{{"
CLOSE = "}}"


def has_placeholders(value: str) -> bool:
    return OPEN in value


def convert_braces(value: str) -> str:
    """
    Collapse every doubled brace to a single one.
    Not placeholder aware: stray ``{{`` or ``}}`` are collapsed as well.
    """
    return value.replace(OPEN, "{").replace(CLOSE, "}")


def iter_placeholders(value: str) -> Iterator[Tuple[int, int, str]]:
    """
    Yield ``(start, end, name)`` for each ``{{...}}`` in `value`.

    The name is the first ``|`` separated segment; modifiers are dropped.
    An opening ``{{`` without a closing ``}}`` ends the scan.
    """
    start = 0
    while True:
        open_idx = value.find(OPEN, start)
        if open_idx == -1:
            return

        close_idx = value.find(CLOSE, open_idx)
        if close_idx == -1:
            return

        name = value[open_idx + 2:close_idx].split("|")[0]
        start = close_idx + 2
        yield open_idx, start, name


def canonicalize(value: str) -> str:
    """Rewrite placeholders to ``{name}`` and collapse any remaining doubled braces."""
    parts: List[str] = []
    last = 0
    for start, end, name in iter_placeholders(value):
        parts.append(convert_braces(value[last:start]))
        parts.append(f"{{{name}}}")
        last = end
    parts.append(convert_braces(value[last:]))
    return "".join(parts)


def extract_variables(value: str, config_index: Mapping[str, Mapping[str, Any]]) -> Dict[str, InputSchema]:
    """
    Describe every placeholder variable in `value`.
    The description comes from the config index when the name is a known
    ``<block>.<property>`` key.
    """
    variables: Dict[str, InputSchema] = {}
    for _, _, name in iter_placeholders(value):
        description = None
        config_prop = config_index.get(name)
        if config_prop is not None and isinstance(config_prop.get("description"), str):
            description = config_prop["description"]

        variables[name] = InputSchema(format="string", description=description)
    return variables


def parse_placeholders(value: str, config_index: Mapping[str, Mapping[str, Any]]) -> Tuple[str, Dict[str, InputSchema]]:
    """Return the canonical single-brace value and its declared variables."""
    canonical = canonicalize(value)
    if not has_placeholders(value):
        return canonical, {}
    return canonical, extract_variables(value, config_index)
