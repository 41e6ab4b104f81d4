"""Blueprint expansion: instantiate a template sub-tree once per index"""

import re
from typing import Any, Iterator

from cwrap.core.errors import MalformedTemplate


DEFAULT_PLACEHOLDER = "cwrapIndex"


def _token_re(placeholder: str) -> re.Pattern:
    """Match the placeholder with an optional `+N` offset (N may be negative)."""
    return re.compile(re.escape(placeholder) + r"(?:\+(-?\d+))?")


def _substitute(value: Any, pattern: re.Pattern, index: int) -> Any:
    """Return a deep copy of value with every placeholder token replaced."""
    if isinstance(value, str):
        return pattern.sub(lambda m: str(index + int(m.group(1) or 0)), value)
    if isinstance(value, dict):
        return {
            _substitute(k, pattern, index): _substitute(v, pattern, index)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_substitute(v, pattern, index) for v in value]
    return value


def expand(template: dict, placeholder: str, index: int) -> dict:
    """Return one concrete node from template with placeholder -> index (+offset).

    Substitution reaches every key and string value, nested blueprints included,
    so inner blueprints see their outer iteration's index.
    """
    if not isinstance(template, dict):
        raise MalformedTemplate(f"blueprint must be an object, got {type(template).__name__}")
    return _substitute(template, _token_re(placeholder), index)


def blueprint_count(blueprint: Any) -> int:
    """Validate a blueprint mapping and return its repeat count."""
    if not isinstance(blueprint, dict):
        raise MalformedTemplate(f"blueprint must be an object, got {type(blueprint).__name__}")
    count = blueprint.get("count", 0)
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise MalformedTemplate(f"blueprint count must be a non-negative integer, got {count!r}")
    return count


def iter_instances(blueprint: Any, placeholder: str = DEFAULT_PLACEHOLDER) -> Iterator[dict]:
    """Yield the expanded node for each index in [0, count)."""
    count = blueprint_count(blueprint)
    template = {k: v for k, v in blueprint.items() if k != "count"}
    pattern = _token_re(placeholder)
    for i in range(count):
        yield _substitute(template, pattern, i)
