"""
Null-safe access into nested Jira payloads.
`dig` walks a path of dict keys and list indices and yields None at the first missing level.
"""

from typing import Any, Callable, Iterable, Optional, Union

PathStep = Union[str, int]


def dig(obj: Any, *path: PathStep) -> Optional[Any]:
    """Return the value at `path` inside `obj`, or None if any step is absent or the wrong shape.

    String steps index dicts, integer steps index lists.
    """
    current = obj
    for step in path:
        if current is None:
            return None
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
    return current


def is_absent(value: Any) -> bool:
    """None and empty strings both count as absent."""
    return value is None or value == ""


def first_present(extractors: Iterable[Callable[[Any], Any]], source: Any, default: Any = None) -> Any:
    """Try each extractor on `source` in order and return the first non-absent result."""
    for extract in extractors:
        value = extract(source)
        if not is_absent(value):
            return value
    return default


def map_list(value: Any, project: Callable[[Any], Any]) -> list:
    """Project every entry of a list; anything that is not a list maps to []."""
    if not isinstance(value, list):
        return []
    return [project(item) for item in value]
