"""Flattening of nested translation trees into dotted leaf paths."""

from typing import Any, Dict, List


class _NotFound:
    """Marker for a path that does not resolve in a tree."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


# Returned by get_value_by_path for absent paths. ``None`` is a present value.
NOT_FOUND = _NotFound()


def is_tree(value: Any) -> bool:
    """Return True if value is a nested key/value tree (lists are leaves)."""
    return isinstance(value, dict)


def flatten(tree: Dict[str, Any], prefix: str = "") -> List[str]:
    """Return the leaf paths of ``tree`` in depth-first key order.

    Args:
        tree: Key/value tree
        prefix: Path of ``tree`` inside its parent, if any

    Returns:
        Dotted leaf paths, e.g. ``["menu.open", "menu.close", "title"]``
    """
    paths: List[str] = []
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if is_tree(value):
            paths.extend(flatten(value, path))
        else:
            paths.append(path)
    return paths


def get_value_by_path(tree: Dict[str, Any], path: str) -> Any:
    """Resolve a dotted path in ``tree``.

    Returns:
        The value at ``path`` (possibly ``None``), or ``NOT_FOUND`` when a
        segment is absent or an intermediate value is not a tree
    """
    current: Any = tree
    for segment in path.split("."):
        if is_tree(current) and segment in current:
            current = current[segment]
        else:
            return NOT_FOUND
    return current


def is_empty_value(value: Any) -> bool:
    """A resolved value is empty if it is None or a blank string."""
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    return False
