"""Pass/fail gate over comparison results."""

from enum import Enum
from typing import Iterable, List, Sequence, Set, Union

from ..errors import ConfigurationError
from .differ import DiffResult


class FailureCategory(str, Enum):
    """Kinds of problems that can fail a check."""
    MISSING = "missing"
    EMPTY = "empty"
    EXTRA = "extra"

    def count(self, result: DiffResult) -> int:
        if self is FailureCategory.MISSING:
            return result.missing_count
        if self is FailureCategory.EMPTY:
            return result.empty_count
        return result.extra_count


def parse_fail_on(value: Union[str, Iterable[str], None]) -> Set[FailureCategory]:
    """Parse ``"missing,empty"`` (or a list of names) into failure categories.

    Raises:
        ConfigurationError: On an unknown category name
    """
    if value is None:
        return set()
    if isinstance(value, str):
        value = value.split(",")

    categories: Set[FailureCategory] = set()
    for item in value:
        name = str(item).strip().lower()
        if not name:
            continue
        try:
            categories.add(FailureCategory(name))
        except ValueError:
            allowed = ", ".join(c.value for c in FailureCategory)
            raise ConfigurationError(
                f"Unknown fail-on category '{name}' (expected one of: {allowed})",
                config_key="fail_on",
            ) from None
    return categories


def failing_locales(
    results: Sequence[DiffResult],
    categories: Iterable[FailureCategory],
) -> List[str]:
    """Locales with a non-zero count in any of ``categories``."""
    categories = set(categories)
    return [
        r.locale for r in results
        if any(category.count(r) > 0 for category in categories)
    ]


def should_fail(
    results: Sequence[DiffResult],
    categories: Iterable[FailureCategory],
) -> bool:
    return bool(failing_locales(results, categories))
