"""Comparison of a candidate locale tree against the reference tree."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import structlog

from .flatten import NOT_FOUND, flatten, get_value_by_path, is_empty_value

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DiffResult:
    """Outcome of comparing one locale against the reference locale."""

    locale: str
    total_leaf_keys: int
    present_leaf_keys: int
    coverage_percent: float
    missing_keys: Tuple[str, ...] = field(default_factory=tuple)
    empty_keys: Tuple[str, ...] = field(default_factory=tuple)
    extra_keys: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def missing_count(self) -> int:
        return len(self.missing_keys)

    @property
    def empty_count(self) -> int:
        return len(self.empty_keys)

    @property
    def extra_count(self) -> int:
        return len(self.extra_keys)

    @property
    def is_complete(self) -> bool:
        """True when nothing is missing, empty or extra."""
        return not (self.missing_keys or self.empty_keys or self.extra_keys)

    def to_dict(self) -> Dict[str, Any]:
        """Machine-readable form, field names as in the JSON report."""
        return {
            "locale": self.locale,
            "totalLeafKeys": self.total_leaf_keys,
            "presentLeafKeys": self.present_leaf_keys,
            "coveragePercent": self.coverage_percent,
            "missingKeys": list(self.missing_keys),
            "emptyKeys": list(self.empty_keys),
            "extraKeys": list(self.extra_keys),
        }


def coverage(present: int, total: int) -> float:
    """Percentage of present keys, rounded half up to 2 decimals."""
    if total == 0:
        return 100.0
    return math.floor(present / total * 10000 + 0.5) / 100


def compute_diff(
    reference: Dict[str, Any],
    candidate: Dict[str, Any],
    locale: str,
) -> DiffResult:
    """Classify every reference leaf path as missing, empty or present in
    ``candidate`` and collect the candidate paths unknown to the reference.

    Args:
        reference: Reference locale tree
        candidate: Locale tree to check
        locale: Label of the candidate, e.g. ``"es"``

    Returns:
        DiffResult for ``locale``
    """
    reference_leaves = flatten(reference)
    candidate_leaves = flatten(candidate)

    missing_keys: List[str] = []
    empty_keys: List[str] = []

    for path in reference_leaves:
        value = get_value_by_path(candidate, path)
        if value is NOT_FOUND:
            missing_keys.append(path)
        elif is_empty_value(value):
            empty_keys.append(path)

    reference_set = set(reference_leaves)
    extra_keys = [path for path in candidate_leaves if path not in reference_set]

    total = len(reference_leaves)
    present = total - len(missing_keys) - len(empty_keys)

    result = DiffResult(
        locale=locale,
        total_leaf_keys=total,
        present_leaf_keys=present,
        coverage_percent=coverage(present, total),
        missing_keys=tuple(missing_keys),
        empty_keys=tuple(empty_keys),
        extra_keys=tuple(extra_keys),
    )

    logger.debug(
        "Locale compared",
        locale=locale,
        total=total,
        missing=result.missing_count,
        empty=result.empty_count,
        extra=result.extra_count,
        coverage=result.coverage_percent,
    )
    return result
