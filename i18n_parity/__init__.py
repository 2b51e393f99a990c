"""i18n-parity: find missing, empty and extra keys in locale files."""

__version__ = "1.0.0"

from i18n_parity.parity import (  # noqa: E402
    DiffResult,
    check_all_locales,
    check_all_locales_sync,
    compute_diff,
    flatten,
)

__all__ = [
    "__version__",
    "DiffResult",
    "check_all_locales",
    "check_all_locales_sync",
    "compute_diff",
    "flatten",
]
