"""Locale comparison: flattening, diffing, batch checks and reporting."""

from .checker import check_all_locales, check_all_locales_sync
from .differ import DiffResult, compute_diff
from .files import list_locale_files, load_tree, locale_name
from .flatten import NOT_FOUND, flatten, get_value_by_path, is_empty_value
from .report import render, render_json, render_table
from .threshold import FailureCategory, failing_locales, parse_fail_on, should_fail

__all__ = [
    "NOT_FOUND",
    "DiffResult",
    "FailureCategory",
    "check_all_locales",
    "check_all_locales_sync",
    "compute_diff",
    "failing_locales",
    "flatten",
    "get_value_by_path",
    "is_empty_value",
    "list_locale_files",
    "load_tree",
    "locale_name",
    "parse_fail_on",
    "render",
    "render_json",
    "render_table",
    "should_fail",
]
