"""Rendering of comparison results as text or JSON."""

import json
from typing import List, Sequence

from ..errors import ConfigurationError
from .differ import DiffResult

TABLE_COLUMNS = ("locale", "coverage", "missing", "empty", "extra")


def format_coverage(percent: float) -> str:
    """Format a coverage value, e.g. ``87.5%`` or ``100%``."""
    return f"{percent:g}%"


def _summary_rows(results: Sequence[DiffResult]) -> List[List[str]]:
    return [
        [
            r.locale,
            format_coverage(r.coverage_percent),
            str(r.missing_count),
            str(r.empty_count),
            str(r.extra_count),
        ]
        for r in results
    ]


def render_summary(results: Sequence[DiffResult]) -> str:
    """Render the per-locale summary table."""
    rows = _summary_rows(results)
    widths = [
        max([len(header)] + [len(row[i]) for row in rows])
        for i, header in enumerate(TABLE_COLUMNS)
    ]

    def line(cells: Sequence[str]) -> str:
        # Locale column left aligned, numbers right aligned
        parts = [cells[0].ljust(widths[0])]
        parts.extend(cell.rjust(width) for cell, width in zip(cells[1:], widths[1:]))
        return " | ".join(parts).rstrip()

    lines = [line(TABLE_COLUMNS), "-+-".join("-" * w for w in widths)]
    lines.extend(line(row) for row in rows)
    if not rows:
        lines.append("No locales to compare")
    return "\n".join(lines)


def render_details(results: Sequence[DiffResult]) -> str:
    """Render missing, empty and extra keys of every locale."""
    lines: List[str] = []
    for r in results:
        for title, keys in (
            ("Missing keys", r.missing_keys),
            ("Empty keys", r.empty_keys),
            ("Extra keys", r.extra_keys),
        ):
            if not keys:
                continue
            lines.append(f"[{r.locale}] {title} ({len(keys)}):")
            lines.extend(f"  - {key}" for key in keys)
    return "\n".join(lines)


def render_table(results: Sequence[DiffResult]) -> str:
    """Summary table followed by the key listings."""
    details = render_details(results)
    summary = render_summary(results)
    return f"{summary}\n\n{details}" if details else summary


def render_json(results: Sequence[DiffResult]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)


RENDERERS = {
    "table": render_table,
    "json": render_json,
}


def render(results: Sequence[DiffResult], output_format: str = "table") -> str:
    """Render results with the renderer registered for ``output_format``."""
    try:
        renderer = RENDERERS[output_format]
    except KeyError:
        raise ConfigurationError(
            f"Unknown output format: {output_format}", config_key="output_format"
        ) from None
    return renderer(results)
