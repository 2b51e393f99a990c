"""Batch comparison of every locale in a directory against a reference locale."""

import asyncio
from pathlib import Path
from typing import List, Union

import structlog

from ..errors import ReferenceLocaleNotFoundError, log_errors
from .differ import DiffResult, compute_diff
from .files import DEFAULT_EXTENSION, list_locale_files, load_tree, locale_name

logger = structlog.get_logger(__name__)

DEFAULT_REFERENCE_LOCALE = "fr"
DEFAULT_LOCALE_DIR = Path("src/locales")


@log_errors(level="warning", operation_name="check_all_locales")
async def check_all_locales(
    reference_locale: str = DEFAULT_REFERENCE_LOCALE,
    locale_dir: Union[str, Path] = DEFAULT_LOCALE_DIR,
    extension: str = DEFAULT_EXTENSION,
) -> List[DiffResult]:
    """Compare each locale file in ``locale_dir`` with the reference locale.

    Candidate files are loaded concurrently. The first load failure aborts
    the whole batch; no partial results are returned.

    Args:
        reference_locale: Reference locale name (file name without extension)
        locale_dir: Directory holding one file per locale
        extension: Extension of locale files

    Returns:
        One DiffResult per non-reference locale, in file name order
    """
    locale_dir = Path(locale_dir)
    files = list_locale_files(locale_dir, extension)

    reference_file = locale_dir / f"{reference_locale}{extension}"
    if reference_file.name not in {f.name for f in files}:
        raise ReferenceLocaleNotFoundError(reference_locale, reference_file)

    reference = await asyncio.to_thread(load_tree, reference_file)
    candidates = [f for f in files if f.name != reference_file.name]

    logger.info(
        "Checking locales",
        reference=reference_locale,
        dir=str(locale_dir),
        candidates=len(candidates),
    )

    async def check_one(path: Path) -> DiffResult:
        candidate = await asyncio.to_thread(load_tree, path)
        return compute_diff(reference, candidate, locale_name(path, extension))

    results = await asyncio.gather(*(check_one(path) for path in candidates))
    return list(results)


def check_all_locales_sync(
    reference_locale: str = DEFAULT_REFERENCE_LOCALE,
    locale_dir: Union[str, Path] = DEFAULT_LOCALE_DIR,
    extension: str = DEFAULT_EXTENSION,
) -> List[DiffResult]:
    """Blocking wrapper around :func:`check_all_locales`."""
    return asyncio.run(check_all_locales(reference_locale, locale_dir, extension))
