"""Reading locale files from disk."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

import structlog

from ..errors import (
    InvalidLocaleDataError,
    LocaleDirectoryNotFoundError,
    LocaleFileNotFoundError,
    NoLocaleFilesError,
)

logger = structlog.get_logger(__name__)

DEFAULT_EXTENSION = ".json"


def locale_name(path: Union[str, Path], extension: str = DEFAULT_EXTENSION) -> str:
    """Derive the locale label from a file name, e.g. ``es.json`` -> ``es``."""
    name = Path(path).name
    if extension and name.endswith(extension):
        return name[: -len(extension)]
    return name


def list_locale_files(
    locale_dir: Union[str, Path],
    extension: str = DEFAULT_EXTENSION,
) -> List[Path]:
    """List locale files in ``locale_dir``, sorted by file name.

    Raises:
        LocaleDirectoryNotFoundError: If the directory does not exist
        NoLocaleFilesError: If no file carries ``extension``
    """
    locale_dir = Path(locale_dir)
    if not locale_dir.is_dir():
        raise LocaleDirectoryNotFoundError(locale_dir)

    files = sorted(
        (p for p in locale_dir.iterdir() if p.is_file() and p.name.endswith(extension)),
        key=lambda p: p.name,
    )
    if not files:
        raise NoLocaleFilesError(locale_dir, extension=extension)

    logger.debug("Locale files found", dir=str(locale_dir), count=len(files))
    return files


def load_tree(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a locale file into a key/value tree.

    Raises:
        LocaleFileNotFoundError: If the file cannot be read
        InvalidLocaleDataError: If the content is not JSON or its root is not an object
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            raw = f.read()
    except FileNotFoundError as e:
        raise LocaleFileNotFoundError(path, previous_error=e) from e
    except UnicodeDecodeError as e:
        raise InvalidLocaleDataError(path, reason=f"not UTF-8: {e}", previous_error=e) from e
    except OSError as e:
        raise LocaleFileNotFoundError(
            path, message=f"Cannot read locale file {path}: {e.strerror}", previous_error=e
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidLocaleDataError(path, reason=str(e), previous_error=e) from e

    if not isinstance(data, dict):
        raise InvalidLocaleDataError(path, reason=f"root is {type(data).__name__}, expected object")

    logger.debug("Loaded locale file", file=str(path), keys=len(data))
    return data
