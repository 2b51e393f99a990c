"""
Error hierarchy for i18n-parity.

Every failure the tool reports derives from I18nParityError so callers can
tell tool errors apart from programming errors and map them to exit codes.
"""

from typing import Any, Dict, Optional, Union
from datetime import datetime, timezone
from pathlib import Path


class I18nParityError(Exception):
    """
    Base exception for all i18n-parity errors.

    Carries a machine-readable error code and context alongside the
    human-readable message.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.user_message = user_message or message
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "user_message": self.user_message,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class ConfigurationError(I18nParityError):
    """Invalid settings, config file or command line values."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            context={"config_key": config_key},
            user_message="Configuration error. Please check your settings.",
            **kwargs
        )


class LocaleLoadError(I18nParityError):
    """Base class for errors raised while reading locale files."""

    def __init__(self, message: str, path: Union[str, Path, None] = None, **kwargs):
        self.path = Path(path) if path is not None else None
        context = {"path": str(self.path) if self.path else None}
        context.update(kwargs.pop("context", None) or {})
        super().__init__(message, context=context, **kwargs)


class LocaleDirectoryNotFoundError(LocaleLoadError):
    """The locale directory does not exist."""

    def __init__(self, locale_dir: Union[str, Path], **kwargs):
        super().__init__(
            f"Locale directory not found: {locale_dir}",
            path=locale_dir,
            **kwargs
        )


class NoLocaleFilesError(LocaleLoadError):
    """The locale directory holds no recognized locale files."""

    def __init__(self, locale_dir: Union[str, Path], extension: str = ".json", **kwargs):
        super().__init__(
            f"No files found in {locale_dir}",
            path=locale_dir,
            context={"extension": extension},
            **kwargs
        )


class LocaleFileNotFoundError(LocaleLoadError):
    """A locale file could not be opened."""

    def __init__(self, path: Union[str, Path], message: Optional[str] = None, **kwargs):
        super().__init__(message or f"Locale file not found: {path}", path=path, **kwargs)


class ReferenceLocaleNotFoundError(LocaleFileNotFoundError):
    """The reference locale has no file in the locale directory."""

    def __init__(self, reference_locale: str, path: Union[str, Path], **kwargs):
        self.reference_locale = reference_locale
        super().__init__(
            path,
            message=f"Reference locale '{reference_locale}' not found: {path}",
            context={"reference_locale": reference_locale},
            **kwargs
        )


class InvalidLocaleDataError(LocaleLoadError):
    """A locale file is not valid JSON or its root is not an object."""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None, **kwargs):
        super().__init__(
            f"Invalid JSON: {path}",
            path=path,
            context={"reason": reason},
            **kwargs
        )
        self.reason = reason


# Error registry for creating errors by kind
ERROR_REGISTRY = {
    "config": ConfigurationError,
    "load": LocaleLoadError,
    "directory": LocaleDirectoryNotFoundError,
    "no_files": NoLocaleFilesError,
    "file": LocaleFileNotFoundError,
    "invalid": InvalidLocaleDataError,
}


def create_error(error_type: str, *args, **kwargs) -> I18nParityError:
    """Factory function to create errors by type."""
    error_class = ERROR_REGISTRY.get(error_type, I18nParityError)
    return error_class(*args, **kwargs)
