"""
Error handling for i18n-parity:
- Structured error hierarchy
- Error logging decorator
"""

from .exceptions import (
    I18nParityError,
    ConfigurationError,
    LocaleLoadError,
    LocaleDirectoryNotFoundError,
    NoLocaleFilesError,
    LocaleFileNotFoundError,
    ReferenceLocaleNotFoundError,
    InvalidLocaleDataError,
    create_error,
)

from .decorators import log_errors

__all__ = [
    # Exceptions
    "I18nParityError",
    "ConfigurationError",
    "LocaleLoadError",
    "LocaleDirectoryNotFoundError",
    "NoLocaleFilesError",
    "LocaleFileNotFoundError",
    "ReferenceLocaleNotFoundError",
    "InvalidLocaleDataError",
    "create_error",

    # Decorators
    "log_errors",
]
