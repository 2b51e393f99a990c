"""Settings for i18n-parity."""

from pathlib import Path
from typing import Any, Literal, Set

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..parity.threshold import FailureCategory, parse_fail_on


class Settings(BaseSettings):
    """Run settings, read from ``I18N_PARITY_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="I18N_PARITY_")

    reference_locale: str = Field(default="fr", min_length=1, description="Reference locale name")
    locale_dir: Path = Field(default=Path("src/locales"), description="Directory of locale files")
    extension: str = Field(default=".json", description="Extension of locale files")
    output_format: Literal["table", "json"] = Field(default="table")
    # Comma separated, e.g. "missing,empty"
    fail_on: str = Field(default="", description="Categories that fail the check")
    debug: bool = False

    @field_validator("fail_on", mode="before")
    @classmethod
    def normalize_fail_on(cls, value: Any) -> str:
        if value is None:
            return ""
        categories = parse_fail_on(value)
        return ",".join(c.value for c in FailureCategory if c in categories)

    @field_validator("extension")
    @classmethod
    def extension_has_dot(cls, value: str) -> str:
        if value and not value.startswith("."):
            value = f".{value}"
        return value

    @property
    def fail_on_categories(self) -> Set[FailureCategory]:
        return parse_fail_on(self.fail_on)

    def resolved_locale_dir(self, base: Path = None) -> Path:
        """Locale directory, relative paths resolved against ``base`` (cwd by default)."""
        if self.locale_dir.is_absolute():
            return self.locale_dir
        return (base or Path.cwd()) / self.locale_dir
