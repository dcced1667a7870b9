"""Settings for the PR title spellcheck, loaded from the environment or a .env file.

Action inputs are accepted in the GitHub Actions form (``INPUT_SPELLING-LIST``)
as well as the plain upper-snake form (``SPELLING_LIST``).
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for a single spellcheck run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    spelling_file_url: str = Field(
        default="",
        validation_alias=AliasChoices("INPUT_SPELLING-FILE-URL", "SPELLING_FILE_URL"),
        description="URL of the supplementary .spelling word list.",
    )
    spelling_list: str = Field(
        default="",
        validation_alias=AliasChoices("INPUT_SPELLING-LIST", "SPELLING_LIST"),
        description="Whitespace-separated words added to the dictionary.",
    )
    validate_visible_sections_only: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "INPUT_VALIDATE-VISIBLE-SECTIONS-ONLY", "VALIDATE_VISIBLE_SECTIONS_ONLY"
        ),
        description="Skip titles whose commit type is hidden in .versionrc.",
    )

    versionrc_path: str = Field(
        default=".versionrc", validation_alias=AliasChoices("VERSIONRC_PATH")
    )
    work_dir: str = Field(
        default=".pr-title-spellcheck", validation_alias=AliasChoices("SPELLCHECK_WORK_DIR")
    )
    dictionary_language: str | None = Field(
        default="en", validation_alias=AliasChoices("DICTIONARY_LANGUAGE")
    )
    base_dictionary_path: str | None = Field(
        default=None, validation_alias=AliasChoices("BASE_DICTIONARY_PATH")
    )
    request_timeout: float = Field(
        default=10.0, gt=0, validation_alias=AliasChoices("REQUEST_TIMEOUT")
    )
    abort_on_augment_failure: bool = Field(
        default=False, validation_alias=AliasChoices("ABORT_ON_AUGMENT_FAILURE")
    )

    @field_validator("spelling_file_url", "spelling_list", "versionrc_path", "work_dir")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()

    @field_validator("dictionary_language", "base_dictionary_path")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings instance."""
    return Settings()
