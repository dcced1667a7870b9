"""End-to-end spellcheck of a pull-request title.

``run_spellcheck`` ties the pieces together:

1. derive the commit type and decide whether the title is validated at all
2. persist the title for the spellchecker
3. download the ``.spelling`` word list, or use the bundled fallback
4. extend the dictionary with it and the inline spelling list
5. spellcheck the title and format the violations
"""

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import requests
from loguru import logger

from title_spellcheck.checker import TitleSpellChecker, Violation
from title_spellcheck.config import Settings
from title_spellcheck.dictionary import AugmentResult, Dictionary, extend_dictionary
from title_spellcheck.fetcher import (
    FALLBACK_SPELLING_PATH,
    FetchResult,
    SpellingFileFetcher,
    resolve_spelling_source,
)
from title_spellcheck.report import format_error_message
from title_spellcheck.scope import extract_category, should_execute_spellcheck
from title_spellcheck.versionrc import get_excluded_commit_types

TITLE_FILE_NAME = "pull_request.title"
DOWNLOADED_SPELLING_NAME = "downloaded.spelling"


class RunStatus(enum.Enum):
    SKIPPED = "skipped"
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of one spellcheck run."""

    status: RunStatus
    title: str
    category: str
    message: str = ""
    violations: list[Violation] = field(default_factory=list)
    spelling_source: Path | None = None
    fetch: FetchResult | None = None
    augment: AugmentResult | None = None

    @property
    def failed(self) -> bool:
        return self.status is RunStatus.FAILED


def build_base_dictionary(settings: Settings) -> Dictionary:
    """Create the dictionary the extra words are appended to."""
    if settings.base_dictionary_path:
        return Dictionary.from_file(
            settings.base_dictionary_path, language=settings.dictionary_language
        )
    return Dictionary(language=settings.dictionary_language)


def run_spellcheck(
    title: str,
    settings: Settings,
    session: requests.Session | None = None,
    fallback_spelling_path: str | Path = FALLBACK_SPELLING_PATH,
    checker_factory: Callable[[Dictionary], TitleSpellChecker] = TitleSpellChecker,
) -> PipelineResult:
    """Spellcheck ``title`` according to ``settings``.

    Configuration and download problems are recovered locally; only
    spelling violations produce a FAILED result. Any other exception
    propagates to the caller.

    Args:
        title: Pull-request title to validate
        settings: Run configuration
        session: HTTP session for the word list download; a new one is
            created and closed when omitted
        fallback_spelling_path: Word list used when the download fails
        checker_factory: Builds the spellchecker from the final dictionary

    Returns:
        PipelineResult with the status and the formatted message
    """
    category = extract_category(title)
    excluded = (
        get_excluded_commit_types(settings.versionrc_path)
        if settings.validate_visible_sections_only
        else frozenset()
    )
    if not should_execute_spellcheck(
        settings.validate_visible_sections_only,
        category,
        excluded,
        title=title,
        config_path=settings.versionrc_path,
    ):
        return PipelineResult(
            RunStatus.SKIPPED,
            title,
            category,
            message=f'Commit type "{category}" is hidden, "{title}" was not validated',
        )

    work_dir = Path(settings.work_dir)
    work_dir.mkdir(parents=True, exist_ok=True)
    title_file = work_dir / TITLE_FILE_NAME
    title_file.write_text(title, encoding="utf-8")
    logger.debug(f"Wrote title to {title_file}")

    fetch_result = None
    try:
        spelling_path, fetch_result = _resolve_spelling(
            settings, session, work_dir, fallback_spelling_path
        )

        dictionary = build_base_dictionary(settings)
        augment_result = extend_dictionary(dictionary, spelling_path, settings.spelling_list)
        if not augment_result.ok:
            if settings.abort_on_augment_failure:
                msg = f"Could not extend dictionary from {spelling_path}: {augment_result.error}"
                raise RuntimeError(msg)
            logger.warning("Continuing with a dictionary that lacks the extra words")

        checker = checker_factory(dictionary)
        violations = checker.check_file(title_file)
    finally:
        # Only artifacts created by this run are removed.
        title_file.unlink(missing_ok=True)
        if fetch_result is not None and fetch_result.ok:
            fetch_result.destination.unlink(missing_ok=True)

    if violations:
        return PipelineResult(
            RunStatus.FAILED,
            title,
            category,
            message=format_error_message(violations, title),
            violations=violations,
            spelling_source=spelling_path,
            fetch=fetch_result,
            augment=augment_result,
        )

    return PipelineResult(
        RunStatus.PASSED,
        title,
        category,
        message=f'Text "{title}" is free from spelling errors',
        spelling_source=spelling_path,
        fetch=fetch_result,
        augment=augment_result,
    )


def _resolve_spelling(
    settings: Settings,
    session: requests.Session | None,
    work_dir: Path,
    fallback_spelling_path: str | Path,
) -> tuple[Path, FetchResult]:
    own_session = session is None
    if own_session:
        session = requests.Session()
    try:
        fetcher = SpellingFileFetcher(session, timeout=settings.request_timeout)
        return resolve_spelling_source(
            fetcher,
            settings.spelling_file_url,
            work_dir / DOWNLOADED_SPELLING_NAME,
            fallback=fallback_spelling_path,
        )
    finally:
        if own_session:
            session.close()
