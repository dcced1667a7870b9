"""Decide whether a pull-request title should be spellchecked at all."""

from collections.abc import Collection
from pathlib import Path

from loguru import logger


def extract_category(title: str) -> str:
    """Return the commit type prefix of a conventional-commit title.

    Example:
        >>> extract_category("feat(ui): add button")
        'feat'
        >>> extract_category("no-delimiter-text")
        'no-delimiter-text'
    """
    return title.split(":", 1)[0].split("(", 1)[0]


def should_execute_spellcheck(
    visible_only: bool,
    category: str,
    excluded: Collection[str],
    title: str = "",
    config_path: str | Path = ".versionrc",
) -> bool:
    """Decide whether the title belongs to a section that gets validated.

    Args:
        visible_only: Only validate categories that are not hidden
        category: Commit type derived from the title
        excluded: Commit types hidden in the configuration file
        title: Original title, used in the log message when skipping
        config_path: Configuration file name, used in the log message

    Returns:
        True if the title must be spellchecked, False to skip it
    """
    if not visible_only:
        return True

    if category not in excluded:
        return True

    logger.info(f'Current pull request title "{title}" will not be validated.')
    logger.info(
        f'This is because "validate-visible-sections-only" is set to true and '
        f'commit type "{category}" is hidden in {config_path}.'
    )
    return False
