"""In-memory dictionary assembled from a base word list and ``.spelling`` files.

The dictionary is append-only for the duration of a run. Appending the same
words twice keeps both copies; the spellchecker treats them as one.
"""

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger


class Dictionary:
    """Ordered, append-only collection of accepted words.

    Attributes:
        language: pyspellchecker language whose bundled word frequency list
            is used underneath the explicit words, or None for none
    """

    def __init__(self, base_words: Iterable[str] = (), language: str | None = None):
        self.language = language
        self._words: list[str] = list(base_words)

    @classmethod
    def from_file(cls, file_path: str | Path, language: str | None = None) -> "Dictionary":
        """Load base words from a plain word list or a hunspell ``.dic`` file.

        A leading word-count line is skipped and ``/FLAGS`` affix suffixes
        are stripped.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(file_path)
        if not path.exists():
            error_msg = f"Dictionary file not found: {file_path}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        words = []
        with path.open("r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                entry = line.strip()
                if not entry:
                    continue
                if line_num == 1 and entry.isdigit():
                    continue
                word = entry.split("/", 1)[0]
                if word:
                    words.append(word)

        logger.info(f"Loaded {len(words)} base words from {file_path}")
        return cls(words, language=language)

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self._words)

    def append(self, words: Iterable[str]) -> int:
        """Append words to the dictionary and return how many were added."""
        added = 0
        for word in words:
            self._words.append(word)
            added += 1
        return added

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary(words={len(self._words)}, language={self.language!r})"


def read_spelling_file(file_path: str | Path) -> list[str]:
    """Read words from a ``.spelling`` file.

    One word per line. Blank lines and ``#`` comment lines are skipped,
    surrounding whitespace is stripped and the order is kept.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
    """
    words = []
    with Path(file_path).open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            words.append(word)
    return words


def split_spelling_list(spelling_list: str) -> list[str]:
    """Split an inline, whitespace-separated word list."""
    return spelling_list.split()


class AugmentStatus(enum.Enum):
    AUGMENTED = "augmented"
    FAILED = "failed"


@dataclass(frozen=True)
class AugmentResult:
    """Outcome of extending a dictionary with extra words."""

    status: AugmentStatus
    source: Path
    words_added: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is AugmentStatus.AUGMENTED


def extend_dictionary(
    dictionary: Dictionary, spelling_path: str | Path, spelling_list: str | None = None
) -> AugmentResult:
    """Append the words of ``spelling_path`` and ``spelling_list`` to ``dictionary``.

    Read errors do not raise. They are logged and returned as a FAILED
    result; the dictionary keeps whatever was appended before the error.

    Args:
        dictionary: Dictionary to extend in place
        spelling_path: ``.spelling`` file (downloaded or fallback)
        spelling_list: Optional whitespace-separated words

    Returns:
        AugmentResult with the number of words added
    """
    source = Path(spelling_path)
    try:
        added = dictionary.append(read_spelling_file(source))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to extend dictionary from {source}: {e}")
        return AugmentResult(AugmentStatus.FAILED, source, error=str(e))

    if spelling_list:
        added += dictionary.append(split_spelling_list(spelling_list))

    logger.info(f"Added {added} words to the dictionary from {source} and spelling list")
    return AugmentResult(AugmentStatus.AUGMENTED, source, words_added=added)
