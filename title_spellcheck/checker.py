"""Spellchecking of short texts against an assembled ``Dictionary``.

The word lookup is delegated to pyspellchecker. Tokens that look like
acronyms or numbers can be skipped, and no correction candidates are ever
computed.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from spellchecker import SpellChecker

from title_spellcheck.dictionary import Dictionary


@dataclass(frozen=True)
class Violation:
    """A word missing from the dictionary and its offset in the text."""

    word: str
    index: int


class TitleSpellChecker:
    """Finds words of a text that are not in a dictionary."""

    TOKEN_PATTERN = re.compile(r"(?:[^\W_]|['’-])+")
    ACRONYM_PATTERN = re.compile(r"^[A-Z0-9]{2,}(['’]?s)?$")
    NUMBER_PATTERN = re.compile(r"^[0-9,.\-#]+(th|st|nd|rd)?$", re.IGNORECASE)
    EDGE_CHARS = "'’-"

    def __init__(
        self,
        dictionary: Dictionary,
        ignore_acronyms: bool = True,
        ignore_numbers: bool = True,
    ):
        self.ignore_acronyms = ignore_acronyms
        self.ignore_numbers = ignore_numbers
        self.spell = SpellChecker(language=dictionary.language, case_sensitive=False)
        self.spell.word_frequency.load_words(dictionary.words)
        logger.debug(
            f"Spellchecker ready with {self.spell.word_frequency.unique_words} distinct words "
            f"(language={dictionary.language})"
        )

    def check(self, text: str) -> list[Violation]:
        """Return the unknown words of ``text`` in the order they appear."""
        violations = []
        for match in self.TOKEN_PATTERN.finditer(text):
            token = match.group()
            word = token.strip(self.EDGE_CHARS)
            if not word:
                continue
            index = match.start() + (len(token) - len(token.lstrip(self.EDGE_CHARS)))

            if self._is_ignored(word) or self._is_known(word):
                continue

            logger.debug(f'Unknown word "{word}" at index {index}')
            violations.append(Violation(word=word, index=index))
        return violations

    def check_file(self, file_path: str | Path) -> list[Violation]:
        """Spellcheck the whole content of a text file."""
        return self.check(Path(file_path).read_text(encoding="utf-8"))

    def _is_ignored(self, word: str) -> bool:
        if self.ignore_acronyms and self.ACRONYM_PATTERN.match(word):
            return True
        return bool(self.ignore_numbers and self.NUMBER_PATTERN.match(word))

    def _is_known(self, word: str) -> bool:
        if word in self.spell:
            return True
        parts = [part for part in word.split("-") if part]
        return len(parts) > 1 and all(part in self.spell for part in parts)
