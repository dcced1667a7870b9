"""Formatting of spelling violations for the run summary."""

from collections.abc import Sequence

from title_spellcheck.checker import Violation


def format_error_message(violations: Sequence[Violation], text: str) -> str:
    """Render violations as a numbered list, in the order given."""
    message = f'{len(violations)} spelling errors found in "{text}":\n'
    for number, violation in enumerate(violations, start=1):
        message += f'{number}) "{violation.word}" at index: {violation.index} \n'
    return message
