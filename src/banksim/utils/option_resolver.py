"""Approximate matching of free-text input against a fixed menu.

Scoring is a three-tier heuristic, not an edit distance:

* prefix of the entry's leading word: ``1000 + (100 - |len(word) - len(input)|)``
* substring of the leading word:       ``500 + (100 - |len(word) - len(input)|)``
* otherwise, characters of the input found anywhere in the word, times 10

The highest score wins and ties go to the entry declared first.
"""

from typing import Optional, Sequence

from banksim.domain.errors import InvalidOptionError

PREFIX_BASE = 1000
SUBSTRING_BASE = 500
LENGTH_BONUS = 100
OVERLAP_WEIGHT = 10


def leading_word(entry: str) -> str:
    """Return the lowercased first word of a menu entry.

    Leading index markers, punctuation and whitespace ("1. ", "- ") are
    skipped; the word runs up to the first space.
    """
    start = 0
    while start < len(entry) and not entry[start].isalpha():
        start += 1
    word = entry[start:].split(" ", 1)[0]
    return word.lower()


def score_option(entry: str, text: str) -> int:
    """Score how well ``text`` matches a single menu entry."""
    word = leading_word(entry)
    needle = text.lower()
    length_bonus = LENGTH_BONUS - abs(len(word) - len(needle))

    if len(needle) <= len(word) and word.startswith(needle):
        return PREFIX_BASE + length_bonus
    if needle in word:
        return SUBSTRING_BASE + length_bonus

    matches = 0
    for char in needle:
        if char in word:
            matches += 1
    return matches * OVERLAP_WEIGHT


def resolve_option(entries: Sequence[str], text: str) -> Optional[int]:
    """Map free-text input to the index of the closest menu entry.

    A single digit is a 1-based shortcut and never falls back to fuzzy
    matching; longer numeric input is matched like any other text.

    Args:
        entries: Ordered menu labels
        text: Raw user input

    Returns:
        Zero-based index of the best entry, or None if there is no match
    """
    if len(text) == 1 and text.isascii() and text.isdigit():
        option = int(text) - 1
        if 0 <= option < len(entries):
            return option
        return None

    best, best_score = None, -1
    for index, entry in enumerate(entries):
        score = score_option(entry, text)
        if score > best_score:
            best, best_score = index, score
    return best


def resolve_menu_option(entries: Sequence[str], text: str) -> int:
    """Resolve a menu option, raising if nothing matches.

    Raises:
        InvalidOptionError: If ``text`` does not select any entry
    """
    option = resolve_option(entries, text)
    if option is None:
        raise InvalidOptionError(f"'{text}' is not a valid option")
    return option
