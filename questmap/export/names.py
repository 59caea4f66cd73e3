import logging
from typing import Iterable

logger = logging.getLogger(__name__)

# Substituted whenever stripping leaves nothing usable
FALLBACK_NAME = "object"


def is_letter_or_digit(c: str) -> bool:
    """Letters of any script and decimal digits; not fractions, superscripts or other numerics."""
    return c.isalpha() or c.isdecimal()


def strip_odd_characters(text: str | None, *except_chars: str) -> str:
    """
    Remove everything but letters, digits, underscores and spaces.

    Args:
        text: The text to clean up; None counts as empty
        except_chars: Extra characters to keep

    Returns:
        The cleaned text, or "object" if nothing but whitespace is left
    """
    kept = "".join(
        c for c in (text or "")
        if c == " " or c == "_" or is_letter_or_digit(c) or c in except_chars
    )
    return kept if kept.strip() else FALLBACK_NAME


def contains_odd_characters(text: str | None) -> bool:
    """Check for anything other than letters, digits, underscores and spaces."""
    return any(c != " " and c != "_" and not is_letter_or_digit(c) for c in (text or ""))


def contains_word(text: str | None, words: Iterable[str]) -> bool:
    """Check whether any whitespace-delimited token of text is one of words, ignoring case."""
    tokens = {token.casefold() for token in (text or "").split()}
    return any(word.casefold() in tokens for word in words)


def _hyphenated(text: str | None) -> str:
    words = strip_odd_characters(text).split()
    return "-".join(words).upper() if words else FALLBACK_NAME.upper()


def allocate_name(
    text: str | None,
    suffix: int | str | None = None,
    *,
    reserved_words: Iterable[str] = (),
    separator: str = "",
) -> str:
    """
    Derive an export name from a room or object name.

    The usual result is the name uppercased with spaces turned into
    underscores ("Dark Cave" -> "DARK_CAVE"). If a suffix is given, the name
    collides with a reserved word, or it had characters that had to be thrown
    away, the name is rebuilt from its words joined with hyphens instead
    ("Bob's Room" -> "BOBS-ROOM").

    This is a pure function. Callers wanting unique names keep track of the
    names already handed out and retry with increasing suffixes; see
    NameRegistry.

    Args:
        text: The display name
        suffix: Appended to make the name unique, if given
        reserved_words: Words the name must not be
        separator: Placed between the name and the suffix

    Returns:
        A non-empty name made of letters, digits, underscores and hyphens
    """
    reserved_words = tuple(reserved_words)
    name = strip_odd_characters(text).upper().replace(" ", "_")

    if suffix is not None or contains_word(name, reserved_words) or contains_odd_characters(text):
        name = _hyphenated(text)
        if contains_word(name, reserved_words):
            name = f"{name}_"

    if suffix is not None:
        name = f"{name}{separator}{suffix}"

    return name


def object_words(display_name: str | None) -> list[str]:
    """
    Split an object's display name into uppercase synonym words.

    "brass lantern" -> ["BRASS", "LANTERN"]. A blank name gives ["OBJECT"].
    """
    words = (display_name or "").split() or [""]
    return [strip_odd_characters(word).upper() for word in words]


class NameRegistry:
    """
    The set of export names handed out in one namespace during one export.

    Rooms and objects each get their own registry, so a room and an object
    may share a name.
    """

    def __init__(self, reserved_words: Iterable[str] = (), separator: str = ""):
        self.reserved_words: tuple[str, ...] = tuple(reserved_words)
        self.separator: str = separator
        self.used: set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self.used

    def __len__(self) -> int:
        return len(self.used)

    def assign(self, text: str | None) -> str:
        """
        Allocate a name for text that hasn't been handed out yet.

        Tries the plain name first, then suffixes 1, 2, 3... until one is free.
        """
        name = allocate_name(text, reserved_words=self.reserved_words)
        suffix = 0
        while name in self.used:
            suffix += 1
            name = allocate_name(
                text, suffix, reserved_words=self.reserved_words, separator=self.separator
            )

        if suffix:
            logger.debug(f"'{text}' collided {suffix} time(s), using {name}")
        self.used.add(name)
        return name
