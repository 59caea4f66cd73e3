DOUBLE_QUOTE = '"'
LINE_BREAK = "|"  # QuestJS renders a pipe as a line break


def escape_string(text: str | None) -> str:
    """
    Quote text as a QuestJS string literal.

    Newlines become pipes and double quotes get a backslash. Nothing else is
    changed.
    """
    text = text or ""
    escaped = text.replace("\n", LINE_BREAK).replace(DOUBLE_QUOTE, "\\" + DOUBLE_QUOTE)
    return f"{DOUBLE_QUOTE}{escaped}{DOUBLE_QUOTE}"


def unescape_string(literal: str) -> str:
    """
    Undo escape_string as far as possible.

    Lossy: a pipe that was in the original text and one that came from a
    newline look the same, so both come back as "|".
    """
    if len(literal) >= 2 and literal[0] == literal[-1] == DOUBLE_QUOTE:
        literal = literal[1:-1]
    return literal.replace("\\" + DOUBLE_QUOTE, DOUBLE_QUOTE)
