import pytest

from questmap.export.strings import escape_string, unescape_string


def test_plain_text_is_quoted():
    assert escape_string("It's pitch black.") == "\"It's pitch black.\""


def test_double_quotes_are_escaped():
    assert escape_string('Say "hi"') == '"Say \\"hi\\""'


def test_newlines_become_pipes():
    assert escape_string("line one\nline two\n") == '"line one|line two|"'


def test_none_is_empty():
    assert escape_string(None) == '""'
    assert escape_string("") == '""'


def test_other_characters_are_left_alone():
    assert escape_string("tab\there\r\né") == '"tab\there\r|é"'


@pytest.mark.parametrize("text", [
    "simple",
    'quote " in the middle',
    'already escaped \\" quote',
    "multi\nline\ntext",
    "",
])
def test_unescape_recovers_text_with_newlines_as_pipes(text):
    assert unescape_string(escape_string(text)) == text.replace("\n", "|")


def test_pipes_and_newlines_are_indistinguishable():
    assert escape_string("a|b") == escape_string("a\nb")
    assert unescape_string(escape_string("a\nb")) == "a|b"
