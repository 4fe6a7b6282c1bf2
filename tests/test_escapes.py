import pytest

from pgconf_codec.escapes import escape, unescape


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ("Foo''Bar", "Foo'Bar"),
        ("Baz\\'Barf", "Baz'Barf"),
        ("x\\ty", "x\ty"),
        ("\\141bc", "abc"),
        ("Foo\\nBar", "Foo\nBar"),
        ("Foo\\\\Bar", "Foo\\Bar"),
        ("\\b\\f\\r", "\b\f\r"),
        ("\\q", "q"),
        ("\\0", "\x00"),
        ("\\1411", "a1"),
        ("\\303\\251", "\u00e9"),
        ("caf\\303\\251!", "caf\u00e9!"),
        ("\\351t\\351", "\u00e9t\u00e9"),
        ("\\342\\202\\254\\141", "\u20aca"),
    ],
)
def test_unescape(payload: str, expected: str) -> None:
    assert unescape(payload) == expected


def test_escape_quotes_and_backslashes() -> None:
    assert escape("it's C:\\tmp") == "it''s C:\\\\tmp"


def test_escape_control_characters() -> None:
    assert escape("a\tb\nc\rd\fe\bf") == "a\\tb\\nc\\rd\\fe\\bf"
    assert escape("\a1") == "\\0071"
    assert escape("\x7f\x1b") == "\\177\\033"


def test_escape_leaves_other_text_alone() -> None:
    assert escape("\"$user\", public é") == "\"$user\", public é"
