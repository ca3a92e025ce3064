"""
Tests for core/sanitize.py
"""
import pytest

from wputil.core.sanitize import resolve_sanitizer, sanitize_text_field, strip_all_tags


@pytest.mark.unit
class TestSanitizeTextField:

    @pytest.mark.parametrize("raw,expected", [
        ("hello-world", "hello-world"),
        ("  padded  ", "padded"),
        ("<b>bold</b> text", "bold text"),
        ("<script>alert(1)</script>safe", "safe"),
        ("<style>p{}</style>styled", "styled"),
        ("line\nbreak\ttab", "line break tab"),
        ("many     spaces", "many spaces"),
        ("%41encoded", "encoded"),
        ("%%4141twice", "twice"),
        ("nul\x00byte", "nulbyte"),
        ("bell\x07", "bell"),
        ("100% sure", "100% sure"),
        ("Tom &amp; Jerry", "Tom &amp; Jerry"),
        ("<b>Tom</b> &amp; Jerry", "Tom &amp; Jerry"),
        ("<b>Tom</b> & Jerry", "Tom & Jerry"),
        ("", ""),
    ])
    def test_sanitize(self, raw, expected):
        assert sanitize_text_field(raw) == expected

    def test_none_becomes_empty(self):
        assert sanitize_text_field(None) == ""

    def test_non_strings_are_stringified(self):
        assert sanitize_text_field(42) == "42"

    def test_entities_survive_both_paths(self):
        assert strip_all_tags("a &amp; b") == "a &amp; b"
        assert strip_all_tags("<p>a &amp; b &lt;c&gt;</p>") == "a &amp; b &lt;c&gt;"


@pytest.mark.unit
def test_resolve_sanitizer_defaults():
    assert resolve_sanitizer(None) is sanitize_text_field
    assert resolve_sanitizer(str.upper) is str.upper
