"""
Unit tests for the curried string functions.
"""

from flj import strings


class TestStrings:

    def test_is_empty(self):
        assert strings.is_empty("")
        assert not strings.is_empty(" ")

    def test_length(self):
        assert strings.length("") == 0
        assert strings.length("abc") == 3

    def test_contains_second_contains_first(self):
        assert strings.contains("ell")("hello")
        assert not strings.contains("hello")("ell")
        assert strings.contains("")("anything")

    def test_matches_whole_string(self):
        digits = strings.matches(r"\d+")
        assert digits("123")
        assert not digits("123a")
        assert not digits("")

    def test_partial_application_with_map(self):
        has_a = strings.contains("a")
        assert list(map(has_a, ["cat", "dog", "bat"])) == [True, False, True]
