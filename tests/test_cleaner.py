"""Tests for relaxed JSON cleaning in core/cleaner.py."""

from __future__ import annotations

import json

import pytest

from core import clean
from core.cleaner import clean_with_offset, find_lone_surrogate, find_unquoted


class TestKeyQuoting:
    """Tests for wrapping bare and single-quoted keys."""

    def test_bare_key_and_trailing_comma(self):
        """Bare keys are quoted and the trailing comma dropped."""
        assert clean('{foo: 1, "bar": 2,}') == '{"foo": 1, "bar": 2}'

    def test_single_quoted_key(self):
        """Single-quoted keys become double-quoted."""
        assert clean("{'name': 1}") == '{"name": 1}'

    def test_whitespace_before_colon(self):
        """A key may be separated from its colon by spaces."""
        assert clean("{foo : 1}") == '{"foo" : 1}'

    def test_nested_objects(self):
        """Keys of nested objects are quoted too."""
        assert clean("{outer: {inner: [1, 2,],},}") == '{"outer": {"inner": [1, 2]}}'

    def test_keyword_values_untouched(self):
        """Literals in value position are never mistaken for keys."""
        text = '{"a": true, "b": null, "c": [true, false]}'
        assert clean(text) == text

    def test_key_like_text_inside_string_untouched(self):
        """Text shaped like 'key:' inside a string literal is left alone."""
        text = '{"msg": "note, key: value", "x": "{y: 1}"}'
        assert clean(text) == text


class TestCommentStripping:
    """Tests for removing // and /* */ comments."""

    def test_line_comment(self):
        """Line comments are removed up to the newline."""
        text = '{\n  "a": 1, // note\n  "b": 2\n}'
        assert clean(text) == '{\n  "a": 1, \n  "b": 2\n}'

    def test_block_comment_keeps_newlines(self):
        """Block comments spanning lines leave their newlines behind."""
        text = '{"a": /* one\ntwo */ 1}'
        assert clean(text) == '{"a": \n 1}'

    def test_url_in_string_survives(self):
        """Comment markers inside string literals are content."""
        text = '{"url": "http://example.com/*x*/"}'
        assert clean(text) == text

    def test_escaped_quote_in_string(self):
        """Escaped quotes do not end the string literal."""
        text = r'{"a": "say \"hi\" // not a comment"}'
        assert clean(text) == text

    def test_unterminated_block_comment_left_in_place(self):
        """An unterminated /* is left for the parser to reject."""
        text = '{"a": 1} /* oops'
        assert clean(text) == text


class TestTrailingCommas:
    """Tests for dropping trailing commas."""

    def test_array_trailing_comma(self):
        """A comma before ] is removed."""
        assert clean("[1, 2, ]") == "[1, 2 ]"

    def test_comma_followed_by_comment_then_brace(self):
        """Comments between the comma and the closer are ignored."""
        assert clean('{"a": 1, // last\n}') == '{"a": 1 \n}'

    def test_separator_commas_kept(self):
        """Commas between members are kept."""
        assert clean("[1, 2, 3]") == "[1, 2, 3]"


class TestNormalization:
    """Tests for line endings, tabs and trimming."""

    def test_crlf_and_tabs(self):
        """CRLF becomes LF and tabs become four spaces."""
        assert clean('{\r\n\t"a": 1\r\n}') == '{\n    "a": 1\n}'

    def test_custom_tab_width(self):
        """The tab width is configurable."""
        assert clean('{\t"a": 1}', tab_width=2) == '{  "a": 1}'

    def test_trims_outer_whitespace(self):
        """Leading and trailing whitespace is removed."""
        assert clean('  \n {"a": 1} \n') == '{"a": 1}'

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        """Empty input cleans to an empty string."""
        assert clean(text) == ""

    def test_leading_lines_are_counted(self):
        """clean_with_offset reports how many lines the trim removed."""
        cleaned, leading = clean_with_offset('/* header\n comment */\n{"a": 1}')
        assert cleaned == '{"a": 1}'
        assert leading == 2


class TestStrictJsonIsUnchanged:
    """Cleaning already-strict JSON is a no-op."""

    @pytest.mark.parametrize("value", [
        {"a": [1, 2, {"b": None}], "c": "x"},
        [1, "two", 3.5, False],
        {"nested": {"deep": {"list": []}}, "empty": {}},
        "plain string",
        42,
    ])
    def test_noop_on_strict_json(self, value):
        """Serialized JSON passes through unchanged."""
        for text in (json.dumps(value), json.dumps(value, indent=2)):
            assert clean(text) == text

    def test_relaxed_config_parses(self, relaxed_config):
        """The cleaned relaxed config is strict JSON."""
        assert json.loads(clean(relaxed_config)) == {
            "name": "api",
            "port": 8080,
            "hosts": ["a", "b"],
            "url": "http://example.com/path",
        }


class TestScanHelpers:
    """Tests for the string-aware search helpers."""

    def test_find_unquoted_skips_strings(self):
        """Occurrences inside string literals are ignored."""
        assert find_unquoted('["NaN", NaN]', "NaN") == 8
        assert find_unquoted('["NaN"]', "NaN") == -1

    @pytest.mark.parametrize("text,expected", [
        ('"plain"', -1),
        ('"\\ud83d\\ude00"', -1),
        ('"\\u00e9"', -1),
        ('"\\ud800"', 1),
        ('"ab\\ud800\\u0041"', 3),
        ('"\\\\ud800"', -1),
    ])
    def test_find_lone_surrogate(self, text, expected):
        """Only surrogates without their partner are reported."""
        assert find_lone_surrogate(text) == expected
