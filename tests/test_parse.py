"""Tests for pulling the JSON array out of raw model text (services/parse.py)."""
import json

import pytest
from factories import make_items

from certiai.errors import ExtractionError
from certiai.services.parse import extract_candidates


class TestExtractCandidates:
    def test_plain_array(self):
        items = make_items(5)
        assert extract_candidates(json.dumps(items)) == items

    def test_surrounding_prose(self):
        items = make_items(5)
        raw = "Sure! Here you go: " + json.dumps(items) + " Hope that helps!"
        assert extract_candidates(raw) == items

    def test_markdown_fence(self):
        items = make_items(2)
        raw = "```json\n" + json.dumps(items, indent=2) + "\n```"
        assert extract_candidates(raw) == items

    def test_brackets_inside_strings_kept(self):
        items = [{"question": "What does [1, 2][0] return?", "options": ["1", "2", "[]", "undefined"]}]
        assert extract_candidates("x " + json.dumps(items) + " y") == items

    @pytest.mark.parametrize("raw", [
        "",
        None,
        "I cannot help with that.",
        '{"question": "no array here"}',
        "] backwards [",
    ])
    def test_no_bracket_span(self, raw):
        with pytest.raises(ExtractionError):
            extract_candidates(raw)

    def test_truncated_json(self):
        raw = json.dumps(make_items(5))[:-40] + "]"
        with pytest.raises(ExtractionError):
            extract_candidates(raw)

    def test_two_arrays_greedy_span_fails(self):
        with pytest.raises(ExtractionError):
            extract_candidates("first [1, 2] then [3]")

    def test_deep_nesting_is_extraction_error(self):
        with pytest.raises(ExtractionError):
            extract_candidates("Here: " + "[" * 100_000 + "]" * 100_000)

    def test_oversized_int_literal_is_extraction_error(self):
        with pytest.raises(ExtractionError):
            extract_candidates("[" + "1" * 5000 + "]")

    def test_items_not_validated_here(self):
        assert extract_candidates("[1, \"two\", null]") == [1, "two", None]
