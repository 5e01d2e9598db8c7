"""Unit tests for marketable-quote highlighting."""

from src.services.report.highlight import (
    find_highlight_spans,
    highlight_html,
    highlight_segments,
)


class TestHighlightSegments:
    def test_no_quotes_leaves_text_unchanged(self):
        text = "It was the best decision we ever made."

        assert highlight_segments(text, []) == [(text, False)]
        assert highlight_segments(text, None) == [(text, False)]

    def test_case_insensitive_match(self):
        segments = highlight_segments(
            "Honestly, it was the BEST decision we ever made.",
            ["best decision we ever made"],
        )

        assert segments == [
            ("Honestly, it was the ", False),
            ("BEST decision we ever made", True),
            (".", False),
        ]

    def test_every_occurrence_marked(self):
        segments = highlight_segments("Great service. great people.", ["great"])

        assert [chunk for chunk, marked in segments if marked] == ["Great", "great"]

    def test_overlapping_quotes_merged(self):
        text = "the support team was amazing"

        segments = highlight_segments(text, ["support team", "team was amazing"])

        assert segments == [("the ", False), ("support team was amazing", True)]

    def test_nested_quote_inside_longer_quote(self):
        segments = highlight_segments("truly reliable machines", ["reliable", "truly reliable machines"])

        assert segments == [("truly reliable machines", True)]

    def test_regex_characters_matched_literally(self):
        segments = highlight_segments("Price (really) good? Yes.", ["(really) good?"])

        assert segments[1] == ("(really) good?", True)

    def test_blank_quotes_ignored(self):
        assert highlight_segments("abc", ["", "   "]) == [("abc", False)]

    def test_no_match(self):
        assert highlight_segments("abc", ["xyz"]) == [("abc", False)]

    def test_segments_rebuild_text(self):
        text = "aaa bb aaa"

        assert "".join(chunk for chunk, _ in highlight_segments(text, ["aa", "b"])) == text


class TestFindHighlightSpans:
    def test_self_overlapping_repeat(self):
        assert find_highlight_spans("aaaa", ["aa"]) == [(0, 4)]

    def test_adjacent_spans_merged(self):
        assert find_highlight_spans("abcd", ["ab", "cd"]) == [(0, 4)]

    def test_quote_whitespace_kept(self):
        assert find_highlight_spans("the best deal", [" best "]) == [(3, 9)]

    def test_quote_with_outer_whitespace_needs_it_in_text(self):
        assert find_highlight_spans("best deal", [" best"]) == []


class TestHighlightHtml:
    def test_wraps_matches_in_mark(self):
        assert highlight_html("We love it", ["love"]) == "We <mark>love</mark> it"

    def test_escapes_html(self):
        assert highlight_html("<b>great</b> & more", ["great"]) == (
            "&lt;b&gt;<mark>great</mark>&lt;/b&gt; &amp; more"
        )

    def test_escapes_markdown(self):
        assert highlight_html("We paid $500 and saved $200 on *every* unit_price", []) == (
            r"We paid \$500 and saved \$200 on \*every\* unit\_price"
        )

    def test_escapes_markdown_inside_mark(self):
        assert highlight_html("Save $5 now", ["$5"]) == r"Save <mark>\$5</mark> now"

    def test_apostrophes_left_as_text(self):
        assert highlight_html("It's #1", []) == r"It's \#1"
