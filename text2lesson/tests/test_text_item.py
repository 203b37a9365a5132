# text2lesson/tests/test_text_item.py
"""Tests for the text substitution engine."""

import re

import pytest

from text2lesson.errors import PrivateConstructorError, unescape_attribute
from text2lesson.metadata import Metadata
from text2lesson.text_item import (
    ITEM_REPLACERS,
    ReplacementTracker,
    TextItem,
    decode_missing_word,
    get_item_pattern,
    make_class_safe,
    resolve,
)


def _missing_word_attributes(html: str) -> list[str]:
    return re.findall(r'data-missing-word="([^"]*)"', html)


class TestMissingWords:
    """Test blanks with and without words."""

    def test_filled_blank(self):
        """...word should give one blank carrying the word."""
        item = TextItem.create_from_source("The capital of France is ...Paris.")
        assert item.missing_words == ["Paris"]
        assert 'class="missing-word"' in item.html
        attributes = _missing_word_attributes(item.html)
        assert len(attributes) == 1
        assert decode_missing_word(attributes[0]) == "Paris"
        assert "...Paris" not in item.html

    def test_trailing_bare_blank(self):
        """A trailing 123 should give a blank without a word."""
        item = TextItem.create_from_source("Put the words in order 123")
        assert item.missing_words == [None]
        assert _missing_word_attributes(item.html) == [""]
        assert "123" not in item.html

    def test_bare_blank_must_end_the_line(self):
        """123 in the middle of a line is just text."""
        item = TextItem.create_from_source("There are 123 apples")
        assert item.missing_words == []
        assert "123" in item.html

    @pytest.mark.parametrize(
        "source, tag",
        [
            ("1. one 123", "li"),
            ("- one 123", "li"),
            ("# Title 123", "h1"),
            ("> quote 123", "blockquote"),
        ],
    )
    def test_trailing_bare_blank_inside_block(self, source, tag):
        """A trailing 123 should be a blank inside lists, headings and quotes too."""
        item = TextItem.create_from_source(source)
        assert item.missing_words == [None]
        assert f'data-missing-word=""></span></{tag}>' in item.html

    def test_blanks_keep_document_order(self):
        """Filled and bare blanks should be recorded left to right."""
        item = TextItem.create_from_source("...one then 123\nand ...two")
        assert item.missing_words == ["one", None, "two"]

    def test_multiple_blanks(self):
        item = TextItem.create_from_source("...Red and ...blue, then ...green!")
        assert item.missing_words == ["Red", "blue", "green"]

    def test_bare_ellipsis_is_not_a_blank(self):
        """... with no word is left alone."""
        item = TextItem.create_from_source("Wait ... for it")
        assert item.missing_words == []
        assert "..." in item.html

    def test_ellipsis_inside_word_is_not_a_blank(self):
        item = TextItem.create_from_source("and so on...etc")
        assert item.missing_words == []

    def test_blank_with_class(self):
        """A safe class should be added to the blank."""
        item = TextItem.create_from_source("Answer: ...Paris>column")
        assert 'class="missing-word column"' in item.html
        assert item.missing_words == ["Paris"]

    def test_blank_with_unsafe_class(self):
        item = TextItem.create_from_source("Answer: ...Paris>evil")
        assert 'class="missing-word"' in item.html
        assert "evil" not in item.html

    def test_escaped_greater_than_in_word(self):
        """\\> should allow a literal > in a blank's word."""
        item = TextItem.create_from_source("Compare ...a\\>b")
        assert item.missing_words == ["a&gt;b"]

    def test_missing_words_is_a_copy(self):
        item = TextItem.create_from_source("...word")
        item.missing_words.append("other")
        assert item.missing_words == ["word"]


class TestItemTokens:
    """Test emoji, meta, icon, text and class tokens."""

    def test_emoji(self):
        item = TextItem.create_from_source("Well done emoji:smiley")
        assert '<span class="emoji">&#x1F600;</span>' in item.html

    def test_emoji_with_class(self):
        item = TextItem.create_from_source("emoji:smiley>big!")
        assert '<span class="emoji big">&#x1F600;</span>!' in item.html

    def test_emoji_with_unsafe_class(self):
        item = TextItem.create_from_source("emoji:smiley>evil")
        assert '<span class="emoji">&#x1F600;</span>' in item.html

    def test_meta(self):
        """meta:KEY should insert the escaped value without escaping it again."""
        metadata = Metadata.create_from_source("AUTHOR: A & B")
        item = TextItem.create_from_source("Written by meta:author.", metadata)
        assert "Written by A &amp; B." in item.html
        assert "&amp;amp;" not in item.html

    def test_meta_empty_value(self):
        metadata = Metadata.create_from_source("SUBTITLE:")
        item = TextItem.create_from_source("Before meta:subtitle after", metadata)
        assert "Before  after" in item.html
        assert "data-error" not in item.html

    def test_missing_meta(self, caplog):
        """An unknown key should be shown with a decodable error attribute."""
        metadata = Metadata.create_from_source("AUTHOR: Me")
        item = TextItem.create_from_source("By meta:MISSING_KEY", metadata)
        assert ">MISSING_KEY</span>" in item.html
        encoded = re.search(r'data-error="([^"]*)"', item.html).group(1)
        assert "MISSING_KEY" in unescape_attribute(encoded)
        assert "Cannot find metadata MISSING_KEY" in caplog.text

    def test_meta_without_metadata(self):
        item = TextItem.create_from_source("meta:title")
        assert "data-error" in item.html
        assert ">title</span>" in item.html

    def test_icon(self):
        item = TextItem.create_from_source("Press icon:check to continue")
        assert '<i class="fa-solid fa-check"></i>' in item.html

    def test_icon_with_class(self):
        item = TextItem.create_from_source("icon:check>big")
        assert '<i class="fa-solid fa-check big"></i>' in item.html

    def test_text(self):
        item = TextItem.create_from_source("Say text:hello>bigger now")
        assert '<span class="bigger">hello</span>' in item.html
        item = TextItem.create_from_source("Say text:hello now")
        assert "<span>hello</span>" in item.html

    def test_class_brackets(self):
        item = TextItem.create_from_source("A {big}large{big} word")
        assert '<span class="big">large</span>' in item.html

    def test_unknown_class_brackets_left_alone(self):
        item = TextItem.create_from_source("A {evil}x{evil} word")
        assert "{evil}x{evil}" in item.html

    def test_token_must_start_at_boundary(self):
        """Tokens inside words are not replaced."""
        item = TextItem.create_from_source("xemoji:smiley")
        assert "xemoji:smiley" in item.html

    def test_raw_html_still_escaped(self):
        item = TextItem.create_from_source("<b>bold</b> emoji:smiley")
        assert "&lt;b>" in item.html


class TestTextItem:
    """Test TextItem construction and derived text."""

    def test_private_constructor(self):
        with pytest.raises(PrivateConstructorError):
            TextItem("<p>x</p>")

    def test_empty(self):
        item = TextItem.create_from_source("")
        assert item.html == ""
        assert item.missing_words == []
        assert item.plain_text == ""
        assert item.first_word == ""
        assert not item

    def test_plain_text(self):
        """Blanks should become ... and tags removed."""
        item = TextItem.create_from_source("Capital **...Paris** is big")
        assert item.plain_text == "Capital ... is big"

    def test_first_word(self):
        item = TextItem.create_from_source("**Bold** word")
        assert item.first_word == "Bold"

    def test_metadata_is_shared(self):
        metadata = Metadata.create_from_source("A: 1")
        assert TextItem.create_from_source("x", metadata).metadata is metadata

    def test_resolve(self):
        assert resolve("...word").missing_words == ["word"]


class TestReplacers:
    """Test the replacement chain in isolation."""

    def test_item_pattern_groups(self):
        match = get_item_pattern("emoji:").search("say emoji:wink>big.")
        assert match.groups() == (" ", "wink", "big")

    def test_item_pattern_without_word(self):
        match = get_item_pattern("text:").search("text:")
        assert match.groups() == ("", None, None)

    def test_chain_tracks_missing_words(self):
        """Each rule can be applied on its own with an explicit tracker."""
        tracker = ReplacementTracker()
        html = "<p>...one and 123</p>"
        for rule in ITEM_REPLACERS:
            html = rule.apply(html, tracker)
        assert tracker.missing_words == ["one", None]

    @pytest.mark.parametrize(
        "requested,expected",
        [("big", "big"), ("BIG", "big"), ("column", "column"), ("evil", ""), (None, ""), ("", "")],
    )
    def test_make_class_safe(self, requested, expected):
        assert make_class_safe(requested) == expected
