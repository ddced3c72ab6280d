"""Tests for the streaming maven-metadata.xml version extractor."""
from pathlib import Path

import pytest

from versioning.errors import MetadataParseError
from versioning.metadata import (
    ElementTreeTokenSource,
    MetadataParser,
    Token,
    TokenKind,
    TokenSource,
    extract_versions,
    parse_versions,
)

FIXTURE = Path(__file__).parent / "fixtures" / "maven-metadata.xml"


class ListTokenSource(TokenSource):
    """Token source replaying a fixed token list, optionally failing at the end."""

    def __init__(self, tokens, error=None):
        self._tokens = tokens
        self._error = error
        self.consumed = 0

    def tokens(self):
        for token in self._tokens:
            self.consumed += 1
            yield token
        if self._error is not None:
            raise self._error


def _version_element(text, kind=TokenKind.TEXT):
    return [
        Token(TokenKind.ELEMENT_START, "version"),
        Token(TokenKind.ELEMENT_END_OPEN, "version"),
        Token(kind, text),
        Token(TokenKind.ELEMENT_END_CLOSE, "version"),
    ]


class TestEmptyDocuments:
    """Documents that contain no version text."""

    def test_empty_string(self):
        assert parse_versions("") == []

    def test_blank_string(self):
        assert parse_versions("  \n ") == []

    def test_unrelated_tag(self):
        assert parse_versions("<metadata></metadata>") == []

    def test_versions_without_version(self):
        assert parse_versions("<versions></versions>") == []

    def test_version_without_versions(self):
        assert parse_versions("<version></version>") == []

    def test_version_without_content(self):
        """An element without text emits nothing."""
        assert parse_versions("<versions><version></version></versions>") == []

    def test_self_closing_version(self):
        assert parse_versions("<versions><version/></versions>") == []


class TestMinimalDocuments:
    """Single and few element documents."""

    def test_plain_version(self):
        assert parse_versions("<versions><version>1.0.0</version></versions>") == ["1.0.0"]

    def test_whitespace_is_trimmed(self):
        assert parse_versions("<versions><version>   1.0.0   </version></versions>") == ["1.0.0"]

    def test_whitespace_only_yields_empty_string(self):
        assert parse_versions("<versions><version>   </version></versions>") == [""]

    def test_cdata(self):
        assert parse_versions("<versions><version><![CDATA[1.0.0]]></version></versions>") == ["1.0.0"]

    def test_cdata_with_whitespace(self):
        doc = "<versions><version><![CDATA[   1.0.0    ]]></version></versions>"
        assert parse_versions(doc) == ["1.0.0"]

    def test_text_and_cdata_mixed(self):
        doc = "<versions><version>  1.0.0  </version><version><![CDATA[ 2.0.0 ]]></version></versions>"
        assert parse_versions(doc) == ["1.0.0", "2.0.0"]

    def test_accepts_anything(self):
        assert parse_versions("<versions><version>foo</version></versions>") == ["foo"]

    def test_unicode_whitespace_is_trimmed(self):
        doc = "<versions><version>\u00a0 1.0.0\u2003</version></versions>"
        assert parse_versions(doc) == ["1.0.0"]

    def test_attributes_and_namespaces_are_ignored(self):
        doc = (
            '<m:metadata xmlns:m="urn:example" xmlns="urn:default">'
            '<versions kind="all"><version id="1">1.0.0</version>'
            '<m:version>2.0.0</m:version></versions></m:metadata>'
        )
        assert parse_versions(doc) == ["1.0.0", "2.0.0"]

    def test_comments_are_ignored(self):
        doc = "<versions><!-- first --><version>1.0.0</version><!-- x --><version>1.1.0</version></versions>"
        assert parse_versions(doc) == ["1.0.0", "1.1.0"]

    def test_stops_at_end_of_enclosing_collection(self):
        doc = (
            "<metadata><versions><version>1.0.0</version></versions>"
            "<other><version>9.9.9</version></other></metadata>"
        )
        assert parse_versions(doc) == ["1.0.0"]


class TestFullDocument:
    """A complete maven-metadata.xml."""

    def test_full_xml(self):
        versions = parse_versions(FIXTURE.read_text(encoding="utf-8"))
        assert versions[:3] == ["0.9.2", "0.9.3", "1.0.0"]
        assert versions[-1] == "1.4.0-alpha02"
        assert len(versions) == 22
        assert "20200827153717" not in versions

    def test_small_chunks_give_same_result(self):
        document = FIXTURE.read_text(encoding="utf-8")
        chunked = list(MetadataParser(ElementTreeTokenSource(document, chunk_size=7)))
        assert chunked == parse_versions(document)

    def test_extraction_is_lazy(self):
        parser = extract_versions(FIXTURE.read_text(encoding="utf-8"))
        assert next(parser) == "0.9.2"
        assert next(parser) == "0.9.3"


class TestMalformedDocuments:
    """Structural errors surface as MetadataParseError."""

    def test_unterminated_tag(self):
        with pytest.raises(MetadataParseError):
            parse_versions("<versions><version>1.0.0</version")

    def test_mismatched_tag(self):
        with pytest.raises(MetadataParseError):
            parse_versions("<versions><version>1.0.0</versions>")

    def test_unclosed_document(self):
        with pytest.raises(MetadataParseError):
            parse_versions("<metadata><versions><version>1.0.0</version>")

    def test_versions_before_error_remain_valid(self):
        parser = extract_versions("<metadata><versions><version>1.0.0</version><version>2.0.0</verson>")
        assert next(parser) == "1.0.0"
        with pytest.raises(MetadataParseError):
            next(parser)
        with pytest.raises(StopIteration):
            next(parser)

    def test_garbage_after_collection_is_not_read(self):
        """Extraction finishes at the collection end, before the broken tail."""
        doc = "<metadata><versions><version>1.0.0</version></versions><broken"
        assert parse_versions(doc) == ["1.0.0"]


class TestStateMachine:
    """Drive the parser with hand-written token streams."""

    def test_cdata_tokens(self):
        source = ListTokenSource(_version_element(" 1.0.0 ", TokenKind.CDATA))
        assert list(MetadataParser(source)) == ["1.0.0"]

    def test_unrelated_tokens_before_first_version_are_ignored(self):
        tokens = [
            Token(TokenKind.ELEMENT_START, "metadata"),
            Token(TokenKind.ELEMENT_END_OPEN, "metadata"),
            Token(TokenKind.TEXT, "noise"),
            Token(TokenKind.ELEMENT_END_CLOSE, "groupId"),
        ] + _version_element("1.0.0")
        assert list(MetadataParser(ListTokenSource(tokens))) == ["1.0.0"]

    def test_stops_consuming_after_collection_end(self):
        tokens = (
            _version_element("1.0.0")
            + [Token(TokenKind.ELEMENT_END_CLOSE, "versions")]
            + _version_element("2.0.0")
        )
        source = ListTokenSource(tokens)
        assert list(MetadataParser(source)) == ["1.0.0"]
        assert source.consumed == 5

    def test_error_aborts_sequence(self):
        source = ListTokenSource(_version_element("1.0.0"), error=MetadataParseError("boom"))
        parser = MetadataParser(source)
        assert next(parser) == "1.0.0"
        with pytest.raises(MetadataParseError):
            next(parser)
        assert list(parser) == []

    def test_not_restartable(self):
        parser = MetadataParser(ListTokenSource(_version_element("1.0.0")))
        assert list(parser) == ["1.0.0"]
        assert list(parser) == []
