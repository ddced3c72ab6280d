"""Streaming extraction of ``<version>`` texts from maven-metadata.xml.

The extractor never builds a document tree. It walks a flat token stream and
reacts only to the tokens that matter for the element it currently expects,
so unrelated siblings, attributes and nesting are skipped without bookkeeping::

    <metadata>
      <versioning>
        <versions>
          <version>1.0.0</version>
          <version><![CDATA[1.1.0]]></version>
        </versions>
      </versioning>
    </metadata>

Extraction stops at the closing tag of the collection that holds the versions.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from .errors import MetadataParseError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Lexical token kinds the extractor understands."""
    ELEMENT_START = "element_start"          # <name
    ELEMENT_END_OPEN = "element_end_open"    # >
    TEXT = "text"
    CDATA = "cdata"
    ELEMENT_END_CLOSE = "element_end_close"  # </name>


@dataclass(frozen=True)
class Token:
    """A lexical token; ``value`` is the local name or the text payload."""
    kind: TokenKind
    value: str = ""


class TokenSource(ABC):
    """Anything that can produce the token stream of one document."""

    @abstractmethod
    def tokens(self) -> Iterator[Token]:
        """Yield tokens in document order.

        Raises:
            MetadataParseError: when the document is not well-formed.
        """


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class ElementTreeTokenSource(TokenSource):
    """Token source backed by ``xml.etree.ElementTree.XMLPullParser``.

    The document is fed in chunks and finished elements are cleared right away,
    so memory does not grow with the number of versions. Expat reports CDATA
    sections as character data, so their payloads arrive as ``TEXT`` tokens.
    """

    def __init__(self, document: str, chunk_size: int = Constants.XML_FEED_CHUNK_SIZE):
        self.document = document
        self.chunk_size = max(1, chunk_size)

    def tokens(self) -> Iterator[Token]:
        if not self.document.strip():
            return
        parser = ET.XMLPullParser(events=("start", "end"))
        try:
            for offset in range(0, len(self.document), self.chunk_size):
                parser.feed(self.document[offset:offset + self.chunk_size])
                yield from self._drain(parser)
            parser.close()
            yield from self._drain(parser)
        except ET.ParseError as exc:
            raise MetadataParseError(str(exc), getattr(exc, "position", None)) from exc

    @staticmethod
    def _drain(parser: ET.XMLPullParser) -> Iterator[Token]:
        for event, elem in parser.read_events():
            name = _local_name(elem.tag)
            if event == "start":
                yield Token(TokenKind.ELEMENT_START, name)
                yield Token(TokenKind.ELEMENT_END_OPEN, name)
            else:
                if elem.text is not None:
                    yield Token(TokenKind.TEXT, elem.text)
                yield Token(TokenKind.ELEMENT_END_CLOSE, name)
                elem.clear()


class _State(Enum):
    EXPECT_FIRST_VERSION_START = 1
    EXPECT_VERSION_END = 2
    EXPECT_VERSION = 3
    EXPECT_NEXT_VERSION_START = 4
    END_OF_INPUT = 5


class MetadataParser:
    """Iterator over the trimmed texts of all ``<version>`` elements.

    Not restartable: create a new parser for every document. A structural
    error is raised once and ends the iteration; versions already returned
    stay valid.
    """

    def __init__(self, source: TokenSource):
        self._tokens = iter(source.tokens())
        self._state = _State.EXPECT_FIRST_VERSION_START

    def __iter__(self) -> "MetadataParser":
        return self

    def __next__(self) -> str:
        if self._state is _State.END_OF_INPUT:
            raise StopIteration
        try:
            for token in self._tokens:
                text = self._advance(token)
                if text is not None:
                    return text
                if self._state is _State.END_OF_INPUT:
                    break
        except MetadataParseError:
            self._state = _State.END_OF_INPUT
            raise
        self._state = _State.END_OF_INPUT
        raise StopIteration

    def _advance(self, token: Token):
        """Apply one token to the state machine, returning a version text if complete."""
        kind = token.kind
        state = self._state
        if state is _State.EXPECT_FIRST_VERSION_START:
            if kind is TokenKind.ELEMENT_START and token.value == Constants.VERSION_TAG:
                self._state = _State.EXPECT_VERSION_END
        elif state is _State.EXPECT_NEXT_VERSION_START:
            if kind is TokenKind.ELEMENT_START and token.value == Constants.VERSION_TAG:
                self._state = _State.EXPECT_VERSION_END
            elif kind is TokenKind.ELEMENT_END_CLOSE:
                self._state = _State.END_OF_INPUT
        elif state is _State.EXPECT_VERSION_END:
            if kind is TokenKind.ELEMENT_END_OPEN:
                self._state = _State.EXPECT_VERSION
        elif state is _State.EXPECT_VERSION:
            if kind in (TokenKind.TEXT, TokenKind.CDATA):
                return token.value.strip()
            if kind is TokenKind.ELEMENT_END_CLOSE:
                self._state = _State.EXPECT_NEXT_VERSION_START
        return None


def extract_versions(document: str) -> MetadataParser:
    """Lazily extract version texts from a metadata document."""
    return MetadataParser(ElementTreeTokenSource(document))


def parse_versions(document: str) -> List[str]:
    """Extract all version texts from a metadata document.

    Raises:
        MetadataParseError: when the document is not well-formed.
    """
    versions = list(extract_versions(document))
    if is_debug_enabled(logger):
        logger.debug(
            "Extracted versions from metadata",
            extra=extra_context(
                event="parse",
                component="metadata",
                action="parse_versions",
                outcome="success",
                count=len(versions)
            )
        )
    return versions
