"""Wiki page extractor (``/music/{band}/+wiki``).

Two sections can fire in the same pass:

* **Members** -- the ``<h4 class="factbox-heading">Members</h4>`` block
  inside ``<ul class="factbox">``.  Each non-empty text node is a member
  name, unless it starts with ``(`` in which case it is the years-active
  note of the member just read.
* **Biography** -- everything inside ``<div class="wiki-content">``.
  Text is buffered per paragraph; ``<br>`` appends a newline to the
  previous fragment; anchors become references (first occurrence of a
  display text wins) and are wrapped with the reference template.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lastfmq.extractors.base import PageExtractor
from lastfmq.models.band import Member, Ref, Wiki
from lastfmq.models.query import DEFAULT_REF_FORMAT
from lastfmq.parsing.matcher import TagAttr, match_attrs
from lastfmq.parsing.tokens import Token, TokenKind, TokenStream
from lastfmq.utils.text_normalizer import format_reference, split_paragraphs

_FACTBOX = TagAttr.of("ul", "class", "factbox")
_CONTENT = TagAttr.of("div", "class", "wiki-content")
_FACTBOX_HEADING = TagAttr.of("h4", "class", "factbox-heading")
_LIST_END = TagAttr.of("ul")
_BIO_MARKERS = (TagAttr.of("p"), TagAttr.of("div"), TagAttr.of("br"), TagAttr.of("a"))

_MEMBERS_HEADING = "Members"


class WikiSection(Enum):
    OUTSIDE = "outside"
    FACTBOX = "factbox"
    MEMBERS = "members"
    BIO = "bio"


@dataclass
class _MemberRoster:
    """Members read so far; the last one may still receive its years."""

    names: list[str] = field(default_factory=list)
    years: list[str | None] = field(default_factory=list)

    def add_text(self, text: str) -> None:
        if text.startswith("("):
            # A parenthesised note with no member before it has nowhere to go.
            if self.names:
                self.years[-1] = text
            return
        self.names.append(text)
        self.years.append(None)

    def build(self) -> list[Member]:
        return [Member(name=n, years_active=y) for n, y in zip(self.names, self.years)]


@dataclass
class _BioState:
    """In-flight biography paragraph plus the page's reference ledger."""

    ref_format: str
    paragraphs: list[str] = field(default_factory=list)
    refs: list[Ref] = field(default_factory=list)
    seen_refs: set[str] = field(default_factory=set)
    fragments: list[str] = field(default_factory=list)
    depth: int = 0
    line_break: bool = False
    quoted: bool = False
    href: str = ""

    def flush(self) -> None:
        # Inter-element whitespace alone never makes a paragraph.
        if any(fragment.strip() for fragment in self.fragments):
            self.paragraphs.extend(split_paragraphs(self.fragments))
        self.fragments = []

    def open_anchor(self, token: Token) -> None:
        self.quoted = True
        self.href = token.attr("href") or ""

    def add_text(self, text: str) -> None:
        if self.href and text not in self.seen_refs:
            self.seen_refs.add(text)
            self.refs.append(Ref(name=text, reference=self.href))

        if self.line_break and self.fragments:
            self.fragments[-1] += "\n"

        if self.quoted:
            text = format_reference(self.ref_format, text)

        self.fragments.append(text)
        self.line_break = False
        self.quoted = False
        self.href = ""


class WikiExtractor(PageExtractor[Wiki]):
    """Scan the wiki page into a :class:`Wiki`.

    Parameters
    ----------
    ref_format:
        Template applied to hyperlinked biography fragments.
    """

    stage = "read_wiki"

    def __init__(self, ref_format: str = DEFAULT_REF_FORMAT) -> None:
        self._ref_format = ref_format

    def extract(self, tokens: TokenStream) -> Wiki:
        roster = _MemberRoster()
        bio = _BioState(ref_format=self._ref_format)
        section = WikiSection.OUTSIDE
        resume = WikiSection.OUTSIDE

        for token in tokens:
            if section is WikiSection.BIO:
                if self._bio_token(token, bio):
                    section = resume
                continue

            if section is WikiSection.MEMBERS:
                if token.kind is TokenKind.END and match_attrs(token.tag, (), _LIST_END):
                    section = WikiSection.FACTBOX
                elif token.kind is TokenKind.TEXT and token.text.strip():
                    roster.add_text(token.text.strip())
                continue

            if token.kind is TokenKind.END:
                if section is WikiSection.FACTBOX and match_attrs(token.tag, (), _LIST_END):
                    section = WikiSection.OUTSIDE
                continue

            if token.kind is not TokenKind.START:
                continue

            marker = match_attrs(token.tag, token.attrs, _FACTBOX, _CONTENT, _FACTBOX_HEADING)
            if marker == "factbox":
                section = WikiSection.FACTBOX
            elif marker == "factbox-heading":
                if section is not WikiSection.FACTBOX:
                    continue
                if (tokens.read_text() or "").strip() == _MEMBERS_HEADING:
                    section = WikiSection.MEMBERS
            elif marker == "wiki-content":
                resume = section
                section = WikiSection.BIO
                bio.depth = 1

        # A stream that ends inside the biography still yields its last paragraph.
        bio.flush()
        return Wiki(members=roster.build(), bio=bio.paragraphs, refs=bio.refs)

    @staticmethod
    def _bio_token(token: Token, bio: _BioState) -> bool:
        """Feed one token to the biography state; return ``True`` when it closes."""
        if token.kind is TokenKind.TEXT:
            if token.text:
                bio.add_text(token.text)
            return False

        marker = match_attrs(token.tag, token.attrs, *_BIO_MARKERS)
        if marker == "div":
            if token.kind is TokenKind.START:
                bio.depth += 1
                return False
            bio.depth -= 1
            if bio.depth == 0:
                bio.flush()
                return True
        elif marker == "p":
            if token.kind is TokenKind.END:
                bio.flush()
        elif marker == "br":
            if token.kind is TokenKind.START:
                bio.line_break = True
        elif marker == "a":
            if token.kind is TokenKind.START:
                bio.open_anchor(token)
        return False
