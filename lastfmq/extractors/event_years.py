"""Events page extractor (``/music/{band}/+events``).

Reads the year links of the ``<nav aria-label="Event Year Navigation">``
bar, in the order the site lists them.
"""

from __future__ import annotations

from lastfmq.extractors.base import PageExtractor
from lastfmq.parsing.matcher import TagAttr, match_attrs
from lastfmq.parsing.tokens import TokenKind, TokenStream

_YEAR_NAV = TagAttr.of("nav", "aria-label", "Event Year Navigation")
_NAV_END = TagAttr.of("nav")
_YEAR_LINK = TagAttr.of("a", "class", "secondary-nav-item-link")


class EventYearsExtractor(PageExtractor[list[str]]):
    """Scan the events page into an ordered list of year labels."""

    stage = "read_event_years"

    def extract(self, tokens: TokenStream) -> list[str]:
        years: list[str] = []
        in_nav = False

        for token in tokens:
            if token.kind is TokenKind.END:
                if in_nav and match_attrs(token.tag, (), _NAV_END):
                    break
                continue

            if token.kind is not TokenKind.START:
                continue

            if not in_nav:
                in_nav = bool(match_attrs(token.tag, token.attrs, _YEAR_NAV))
            elif match_attrs(token.tag, token.attrs, _YEAR_LINK):
                text = (tokens.read_text() or "").strip()
                if text:
                    years.append(text)

        return years
