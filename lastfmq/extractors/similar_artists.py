"""Similar-artists listing page extractor (``/music/{band}/+similar?page=N``).

One ``<ol class="similar-artists">`` list; each
``<a class="link-block-target">`` inside it names one artist.

Last.fm answers a request for a page past the end of the listing with a
redirect to the last real page.  The fetch layer reports the page number
that was actually served, and :meth:`SimilarArtistsPageExtractor.extract_page`
returns an empty list when it differs from the one requested -- the only
end-of-listing signal the site gives.
"""

from __future__ import annotations

from lastfmq.extractors.base import PageExtractor
from lastfmq.interfaces.page_fetcher import FetchedPage
from lastfmq.parsing.matcher import TagAttr, match_attrs
from lastfmq.parsing.tokens import TokenKind, TokenStream

_ARTIST_LIST = TagAttr.of("ol", "class", "similar-artists")
_LIST_END = TagAttr.of("ol")
_LINK = TagAttr.of("a", "class", "link-block-target")


def is_overflow(page: FetchedPage, requested: int) -> bool:
    """``True`` when the server served a different page than *requested*."""
    return page.served_page != str(requested)


class SimilarArtistsPageExtractor(PageExtractor[list[str]]):
    """Scan one similar-artists listing page into an ordered name list."""

    stage = "read_similar_artists"

    def extract(self, tokens: TokenStream) -> list[str]:
        artists: list[str] = []
        in_list = False

        for token in tokens:
            if token.kind is TokenKind.END:
                if in_list and match_attrs(token.tag, (), _LIST_END):
                    # Only one artist list per page.
                    break
                continue

            if token.kind is not TokenKind.START:
                continue

            if not in_list:
                in_list = bool(match_attrs(token.tag, token.attrs, _ARTIST_LIST))
            elif match_attrs(token.tag, token.attrs, _LINK):
                text = tokens.read_text()
                if text is not None and text.strip():
                    artists.append(text.strip())

        return artists

    def extract_page(self, page: FetchedPage, requested: int) -> list[str]:
        """Extract *page*, or return ``[]`` if it overflowed past the listing."""
        if is_overflow(page, requested):
            return []
        return self.parse(page.text, context=f"{self.stage}: page {requested}")
