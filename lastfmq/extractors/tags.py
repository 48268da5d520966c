"""Tags page extractor (``/music/{band}/+tags``).

The page carries two ordered lists of ``<a class="link-block-target">``
links: the tag cloud (``<ol class="big-tags">``) and the similar-artists
sidebar (``<ol class="similar-items-sidebar">``).  Once both have
closed, the rest of the page is irrelevant and the scan stops.
"""

from __future__ import annotations

from enum import Enum

from lastfmq.extractors.base import PageExtractor
from lastfmq.models.band import TagsResult
from lastfmq.parsing.matcher import TagAttr, match_attrs
from lastfmq.parsing.tokens import TokenKind, TokenStream

_TARGET_LISTS = TagAttr.of("ol", "class", "big-tags", "similar-items-sidebar")
_LIST_END = TagAttr.of("ol")
_LINK = TagAttr.of("a", "class", "link-block-target")


class TagsList(Enum):
    TAGS = "big-tags"
    SIDEBAR = "similar-items-sidebar"


class TagsExtractor(PageExtractor[TagsResult]):
    """Scan the tags page into a :class:`TagsResult`."""

    stage = "read_tags"

    def extract(self, tokens: TokenStream) -> TagsResult:
        items: dict[TagsList, list[str]] = {TagsList.TAGS: [], TagsList.SIDEBAR: []}
        active: TagsList | None = None
        closed: set[TagsList] = set()

        for token in tokens:
            if token.kind is TokenKind.END:
                if active is not None and match_attrs(token.tag, (), _LIST_END):
                    closed.add(active)
                    active = None
                    # A repeated list of one kind must not end the scan early.
                    if len(closed) == len(TagsList):
                        break
                continue

            if token.kind is not TokenKind.START:
                continue

            if active is None:
                marker = match_attrs(token.tag, token.attrs, _TARGET_LISTS)
                if marker:
                    active = TagsList(marker)
            elif match_attrs(token.tag, token.attrs, _LINK):
                text = tokens.read_text()
                if text is not None and text.strip():
                    items[active].append(text.strip())

        return TagsResult(tags=items[TagsList.TAGS], similar_artists=items[TagsList.SIDEBAR])
