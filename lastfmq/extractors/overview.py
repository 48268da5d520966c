"""Overview page extractor (``/music/{band}``).

Reads the band display name, the scrobble and listener statistics from
the page header, and the "Years Active" / "Founded In" / "Born" /
"Born In" facts from the catalogue metadata definition list.
"""

from __future__ import annotations

from enum import Enum

from lastfmq.extractors.base import PageExtractor
from lastfmq.models.band import BandDescription
from lastfmq.parsing.matcher import WILDCARD, TagAttr, match_attrs
from lastfmq.parsing.tokens import TokenKind, TokenStream
from lastfmq.utils.text_normalizer import parse_grouped_int

_METADATA_LIST = TagAttr.of("dl", "class", "catalogue-metadata")
_TITLE = TagAttr.of("h1", "class", "header-new-title")
_STAT_LABEL = TagAttr.of("h4", "class", "header-metadata-tnew-title")
_STAT_VALUE = TagAttr.of("abbr", "title", WILDCARD)
_TERM = TagAttr.of("dt")
_DESCRIPTION = TagAttr.of("dd")
_LIST_END = TagAttr.of("dl")

# Definition-term label -> BandDescription field.
_METADATA_FIELDS: dict[str, str] = {
    "Years Active": "years_active",
    "Founded In": "founded_in",
    "Born": "born",
    "Born In": "born_in",
}

# Header statistic label -> BandDescription field.
_STAT_FIELDS: dict[str, str] = {
    "Scrobbles": "scrobbles",
    "Listeners": "listeners",
}


class OverviewState(Enum):
    IDLE = "idle"
    IN_METADATA = "in_metadata"


class OverviewExtractor(PageExtractor[BandDescription]):
    """Scan the overview page into a :class:`BandDescription`."""

    stage = "read_overview"

    def extract(self, tokens: TokenStream) -> BandDescription:
        fields: dict[str, object] = {}
        state = OverviewState.IDLE
        term = ""
        stat_label = ""

        for token in tokens:
            if token.kind is TokenKind.END:
                if state is OverviewState.IN_METADATA and match_attrs(token.tag, (), _LIST_END):
                    state = OverviewState.IDLE
                continue

            if token.kind is not TokenKind.START:
                continue

            if state is OverviewState.IN_METADATA:
                marker = match_attrs(token.tag, token.attrs, _TERM, _DESCRIPTION)
                if marker == "dt":
                    text = tokens.read_text()
                    if text is not None:
                        term = text.strip()
                elif marker == "dd":
                    text = tokens.read_text()
                    field = _METADATA_FIELDS.get(term)
                    if text is not None and field:
                        fields[field] = text.strip()
                continue

            marker = match_attrs(token.tag, token.attrs, _METADATA_LIST, _TITLE, _STAT_LABEL)
            if marker == "catalogue-metadata":
                state = OverviewState.IN_METADATA
            elif marker == "header-new-title":
                text = tokens.read_text()
                if text is not None:
                    fields["band_name"] = text.strip()
            elif marker == "header-metadata-tnew-title":
                text = tokens.read_text()
                if text is not None:
                    stat_label = text.strip()
            else:
                value = match_attrs(token.tag, token.attrs, _STAT_VALUE)
                field = _STAT_FIELDS.get(stat_label)
                if value and field:
                    fields[field] = parse_grouped_int(value)

        return BandDescription(**fields)
