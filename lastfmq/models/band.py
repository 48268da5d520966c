"""Pydantic v2 models for the band record assembled from Last.fm pages.

All models use frozen config (immutable).  Extractors build fresh
instances per page; the query service grows the aggregate
:class:`BandDescription` stage by stage with ``model_copy(update=...)``.

Key relationships:
    - BandDescription optionally carries one Wiki
    - Wiki has ordered Member and Ref lists plus bio paragraphs
    - Every optional field is dropped from JSON when unpopulated
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
    """A band member listed in the wiki factbox."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Member name as shown in the factbox.")
    years_active: str | None = Field(
        default=None,
        description="Trailing '(...)' fragment following the name, e.g. '(1965-1968)'.",
    )


class Ref(BaseModel):
    """A hyperlinked fragment of the wiki biography."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Anchor display text.")
    reference: str = Field(description="Anchor href, usually a relative Last.fm path.")


class Wiki(BaseModel):
    """Members, biography paragraphs and references read from ``/+wiki``.

    The three lists are always present (possibly empty) so consumers can
    iterate without ``None`` checks.
    """

    model_config = ConfigDict(frozen=True)

    members: list[Member] = Field(default_factory=list)
    bio: list[str] = Field(default_factory=list)
    refs: list[Ref] = Field(default_factory=list)


class TagsResult(BaseModel):
    """Both lists recognised on the ``/+tags`` page."""

    model_config = ConfigDict(frozen=True)

    tags: list[str] = Field(default_factory=list, description="Tags in document order.")
    similar_artists: list[str] = Field(
        default_factory=list,
        description="Artists from the 'similar items' sidebar in document order.",
    )


class BandDescription(BaseModel):
    """Aggregate band record.

    Every field is optional: a field stays ``None`` when the stage that
    fills it was not requested or the page did not carry it.  Serialise
    with :meth:`to_json` to drop unpopulated fields.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    band_name: str | None = None
    scrobbles: int | None = None
    listeners: int | None = None
    years_active: str | None = None
    founded_in: str | None = None
    born: str | None = None
    born_in: str | None = None
    wiki: Wiki | None = None
    tags: list[str] | None = None
    similar_artists: list[str] | None = None
    event_years: list[str] | None = Field(default=None, alias="events_years")

    def to_json(self) -> str:
        """Serialise to JSON, omitting unpopulated fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
