"""Immutable per-query options passed explicitly to every stage.

Nothing in lastfmq reads process-wide state: the CLI builds one
:class:`QueryOptions` and hands it to :class:`BandQueryService`, which
forwards the relevant parts to the extractors and the collector.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from lastfmq.utils.errors import ValidationError

DEFAULT_PAGES = 5
DEFAULT_REF_FORMAT = "%q"


class QueryOptions(BaseModel):
    """What to read for one band.

    Attributes
    ----------
    band:
        Band identifier as it appears in Last.fm URLs (spaces allowed).
    wiki, tags, similar_artists, events:
        Optional stages; the overview is always read.
    pages:
        Number of ``/+similar`` listing pages to collect.
    page_offset:
        Pages to skip before collecting (sequential mode).
    workers:
        Worker count for the similar-artists collector; ``1`` is sequential.
    ref_format:
        Template applied to hyperlinked wiki fragments (``%q``, ``%s``, ``%%``).
    """

    model_config = ConfigDict(frozen=True)

    band: str
    wiki: bool = False
    tags: bool = False
    similar_artists: bool = False
    events: bool = False
    pages: int = Field(default=DEFAULT_PAGES, ge=0)
    page_offset: int = Field(default=0, ge=0)
    workers: int = Field(default=1, ge=1)
    ref_format: str = DEFAULT_REF_FORMAT

    @field_validator("band")
    @classmethod
    def _strip_band(cls, value: str) -> str:
        return value.strip()


def build_query_options(**fields: object) -> QueryOptions:
    """Build :class:`QueryOptions`, raising lastfmq's ``ValidationError`` on bad input."""
    try:
        return QueryOptions(**fields)
    except PydanticValidationError as exc:
        raise ValidationError(str(exc), provider_name="query_options") from exc
