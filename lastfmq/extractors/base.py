"""Abstract base class for single-pass page extractors.

An extractor turns the token stream of one fetched page into a typed
partial result.  Implementations keep all working state in locals or in
an explicit state enum created inside :meth:`extract`, so a single
extractor instance can be reused across pages and across tasks without
leaking anything between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from lastfmq.parsing.tokens import TokenStream
from lastfmq.utils.errors import ParseError

_R = TypeVar("_R")


class PageExtractor(ABC, Generic[_R]):
    """Contract for the Overview, Wiki, Tags, SimilarArtists and EventYears scanners."""

    #: Stage name used as the error prefix by :meth:`parse`.
    stage: str = "read_page"

    @abstractmethod
    def extract(self, tokens: TokenStream) -> _R:
        """Consume *tokens* in one forward pass and return the page's result.

        Parameters
        ----------
        tokens:
            A fresh stream positioned at the start of the page.

        Returns
        -------
        _R
            A newly built result; never shared with other calls.

        Raises
        ------
        lastfmq.utils.errors.ParseError
            If the token stream fails.
        """

    def parse(self, markup: str, context: str | None = None) -> _R:
        """Tokenize *markup* and extract it in one pass.

        A tokenizer failure is re-raised prefixed with *context*, or with
        :attr:`stage` when no context is given.
        """
        try:
            return self.extract(TokenStream(markup))
        except ParseError as exc:
            raise exc.with_context(context or self.stage) from exc
