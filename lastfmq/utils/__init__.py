"""Utility modules for lastfmq.

Available utility modules (all re-exported here for convenience):

- **errors** -- Domain-specific exception hierarchy rooted at LastFmQError;
  each failure kind (validation, not-found, status, transport, parse) has
  its own subclass so the CLI can report it without broad ``except``.
- **concurrency** -- a claim-next page counter and a gather helper that
  never cancels siblings, used by the concurrent similar-artists collector.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **text_normalizer** -- grouped-integer parsing, ``%q`` reference quoting
  and paragraph splitting for the page extractors.
"""

# -- Async concurrency helpers ---------------------------------------------
from lastfmq.utils.concurrency import PageCounter, run_to_completion

# -- Domain exception hierarchy --------------------------------------------
from lastfmq.utils.errors import (
    ConfigurationError,
    LastFmQError,
    NotFoundError,
    ParseError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)

# -- Structured logging setup ----------------------------------------------
from lastfmq.utils.logging import configure_logging, get_logger

# -- Text normalization ----------------------------------------------------
from lastfmq.utils.text_normalizer import format_reference, parse_grouped_int, split_paragraphs

__all__ = [
    "ConfigurationError",
    "LastFmQError",
    "NotFoundError",
    "PageCounter",
    "ParseError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
    "configure_logging",
    "format_reference",
    "get_logger",
    "parse_grouped_int",
    "run_to_completion",
    "split_paragraphs",
]
