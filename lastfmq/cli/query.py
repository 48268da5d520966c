"""CLI for reading Last.fm band information as JSON.

Usage::

    # Overview only
    python -m lastfmq The Beatles

    # Everything, similar artists read by 4 concurrent workers
    python -m lastfmq --wiki --tags --events --similar-artists --workers 4 Radiohead

    # Ten pages of similar artists, skipping the first two
    lastfmq --similar-artists --similar-artists-pages 10 \\
        --similar-artists-pages-offset 2 --band "Boards of Canada"

The JSON record goes to stdout; logs and errors go to stderr.  Any error
in any stage exits with status 1 and prints nothing on stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

import httpx

from lastfmq.config import load_settings
from lastfmq.config.settings import Settings
from lastfmq.models.query import DEFAULT_PAGES, DEFAULT_REF_FORMAT, QueryOptions, build_query_options
from lastfmq.utils.errors import LastFmQError
from lastfmq.utils.logging import configure_logging


# ---------------------------------------------------------------------------
# Query execution
# ---------------------------------------------------------------------------


async def _run_query(options: QueryOptions, settings: Settings) -> str:
    """Run the band query and return its JSON serialisation."""
    from lastfmq.providers.lastfm.http_fetcher import LastFmHttpFetcher
    from lastfmq.services.band_query_service import BandQueryService
    from lastfmq.services.similar_artists_collector import SimilarArtistsCollector

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        fetcher = LastFmHttpFetcher(http_client=client, settings=settings)
        collector = SimilarArtistsCollector(fetcher, deadline=settings.concurrent_deadline)
        service = BandQueryService(fetcher, collector=collector)
        desc = await service.query(options)

    return desc.to_json()


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the lastfmq CLI."""
    parser = argparse.ArgumentParser(
        prog="lastfmq",
        description="lastfmq - read last.fm band information",
        usage="lastfmq [flags] <band_name>",
    )
    parser.add_argument("words", nargs="*", help="band name (words are joined with spaces)")
    parser.add_argument("--band", default="", help="band name (for convenience)")
    parser.add_argument("--tags", action="store_true", help="read artist tags")
    parser.add_argument(
        "--similar-artists", action="store_true", help="read similar artists"
    )
    parser.add_argument("--wiki", action="store_true", help="read wiki")
    parser.add_argument(
        "--wiki-ref-format",
        default=DEFAULT_REF_FORMAT,
        help="the reference format for the wiki references in text (default: %%q)",
    )
    parser.add_argument("--events", action="store_true", help="read events")
    parser.add_argument(
        "--similar-artists-pages",
        type=int,
        default=DEFAULT_PAGES,
        help=f"number of pages for similar artists (default: {DEFAULT_PAGES})",
    )
    parser.add_argument(
        "--similar-artists-pages-offset",
        type=int,
        default=0,
        help="page offset for similar artists (default: 0)",
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="the number of workers (default: 1)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="log level for stderr output (default: LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="emit logs as JSON lines"
    )
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, run the query, print the result; return the exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    band = args.band or " ".join(args.words)
    if not band.strip():
        print("band name is required", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        settings = load_settings()
        configure_logging(
            args.log_level or settings.log_level,
            json_output=args.json_logs,
            app_env=settings.app_env,
        )
        options = build_query_options(
            band=band,
            wiki=args.wiki,
            tags=args.tags,
            similar_artists=args.similar_artists,
            events=args.events,
            pages=args.similar_artists_pages,
            page_offset=args.similar_artists_pages_offset,
            workers=args.workers,
            ref_format=args.wiki_ref_format,
        )
        output = asyncio.run(_run_query(options, settings))
    except LastFmQError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(output)
    return 0


def main() -> None:
    """CLI entry point for lastfmq."""
    sys.exit(run())


if __name__ == "__main__":
    main()
