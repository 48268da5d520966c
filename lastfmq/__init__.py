"""lastfmq -- read Last.fm band information from the rendered website.

Single-pass extractors turn each page's markup token stream into typed
fields; a paginated collector reads the similar-artists listing either
sequentially or with a bounded asyncio worker pool.
"""

__version__ = "0.1.0"
