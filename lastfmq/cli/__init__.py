"""Command-line entry point for lastfmq.

- ``python -m lastfmq`` / ``lastfmq`` -- read a band's Last.fm pages and
  print the assembled record as JSON (see :mod:`lastfmq.cli.query`).
"""
