"""Allow ``python -m lastfmq`` execution."""

from lastfmq.cli.query import main

main()
