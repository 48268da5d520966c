"""Concrete adapters for the interfaces in ``lastfmq.interfaces``."""
