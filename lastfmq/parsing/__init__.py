"""Markup tokenization and rule matching used by the page extractors."""

from lastfmq.parsing.matcher import TagAttr, match_attrs
from lastfmq.parsing.tokens import Token, TokenKind, TokenStream

__all__ = ["TagAttr", "Token", "TokenKind", "TokenStream", "match_attrs"]
