"""Forward-only markup token stream.

Wraps the standard-library ``html.parser.HTMLParser`` (the same backend
BeautifulSoup is handed as ``"html.parser"``) so that a page is exposed as
a lazy sequence of :class:`Token` events instead of a tree:

    START  -- a tag opened; ``tag`` and re-iterable ``attrs`` are set
    END    -- a tag closed; ``tag`` is set
    TEXT   -- character data between tags, with entities decoded

The body is fed to the parser in fixed-size chunks only as the consumer
pulls tokens, so an extractor that stops early never tokenizes the rest
of the page.  Adjacent character data is merged into one TEXT token even
when it straddles a chunk boundary.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from html.parser import HTMLParser
from typing import Iterator

from lastfmq.utils.errors import ParseError

_CHUNK_SIZE = 8192


class TokenKind(str, Enum):  # noqa: UP042 (StrEnum needs 3.11)
    """Kinds of markup events produced by :class:`TokenStream`."""

    START = "START"
    END = "END"
    TEXT = "TEXT"


@dataclass(frozen=True)
class Token:
    """A single markup event.

    Attributes
    ----------
    kind:
        START, END or TEXT.
    tag:
        Lower-cased tag name for START/END tokens, ``""`` for TEXT.
    attrs:
        ``(name, value)`` pairs in source order.  Valueless attributes
        carry ``""``.  A tuple, so it can be iterated any number of times.
    text:
        Decoded character data for TEXT tokens, ``""`` otherwise.
    """

    kind: TokenKind
    tag: str = ""
    attrs: tuple[tuple[str, str], ...] = ()
    text: str = ""

    def attr(self, name: str) -> str | None:
        """Return the first value of attribute *name*, or ``None``."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None


class _EventCollector(HTMLParser):
    """HTMLParser that queues events instead of acting on them."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.pending: deque[Token] = deque()

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.pending.append(
            Token(
                TokenKind.START,
                tag=tag,
                attrs=tuple((key, value or "") for key, value in attrs),
            )
        )

    def handle_endtag(self, tag: str) -> None:
        self.pending.append(Token(TokenKind.END, tag=tag))

    def handle_data(self, data: str) -> None:
        if self.pending and self.pending[-1].kind is TokenKind.TEXT:
            merged = self.pending.pop().text + data
            self.pending.append(Token(TokenKind.TEXT, text=merged))
        else:
            self.pending.append(Token(TokenKind.TEXT, text=data))


class TokenStream:
    """Lazy, forward-only sequence of :class:`Token` events for one page.

    Parameters
    ----------
    markup:
        The decoded page body.
    chunk_size:
        Characters handed to the parser per refill.
    """

    def __init__(self, markup: str, chunk_size: int = _CHUNK_SIZE) -> None:
        self._markup = markup
        self._chunk_size = max(1, chunk_size)
        self._pos = 0
        self._closed = False
        self._parser = _EventCollector()

    # -- Private helpers -------------------------------------------------------

    def _fill(self) -> None:
        """Parse until two tokens are queued or the body is exhausted.

        Keeping one token of lookahead guarantees a TEXT token is only
        handed out once nothing more can be merged into it.
        """
        pending = self._parser.pending
        while len(pending) < 2 and not self._closed:
            try:
                if self._pos < len(self._markup):
                    chunk = self._markup[self._pos:self._pos + self._chunk_size]
                    self._pos += len(chunk)
                    self._parser.feed(chunk)
                else:
                    self._closed = True
                    self._parser.close()
            except (AssertionError, ValueError) as exc:
                self._closed = True
                raise ParseError(f"tokenizer: {exc}") from exc

    # -- Public API ------------------------------------------------------------

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        self._fill()
        pending = self._parser.pending
        return pending[0] if pending else None

    def next(self) -> Token | None:
        """Consume and return the next token, or ``None`` at end of stream."""
        self._fill()
        pending = self._parser.pending
        return pending.popleft() if pending else None

    def read_text(self) -> str | None:
        """Consume the next token only if it is TEXT and return its text.

        Returns ``None`` (consuming nothing) when the next token is a tag or
        the stream is exhausted.
        """
        token = self.peek()
        if token is None or token.kind is not TokenKind.TEXT:
            return None
        self._parser.pending.popleft()
        return token.text

    @property
    def exhausted(self) -> bool:
        """``True`` once every token has been consumed."""
        return self.peek() is None

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token is None:
                return
            yield token
