"""Text normalization helpers shared by the page extractors.

This module handles three small but easy-to-get-wrong concerns:

1. **Statistic parsing** -- Last.fm renders scrobble and listener counts
   with digit grouping ("1,234,567") inside an ``<abbr title=...>``.
   Grouping separators are stripped before the integer parse; anything
   still unparseable counts as zero.

2. **Reference quoting** -- hyperlinked fragments of a wiki biography are
   wrapped with a user-supplied template before they are appended to the
   paragraph buffer.  ``%q`` quotes like Go's ``%q`` verb (double quotes,
   backslash escapes), ``%s`` inserts the raw text, ``%%`` is a literal
   percent sign.

3. **Paragraph splitting** -- a flushed paragraph buffer is joined and
   split on embedded newlines; each paragraph is trimmed.
"""

import re

_GROUPING_RE = re.compile(r"[,\s]")
_TEMPLATE_VERB_RE = re.compile(r"%[%qs]")

_QUOTE_ESCAPES = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": "\\\\",
    '"': '\\"',
}


def parse_grouped_int(value: str) -> int:
    """Parse a digit-grouped count such as ``"1,234,567"``.

    Args:
        value: Raw attribute text.

    Returns:
        The parsed integer, or ``0`` when the text is not a number.
    """
    try:
        return int(_GROUPING_RE.sub("", value))
    except ValueError:
        return 0


def quote_text(text: str) -> str:
    """Return *text* as a double-quoted, backslash-escaped literal."""
    parts: list[str] = ['"']
    for char in text:
        escaped = _QUOTE_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x100:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) < 0x10000:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    parts.append('"')
    return "".join(parts)


def format_reference(template: str, text: str) -> str:
    """Apply the wiki reference *template* to *text*.

    Args:
        template: A template using ``%q``, ``%s`` and ``%%`` verbs.
        text: The anchor's display text.

    Returns:
        The formatted fragment.  A template with no verbs is returned as-is.
    """

    def _expand(match: re.Match[str]) -> str:
        verb = match.group(0)
        if verb == "%q":
            return quote_text(text)
        if verb == "%s":
            return text
        return "%"

    return _TEMPLATE_VERB_RE.sub(_expand, template)


def split_paragraphs(fragments: list[str]) -> list[str]:
    """Join buffered bio *fragments* and split them into trimmed paragraphs."""
    return [line.strip() for line in "".join(fragments).strip().split("\n")]
