"""Tag/attribute rule matching without building a tree.

Every extractor recognises both section boundaries ("is this the
``<ol class="big-tags">``?") and section-internal markers ("is this a
``<a class="link-block-target">``?") through :func:`match_attrs`.  A rule
resolves to a string so that one call can dispatch between several
markers with a plain ``if``/``elif`` chain on the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

WILDCARD = "*"


@dataclass(frozen=True)
class TagAttr:
    """One match rule.

    Attributes
    ----------
    tag_name:
        Tag the rule applies to.
    attr_name:
        Attribute that must be present.  Empty means "tag name only".
    attr_values:
        Accepted substrings of the attribute value.  Empty means
        "presence is enough"; ``("*",)`` captures the raw value.
    """

    tag_name: str
    attr_name: str = ""
    attr_values: tuple[str, ...] = ()

    @classmethod
    def of(cls, tag_name: str, attr_name: str = "", *attr_values: str) -> TagAttr:
        """Shorthand constructor: ``TagAttr.of("ol", "class", "big-tags")``."""
        return cls(tag_name, attr_name, tuple(attr_values))

    def resolve(self, tag: str, attrs: Iterable[tuple[str, str]]) -> str:
        """Return this rule's resolved value for *tag*, or ``""`` on no match."""
        if tag != self.tag_name:
            return ""
        if not self.attr_name:
            return self.tag_name
        for key, value in attrs:
            if key != self.attr_name:
                continue
            if not self.attr_values:
                return self.attr_name
            if self.attr_values[0] == WILDCARD:
                return value
            for accepted in self.attr_values:
                if accepted in value:
                    return accepted
        return ""


def match_attrs(tag: str, attrs: Iterable[tuple[str, str]], *rules: TagAttr) -> str:
    """Evaluate *rules* in order and return the first match's value.

    Parameters
    ----------
    tag:
        Current tag name.
    attrs:
        The tag's ``(name, value)`` pairs.  Must be re-iterable since each
        rule walks it from the start.
    rules:
        Ordered match rules.

    Returns
    -------
    str
        The tag name (tag-only rule), the attribute name (presence rule),
        the raw attribute value (wildcard rule), the matched accepted value,
        or ``""`` when no rule matches.
    """
    for rule in rules:
        resolved = rule.resolve(tag, attrs)
        if resolved:
            return resolved
    return ""
