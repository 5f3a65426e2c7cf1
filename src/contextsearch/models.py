# src/contextsearch/models.py
"""
Data models for the context search engine.

This module defines small, focused data containers:

- TokenKind: the two token classes (word / delimiter).
- Token: one immutable slice of the original text.
- ContextMatch: one search hit with its surrounding context.
- CacheInfo: counters describing the query cache.

These classes do not contain search logic; they only structure the data so
that tokenizing, matching, and context expansion remain simple.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    WORD = "word"
    DELIMITER = "delimiter"


@dataclass(frozen=True, slots=True)
class Token:
    """
    A contiguous slice of the source text.

    Attributes
    ----------
    text : str
        The exact characters of the slice, never altered.
    kind : TokenKind
        WORD tokens can match a query and count toward the context budget.
        DELIMITER tokens (whitespace, punctuation, newlines) are kept only
        so the original text can be rebuilt verbatim.
    start : int
        Character offset of the first character of the slice in the text.
    """
    text: str
    kind: TokenKind
    start: int

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True, slots=True)
class ContextMatch:
    """
    The result item returned by TextSearcher.search_matches().

    Attributes
    ----------
    position : int
        Index of the matched word token in the token sequence.
    offset : int
        Character offset in the source text where the matched word begins.
    before : str
        Preceding context, delimiters included, exactly as in the source.
    match : str
        The matched token text with its original casing.
    after : str
        Following context, delimiters included.
    text : str
        before + match + after, after the trailing sanitization policy.
        This is the string search() returns.
    """
    position: int
    offset: int
    before: str
    match: str
    after: str
    text: str

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "offset": self.offset,
            "before": self.before,
            "match": self.match,
            "after": self.after,
            "text": self.text,
        }


@dataclass(frozen=True, slots=True)
class CacheInfo:
    hits: int
    misses: int
    size: int

    def to_dict(self) -> dict:
        return {"hits": self.hits, "misses": self.misses, "size": self.size}
