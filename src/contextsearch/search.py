from __future__ import annotations
from typing import List, Sequence, Tuple

from .config import TRAILING_CHARS
from .models import ContextMatch, Token
from .tokenizer import is_word


def validate_context_words(context_words: int) -> int:
    """Reject anything but a non-negative int (bool is not a count)."""
    if isinstance(context_words, bool) or not isinstance(context_words, int):
        raise ValueError(f"context_words must be a non-negative integer, got {context_words!r}")
    if context_words < 0:
        raise ValueError(f"context_words must be >= 0, got {context_words}")
    return context_words


def fold_query(query_word: str) -> str:
    if not isinstance(query_word, str):
        raise TypeError(f"query_word must be str, got {type(query_word).__name__}")
    return query_word.casefold()


def find_positions(tokens: Sequence[Token], query_folded: str) -> Tuple[int, ...]:
    """Ascending positions of word tokens whose case-folded text contains the query."""
    if not query_folded:
        return ()
    return tuple(
        i for i, tok in enumerate(tokens)
        if is_word(tok) and query_folded in tok.text.casefold()
    )


def _previous(tokens: Sequence[Token], index: int, n: int) -> str:
    # walk left from index; stop right after the n-th word or at the start
    parts: List[str] = []
    while n > 0 and index >= 0:
        tok = tokens[index]
        parts.append(tok.text)
        if is_word(tok):
            n -= 1
        index -= 1
    parts.reverse()
    return "".join(parts)


def _next(tokens: Sequence[Token], index: int, n: int) -> str:
    # walk right from index; stop right after the n-th word or at the end
    parts: List[str] = []
    end = len(tokens)
    while n > 0 and index < end:
        tok = tokens[index]
        parts.append(tok.text)
        if is_word(tok):
            n -= 1
        index += 1
    return "".join(parts)


def sanitize(text: str, strip_trailing: bool, chars: str = TRAILING_CHARS) -> str:
    return text.rstrip(chars) if strip_trailing else text


def expand(tokens: Sequence[Token],
           position: int,
           context_words: int,
           *,
           strip_trailing: bool = False) -> ContextMatch:
    """
    Build the context window around tokens[position].
    Fewer than context_words words on either side is not an error:
    whatever exists up to the corpus boundary is used, with no padding.
    """
    tok = tokens[position]
    before = _previous(tokens, position - 1, context_words)
    after = _next(tokens, position + 1, context_words)
    return ContextMatch(
        position=position,
        offset=tok.start,
        before=before,
        match=tok.text,
        after=after,
        text=sanitize(before + tok.text + after, strip_trailing),
    )


def run(tokens: Sequence[Token],
        positions: Sequence[int],
        context_words: int,
        *,
        strip_trailing: bool = False) -> List[ContextMatch]:
    return [expand(tokens, p, context_words, strip_trailing=strip_trailing) for p in positions]
