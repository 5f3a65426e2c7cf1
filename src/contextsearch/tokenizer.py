from __future__ import annotations
from typing import Iterable, List, Tuple

from .config import WORD_CHARS_EXTRA
from .models import Token, TokenKind


def is_word_char(ch: str, extra: str = WORD_CHARS_EXTRA) -> bool:
    """Letters and digits (any script) plus the configured extras form words."""
    return ch.isalnum() or ch in extra


def is_word(token: Token) -> bool:
    """True if stepping past this token consumes one word of context."""
    return token.kind is TokenKind.WORD


def tokenize(text: str, word_chars: str = WORD_CHARS_EXTRA) -> Tuple[Token, ...]:
    """
    Split text into maximal runs of word characters and of delimiters.
    Rules:
      * every character belongs to exactly one token, in order
      * consecutive word characters form one WORD token
      * consecutive non-word characters form one DELIMITER token
        (so WORD and DELIMITER tokens always alternate)
      * "".join(t.text for t in tokens) == text
    """
    tokens: List[Token] = []
    n = len(text)
    i = 0
    while i < n:
        word = is_word_char(text[i], word_chars)
        j = i + 1
        while j < n and is_word_char(text[j], word_chars) == word:
            j += 1
        kind = TokenKind.WORD if word else TokenKind.DELIMITER
        tokens.append(Token(text=text[i:j], kind=kind, start=i))
        i = j
    return tuple(tokens)


def detokenize(tokens: Iterable[Token]) -> str:
    """Inverse of tokenize(): concatenate token texts in order."""
    return "".join(t.text for t in tokens)
