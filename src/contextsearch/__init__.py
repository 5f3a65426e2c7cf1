"""
Context Search Module

In-memory search over a single text: finds every word that contains a
query (case-insensitive substring match) and returns it together with a
window of neighboring words, delimiters and all, exactly as written.

The module is split into small parts:
- Tokenization into alternating word / delimiter runs
- Text loading from a path or an open handle
- Matching and context-window expansion
- Per-searcher memoization of match positions

Example Usage:
    from contextsearch import load_searcher

    searcher = load_searcher("/path/to/book.txt")
    for line in searcher.search("dog", 2):
        print(line)
"""

# src/contextsearch/__init__.py
from .engine import TextSearcher, build, load_searcher, configure_logging  # re-export
from .models import Token, TokenKind, ContextMatch, CacheInfo
from .tokenizer import tokenize, detokenize, is_word

__version__ = "1.0.0"
__all__ = [
    "TextSearcher", "build", "load_searcher", "configure_logging",
    "Token", "TokenKind", "ContextMatch", "CacheInfo",
    "tokenize", "detokenize", "is_word",
]
