# src/contextsearch/engine.py
from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple

from . import config as CFG
from .cache import QueryCache
from .loader import Source, read_text
from .models import CacheInfo, ContextMatch, Token
from .search import find_positions, fold_query, run, validate_context_words
from .tokenizer import is_word, tokenize

log = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Turn on INFO logging when asked to, or when CONTEXTSEARCH_VERBOSE=1."""
    if verbose or os.environ.get(CFG.VERBOSE_ENV) == "1":
        logging.basicConfig(level=logging.INFO)


class TextSearcher:
    """
    Owns one tokenized text and answers context-window queries over it.

    Public API:
      * TextSearcher(text) / build(text):   tokenize once, ready to query
      * from_source(path_or_handle):        read, then build
      * search(query, context_words):       list of context strings
      * search_matches(query, context_words): list of ContextMatch
      * match_positions(query):             matching word-token positions
      * cache_info():                       query cache counters

    The token sequence is immutable after construction, so concurrent
    read-only queries are safe; the query cache serializes only its inserts.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        text: str,
        *,
        word_chars: Optional[str] = None,      # extra word characters beyond alphanumerics
        strip_trailing: Optional[bool] = None,  # trailing ", \t\r\n" policy
        use_cache: Optional[bool] = None,
    ) -> None:
        if not isinstance(text, str):
            raise TypeError(f"TextSearcher expects str text, got {type(text).__name__}")
        self.word_chars = CFG.WORD_CHARS_EXTRA if word_chars is None else word_chars
        self.strip_trailing = CFG.STRIP_TRAILING if strip_trailing is None else bool(strip_trailing)
        self._tokens: Tuple[Token, ...] = tokenize(text, self.word_chars)
        self._word_count = sum(1 for t in self._tokens if is_word(t))
        use = CFG.USE_CACHE if use_cache is None else use_cache
        self._cache: Optional[QueryCache] = QueryCache() if use else None
        log.info("TextSearcher built: tokens=%d words=%d cache=%s",
                 len(self._tokens), self._word_count, "on" if use else "off")

    @classmethod
    def from_source(
        cls,
        source: Source,
        *,
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
        **overrides,
    ) -> "TextSearcher":
        """Read a path or readable handle and build a searcher; OSError propagates."""
        return cls(read_text(source, encoding=encoding, errors=errors), **overrides)

    # ------------- read-only views -------------

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def word_count(self) -> int:
        return self._word_count

    def __len__(self) -> int:
        return len(self._tokens)

    # ------------- query -------------

    def match_positions(self, query_word: str) -> Tuple[int, ...]:
        q = fold_query(query_word)
        if not q:
            return ()
        if self._cache is None:
            return find_positions(self._tokens, q)
        return self._cache.get_or_compute(q, lambda key: find_positions(self._tokens, key))

    def search_matches(self, query_word: str, context_words: int) -> List[ContextMatch]:
        n = validate_context_words(context_words)
        positions = self.match_positions(query_word)
        return run(self._tokens, positions, n, strip_trailing=self.strip_trailing)

    def search(self, query_word: str, context_words: int) -> List[str]:
        """
        One context string per word token containing query_word
        (case-insensitive substring), in order of appearance.
        Raises ValueError if context_words is negative or not an int.
        """
        return [m.text for m in self.search_matches(query_word, context_words)]

    def cache_info(self) -> CacheInfo:
        if self._cache is None:
            return CacheInfo(hits=0, misses=0, size=0)
        return self._cache.info()


def build(text: str, **overrides) -> TextSearcher:
    return TextSearcher(text, **overrides)


def load_searcher(source: Source, **overrides) -> TextSearcher:
    return TextSearcher.from_source(source, **overrides)
