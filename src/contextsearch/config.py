from __future__ import annotations

# Characters that count as part of a word besides letters and digits.
# The apostrophe keeps contractions like "don't" in one token.
WORD_CHARS_EXTRA: str = "'"

# Trailing sanitization policy applied to every assembled context string.
STRIP_TRAILING: bool = False
TRAILING_CHARS: str = ", \t\r\n"

# Memoize match positions per case-folded query
USE_CACHE: bool = True

# Used by the web layer when no ?context= is given
DEFAULT_CONTEXT_WORDS: int = 3

# Text loading
ENCODING: str = "utf-8"
ENCODING_ERRORS: str = "strict"

# Progress logging (set CONTEXTSEARCH_VERBOSE=1 to enable)
VERBOSE_ENV: str = "CONTEXTSEARCH_VERBOSE"
