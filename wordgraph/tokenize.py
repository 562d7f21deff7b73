"""Word tokenizer shared by graph construction and text generation."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

DELIMITER_RE = re.compile(r"[\s,.;!?]+")
_WORD_RE = re.compile(r"[a-z]+")


def _chunks(source: str | Iterable[str]) -> Iterable[str]:
    if isinstance(source, str):
        return (source,)
    return source


def iter_tokens(source: str | Iterable[str]) -> Iterator[str]:
    """Yield every raw, lower-cased token of ``source``.

    ``source`` is a string or any iterable of text chunks, such as an open text
    file. A token cut by a chunk boundary is carried over and joined with the
    start of the next chunk.
    """
    pending = ""
    for chunk in _chunks(source):
        if not chunk:
            continue
        parts = DELIMITER_RE.split(pending + chunk)
        pending = parts.pop()
        for part in parts:
            if part:
                yield part.lower()
    if pending:
        yield pending.lower()


def is_word(token: str) -> bool:
    """Return True for tokens made only of ASCII letters ``a``-``z``."""
    return _WORD_RE.fullmatch(token) is not None


def iter_words(source: str | Iterable[str]) -> Iterator[str]:
    """Yield the accepted word tokens of ``source``."""
    return (token for token in iter_tokens(source) if is_word(token))


class TokenStream:
    """Restartable token sequence over a fixed text.

    Every iteration re-tokenizes from the start, so one stream can feed a
    builder and a later inspection pass.
    """

    def __init__(self, text: str, words_only: bool = True) -> None:
        self.text = text
        self.words_only = words_only

    def __iter__(self) -> Iterator[str]:
        if self.words_only:
            return iter_words(self.text)
        return iter_tokens(self.text)

    def __repr__(self) -> str:
        return f"TokenStream(chars={len(self.text)}, words_only={self.words_only})"
