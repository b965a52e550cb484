"""Splitting text on a single delimiter character."""

from __future__ import annotations

from typing import Iterator


class Tokenizer:
    """Splits a string on a delimiter and keeps the resulting tokens."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._tokens: list[str] = []

    def tokenize(self, delim: str, max_tokens: int = 0) -> int:
        """Split the text on ``delim`` and return the number of tokens.

        With ``max_tokens`` above zero, the last token holds the rest of the
        text up to the next newline.
        """
        if len(delim) != 1:
            raise ValueError("delimiter must be a single character")

        if not self._text:
            self._tokens = []
            return 0

        if max_tokens > 0:
            tokens = self._text.split(delim, max_tokens - 1)
            if len(tokens) == max_tokens:
                tokens[-1] = tokens[-1].split("\n", 1)[0]
        else:
            tokens = self._text.split(delim)

        self._tokens = tokens
        return len(tokens)

    def __call__(self, delim: str, max_tokens: int = 0) -> int:
        return self.tokenize(delim, max_tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __getitem__(self, index: int) -> str:
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)