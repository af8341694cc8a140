"""Cursor-and-emission engine shared by all Luthor lexers.

A Tokenizer owns one source string, a cursor over it and the tokens emitted
so far. Lexers move the cursor with advance(), inspect it with
current_char() and friends, and flush the consumed span with tokenize().

All positions are code point indices. Python strings index by code point,
so multi-byte characters count as a single position and lookups are O(1).

Invariant:
    0 <= token_start <= token_position <= char_count

Thread Safety:
Tokenizer instances are single-use. Create one per source string and drive
it from one thread. Emitted tokens are immutable and safe to share.

"""

from __future__ import annotations

from collections.abc import Hashable

from luthor.config import get_lex_config
from luthor.errors import InvalidAmountError
from luthor.tokens import Category, Token
from luthor.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer:
    """Produces and stores tokens for lexers built on top of it.

    Usage:
        >>> tokenizer = Tokenizer("luthor")
        >>> tokenizer.advance()
        >>> tokenizer.tokenize_next(5, Category.KEYWORD)
        >>> tokenizer.tokens()
        [Token(TEXT, 'l'), Token(KEYWORD, 'uthor')]

    Attributes:
        data: The source text
        token_start: Index of the first character not yet tokenized
        token_position: Index of the cursor (next character to examine)

    """

    __slots__ = (
        "data",
        "_char_count",
        "token_start",
        "token_position",
        "_tokens",
        "_trace_tokens",
    )

    def __init__(self, data: str) -> None:
        """Initialize tokenizer with source text.

        Args:
            data: Source text; any string, including the empty string
        """
        self.data = data
        self._char_count = len(data)
        self.token_start = 0
        self.token_position = 0
        self._tokens: list[Token] = []
        self._trace_tokens = get_lex_config().trace_tokens

    def __repr__(self) -> str:
        return (
            f"Tokenizer(start={self.token_start}, position={self.token_position}, "
            f"chars={self._char_count}, tokens={len(self._tokens)})"
        )

    @property
    def char_count(self) -> int:
        """Number of code points in the source."""
        return self._char_count

    def tokens(self) -> list[Token]:
        """Return a copy of the tokens emitted so far.

        The copy is independent: mutating it does not affect the tokenizer.
        """
        return list(self._tokens)

    # =========================================================================
    # Cursor
    # =========================================================================

    def advance(self) -> None:
        """Move the cursor forward by one character.

        Does nothing if there is no more data to process.
        """
        if self.has_more_data():
            self.token_position += 1

    def has_more_data(self) -> bool:
        """Whether any characters remain at or after the cursor."""
        return self.token_position < self._char_count

    def current_char(self) -> str | None:
        """Return the character at the cursor, or None at end of input.

        Example:
            >>> tokenizer = Tokenizer("él")
            >>> tokenizer.current_char()
            'é'
        """
        if self.has_more_data():
            return self.data[self.token_position]
        return None

    def next_char(self) -> str | None:
        """Return the character after the cursor, or None if there is none."""
        position = self.token_position + 1
        if position < self._char_count:
            return self.data[position]
        return None

    def next_non_whitespace_char(self) -> str | None:
        """Return the first non-whitespace character after the cursor.

        The cursor does not move.

        Returns:
            The character, or None if only whitespace (or nothing) follows.
        """
        data = self.data
        for position in range(self.token_position + 1, self._char_count):
            char = data[position]
            if not char.isspace():
                return char
        return None

    def has_prefix(self, prefix: str) -> bool:
        """Whether the unconsumed text at the cursor starts with prefix."""
        return self.data.startswith(prefix, self.token_position)

    def pending(self) -> str:
        """Return the consumed but not yet tokenized text."""
        return self.data[self.token_start : self.token_position]

    # =========================================================================
    # Emission
    # =========================================================================

    def tokenize(self, category: Hashable) -> None:
        """Emit the text consumed since the last flush as one token.

        Creates a token with the given category from the characters passed
        over by advance() since the previous call, then moves token_start up
        to the cursor. Does nothing if no characters are pending.

        Args:
            category: Label for the token; should be hashable (not checked)

        Example:
            >>> tokenizer = Tokenizer("luthor")
            >>> tokenizer.advance()
            >>> tokenizer.advance()
            >>> tokenizer.tokenize(Category.TEXT)
            >>> tokenizer.tokens()[0].lexeme
            'lu'
        """
        if self.token_start == self.token_position:
            return

        token = Token(
            lexeme=self.data[self.token_start : self.token_position],
            category=category,
        )
        self._tokens.append(token)
        if self._trace_tokens:
            logger.debug(
                "Emitted %r at %d:%d", token, self.token_start, self.token_position
            )
        self.token_start = self.token_position

    def tokenize_next(self, amount: int, category: Hashable) -> None:
        """Emit the next amount characters as one token.

        Any characters already consumed are first flushed as Category.TEXT.
        Requests past the end of the data take only what is left.

        Args:
            amount: Number of characters to consume; must not be negative
            category: Label for the token covering those characters

        Raises:
            InvalidAmountError: If amount is negative.
        """
        if amount < 0:
            raise InvalidAmountError(amount)

        self.tokenize(Category.TEXT)
        self.token_position = min(self.token_position + amount, self._char_count)
        self.tokenize(category)

    def consume_whitespace(self) -> None:
        """Emit a run of whitespace at the cursor as a WHITESPACE token.

        Pending text is flushed as Category.TEXT first. If the cursor is not
        on whitespace, only that flush happens.
        """
        self.tokenize(Category.TEXT)
        data = self.data
        while self.has_more_data() and data[self.token_position].isspace():
            self.token_position += 1
        self.tokenize(Category.WHITESPACE)


def new(data: str) -> Tokenizer:
    """Create a Tokenizer over data."""
    return Tokenizer(data)
