"""Token and Category definitions for the Luthor tokenizer.

The tokenizer produces a flat list of Token objects. Each Token pairs the
exact text it consumed (its lexeme) with a category label chosen by the
lexer that drove the tokenizer.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
Category is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum, auto


class Category(Enum):
    """Default token categories for lexers built on the tokenizer.

    The tokenizer never interprets these values. The single exception is
    TEXT, which tokenize_next() uses to flush unclassified pending input.
    Lexers may use these members or bring their own hashable labels.

    """

    # Reserved: unclassified/plain text
    TEXT = auto()

    WHITESPACE = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()

    # Delimiters
    BRACE = auto()  # { }
    BRACKET = auto()  # [ ]
    PARENTHESIS = auto()  # ( )
    OPERATOR = auto()

    # Literals
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    BOOLEAN = auto()
    LITERAL = auto()

    COMMENT = auto()
    FUNCTION = auto()
    METHOD = auto()
    CALL = auto()
    KEY = auto()  # Mapping key, e.g. in JSON objects


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of source text.

    Attributes:
        lexeme: The exact substring consumed from the source. Never empty
            for tokens produced by a Tokenizer.
        category: The label supplied when the token was emitted. Labels
            should be hashable; this is not checked, but hashing a Token
            with an unhashable label raises TypeError.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    lexeme: str
    category: Hashable

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lexeme = self.lexeme
        if len(lexeme) > 20:
            lexeme = lexeme[:17] + "..."
        name = getattr(self.category, "name", self.category)
        return f"Token({name}, {lexeme!r})"
