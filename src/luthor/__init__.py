"""
Luthor: a reusable scanning engine for building lexers.

Turns raw text into a flat list of classified tokens. Lexers for specific
languages and formats are built on top of it as chains of state functions.

Quick Start:
    >>> from luthor import Category, Tokenizer
    >>> tokenizer = Tokenizer("différent")
    >>> for _ in range(3):
    ...     tokenizer.advance()
    >>> tokenizer.tokenize(Category.TEXT)
    >>> tokenizer.tokens()
    [Token(TEXT, 'dif')]

State Machines:
    >>> from luthor import Category, lex
    >>> def initial_state(tokenizer):
    ...     if tokenizer.has_prefix("let"):
    ...         tokenizer.tokenize_next(3, Category.KEYWORD)
    ...         return whitespace_state
    ...     return None
    >>> def whitespace_state(tokenizer):
    ...     tokenizer.consume_whitespace()
    ...     tokenizer.tokenize_next(tokenizer.char_count, Category.IDENTIFIER)
    ...     return None
    >>> lex("let x", initial_state)
    [Token(KEYWORD, 'let'), Token(WHITESPACE, ' '), Token(IDENTIFIER, 'x')]
"""

from luthor.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from luthor.errors import InvalidAmountError, LuthorError, StateFunctionError
from luthor.state import StateFunction, StateResult, lex, run
from luthor.tokenizer import Tokenizer, new
from luthor.tokens import Category, Token

__version__ = "0.1.0"

__all__ = [
    "Category",
    "InvalidAmountError",
    "LexConfig",
    "LuthorError",
    "StateFunction",
    "StateFunctionError",
    "StateResult",
    "Token",
    "Tokenizer",
    "__version__",
    "get_lex_config",
    "lex",
    "lex_config_context",
    "new",
    "reset_lex_config",
    "run",
    "set_lex_config",
]
