"""State-machine composition for lexers built on the Tokenizer.

A lexer is written as a chain of small state functions. Each one receives
the Tokenizer, calls whatever primitives it needs, and returns the next
state to run, or None once scanning is complete.

    >>> @StateFunction
    ... def initial_state(tokenizer):
    ...     if tokenizer.current_char() == "#":
    ...         return comment_state
    ...     ...

run() drives a chain until a state returns None or the input is exhausted.
It never flushes on its own: text a state leaves pending when the chain
stops is not emitted, so states must call tokenize() before returning.
There is no step limit; a state that neither advances nor terminates loops
forever.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from luthor.config import get_lex_config
from luthor.errors import StateFunctionError
from luthor.tokenizer import Tokenizer
from luthor.utils.logger import get_logger

if TYPE_CHECKING:
    from luthor.tokens import Token

logger = get_logger(__name__)

StateResult: TypeAlias = "StateFunction | Callable[[Tokenizer], StateResult] | None"


@dataclass(frozen=True, slots=True)
class StateFunction:
    """A single state in a lexer's state machine.

    Wraps a function taking the Tokenizer and returning the next state
    (a StateFunction or a plain callable) or None to terminate. Carries no
    data besides the function itself, so it can be used as a decorator.

    Attributes:
        function: The wrapped state function

    """

    function: Callable[[Tokenizer], StateResult]

    def __call__(self, tokenizer: Tokenizer) -> StateResult:
        return self.function(tokenizer)

    @property
    def name(self) -> str:
        """Name of the wrapped function (for logging and errors)."""
        return getattr(self.function, "__qualname__", repr(self.function))

    def __repr__(self) -> str:
        return f"StateFunction({self.name})"


def _as_state(value: object, source: str) -> StateFunction | None:
    """Normalize a state result to a StateFunction or None.

    Args:
        value: What the state returned (or the initial state)
        source: Name of the state that produced value

    Raises:
        StateFunctionError: If value is neither None nor callable.
    """
    if value is None or isinstance(value, StateFunction):
        return value
    if callable(value):
        return StateFunction(value)
    raise StateFunctionError(source, value)


def run(tokenizer: Tokenizer, initial: StateResult) -> list[Token]:
    """Drive a chain of state functions over tokenizer.

    Args:
        tokenizer: The tokenizer to drive; mutated in place
        initial: First state to run

    Returns:
        Snapshot of the tokenizer's tokens once the chain stops.

    Raises:
        StateFunctionError: If a state returns something other than a
            state or None.
    """
    config = get_lex_config()
    state = _as_state(initial, "<initial>")

    while state is not None:
        if not tokenizer.has_more_data():
            break
        next_state = _as_state(state(tokenizer), state.name)
        if config.trace_states:
            logger.debug(
                "%s -> %s at %d",
                state.name,
                next_state.name if next_state is not None else "<done>",
                tokenizer.token_position,
            )
        state = next_state

    if config.warn_on_dropped and tokenizer.token_start != tokenizer.token_position:
        logger.warning(
            "State chain stopped with unflushed text %r at %d:%d; it was dropped",
            tokenizer.pending(),
            tokenizer.token_start,
            tokenizer.token_position,
        )

    return tokenizer.tokens()


def lex(data: str, initial: StateResult) -> list[Token]:
    """Tokenize data with a state chain starting at initial.

    Example:
        >>> from luthor.tokens import Category
        >>> def text_state(tokenizer):
        ...     while tokenizer.has_more_data():
        ...         tokenizer.advance()
        ...     tokenizer.tokenize(Category.TEXT)
        ...     return None
        >>> lex("luthor", text_state)
        [Token(TEXT, 'luthor')]
    """
    return run(Tokenizer(data), initial)


__all__ = ["StateFunction", "StateResult", "lex", "run"]
