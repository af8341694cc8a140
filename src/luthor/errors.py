"""Exception classes for Luthor.

The scanning primitives resolve boundary conditions by policy and never
raise for them. These exceptions cover misuse of the API instead.
"""

from __future__ import annotations


class LuthorError(Exception):
    """Base exception for all Luthor errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidAmountError(LuthorError, ValueError):
    """A lookahead amount was negative.

    Raised by Tokenizer.tokenize_next() before any state is changed.
    """

    def __init__(self, amount: int) -> None:
        """Initialize with the rejected amount.

        Args:
            amount: The negative amount that was passed
        """
        self.amount = amount
        super().__init__(f"amount must be non-negative, got {amount}")


class StateFunctionError(LuthorError, TypeError):
    """A state function returned something other than a next state or None."""

    def __init__(self, state_name: str, result: object) -> None:
        """Initialize state function error.

        Args:
            state_name: Name of the state function that misbehaved
            result: The value it returned
        """
        self.state_name = state_name
        self.result_type = type(result).__name__
        super().__init__(
            f"State '{state_name}' returned {self.result_type}; "
            "expected a StateFunction, a callable or None"
        )
