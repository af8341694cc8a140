"""ContextVar-based configuration for Luthor.

Provides context-local configuration using Python's ContextVars (PEP 567).
Configuration only controls diagnostics (debug tracing and warnings); it
never changes which tokens are produced.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from luthor.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(trace_states=True)):
        tokens = lex(source, initial_state)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable tokenizer configuration.

    Attributes:
        trace_states: Log each state transition at DEBUG level
        trace_tokens: Log each emitted token at DEBUG level
        warn_on_dropped: Log a WARNING when a state chain terminates while
            text is still pending (the text is dropped either way)

    """

    trace_states: bool = False
    trace_tokens: bool = False
    warn_on_dropped: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({"trace_states": True, "other": 1})
            >>> config.trace_states
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current configuration for this thread/context."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set configuration for the current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lex_config_context(LexConfig(trace_tokens=True)):
        ...     tokenizer = Tokenizer("luthor")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current context. Restores the previous config
        even if an exception is raised.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
