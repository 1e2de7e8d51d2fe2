"""ContextVar-based lexer configuration for relex.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is read once at the start of each lex call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from relex import lex
    from relex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(skip_kinds=frozenset({"ws"}))):
        tokens = lex("one 42", patterns)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Note: source_file is intentionally excluded—it's per-call state,
    not configuration. It is passed to lex() directly.

    Attributes:
        strict_patterns: Reject patterns that match the empty string when
            the matcher is built. Patterns that only match empty in context
            are still caught during lexing.
        skip_kinds: Kind names whose tokens are consumed but not emitted

    """

    strict_patterns: bool = True
    skip_kinds: frozenset[str] = frozenset()

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored. ``skip_kinds`` may be any iterable of names.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "skip_kinds": ["ws", "comment"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.skip_kinds)
            ['comment', 'ws']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "skip_kinds" in filtered:
            filtered["skip_kinds"] = frozenset(filtered["skip_kinds"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

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
