"""ContextVar-based parse configuration for Whisker.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The parser reads its initial delimiter pair from the active config when it
is created; delimiter-change tags inside a template only ever mutate the
parser instance, never the config.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from whisker.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(open_delimiter="<%", close_delimiter="%>")):
        tree = Parser("<% name %>").parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_DELIMITERS: tuple[str, str] = ("{{", "}}")

# Scan attempts allowed per interpolation tag before it is declared unclosed
MAX_ARGUMENT_SCANS = 31


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        open_delimiter: Tag opening marker in effect at the start of a template
        close_delimiter: Tag closing marker in effect at the start of a template
        max_argument_scans: Bound on argument scan attempts per interpolation tag

    """

    open_delimiter: str = DEFAULT_DELIMITERS[0]
    close_delimiter: str = DEFAULT_DELIMITERS[1]
    max_argument_scans: int = MAX_ARGUMENT_SCANS

    def __post_init__(self) -> None:
        for delimiter in (self.open_delimiter, self.close_delimiter):
            if not delimiter or any(ch.isspace() for ch in delimiter):
                msg = f"Invalid delimiter: {delimiter!r}"
                raise ValueError(msg)
        if self.max_argument_scans < 1:
            msg = f"max_argument_scans must be positive, got {self.max_argument_scans}"
            raise ValueError(msg)

    @property
    def delimiters(self) -> tuple[str, str]:
        return (self.open_delimiter, self.close_delimiter)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. A ``delimiters`` pair is accepted as a
        shorthand for both delimiter fields.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "delimiters": ["<%", "%>"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.open_delimiter
            '<%'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "delimiters" in config_dict:
            filtered["open_delimiter"], filtered["close_delimiter"] = config_dict["delimiters"]
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(open_delimiter="[[", close_delimiter="]]")):
        ...     tree = Parser("[[name]]").parse()

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_DELIMITERS",
    "MAX_ARGUMENT_SCANS",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
