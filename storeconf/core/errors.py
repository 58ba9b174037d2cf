"""Configuration error taxonomy"""

from typing import Any, Dict, List, Optional


class ConfigError(Exception):
    """Base error for a failed configuration load.

    ``key`` is the offending key as written in the source (e.g. ``port``),
    ``path`` its dotted location (e.g. ``redis.port``).
    """

    def __init__(
        self,
        key: str,
        message: Optional[str] = None,
        path: Optional[str] = None,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        self.key = key
        self.path = path or key
        self.message = message or f"invalid configuration value for '{self.path}'"
        self.details = details or []
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigError):
            return NotImplemented
        return type(self) is type(other) and self.path == other.path

    def __hash__(self) -> int:
        return hash((type(self), self.path))


class MissingField(ConfigError):
    """A required key is absent"""


class InvalidType(ConfigError):
    """A value has the wrong type or is malformed"""


class InvalidRange(ConfigError):
    """A value is outside its allowed range"""


class UnknownBackend(ConfigError):
    """The object store backend is not one we know how to configure"""


class InsecureTransport(ConfigError):
    """TLS options were given for a host without a secure scheme"""


class SourceError(ConfigError):
    """The configuration source could not be read or parsed"""
