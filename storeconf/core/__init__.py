"""Core Package - Runtime Configuration, Errors and Redis Client Construction"""

from storeconf.core.config import AppSettings
from storeconf.core.errors import (
    ConfigError,
    InsecureTransport,
    InvalidRange,
    InvalidType,
    MissingField,
    SourceError,
    UnknownBackend
)
from storeconf.core.redis_client import RedisClientFactory

__all__ = [
    "AppSettings",
    "ConfigError",
    "InsecureTransport",
    "InvalidRange",
    "InvalidType",
    "MissingField",
    "SourceError",
    "UnknownBackend",
    "RedisClientFactory"
]
