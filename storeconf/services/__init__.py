"""Services Package"""

from storeconf.services.resolver import ConfigResolver, load, load_all

__all__ = [
    "ConfigResolver",
    "load",
    "load_all"
]
