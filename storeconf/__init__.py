"""Cache and Object Store Configuration Resolution"""

__version__ = "1.0.0"

# Import key components for easier access
from storeconf.core.errors import ConfigError
from storeconf.models.settings import Settings
from storeconf.services.resolver import ConfigResolver, load, load_all

__all__ = ["ConfigError", "Settings", "ConfigResolver", "load", "load_all"]
