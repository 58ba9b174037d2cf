"""Models Package"""

from storeconf.models.cache import CacheConnectionSettings, TlsSettings
from storeconf.models.object_store import (
    ObjectStoreBackend,
    ObjectStoreSettings,
    S3ObjectStoreSettings,
    SwiftCredentials,
    SwiftScope
)
from storeconf.models.settings import Settings

__all__ = [
    "CacheConnectionSettings",
    "TlsSettings",
    "ObjectStoreBackend",
    "ObjectStoreSettings",
    "S3ObjectStoreSettings",
    "SwiftCredentials",
    "SwiftScope",
    "Settings"
]
