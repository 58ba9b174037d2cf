"""Redis Client Construction from Resolved Cache Settings"""

import redis
from redis import ConnectionPool
from typing import Optional, Any, Dict
from storeconf.core.config import AppSettings
from storeconf.models.cache import CacheConnectionSettings
import logging

logger = logging.getLogger(__name__)

class RedisClientFactory:
    """Builds pooled Redis clients for one validated cache connection"""

    def __init__(self, cache_settings: CacheConnectionSettings, app_settings: Optional[AppSettings] = None):
        self.cache_settings = cache_settings
        self.app_settings = app_settings or AppSettings()
        self._pool = self._init_pool()

    def connection_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for the pool's connections"""
        cache = self.cache_settings
        kwargs: Dict[str, Any] = {
            "host": cache.hostname,
            "port": cache.port,
            "db": cache.db_index,
            "socket_keepalive": True,
            "socket_connect_timeout": cache.timeout if cache.timeout is not None else self.app_settings.REDIS_SOCKET_CONNECT_TIMEOUT,
            "retry_on_timeout": True,
            "health_check_interval": self.app_settings.REDIS_HEALTH_CHECK_INTERVAL,
        }
        if cache.read_timeout is not None:
            kwargs["socket_timeout"] = cache.read_timeout
        if cache.user is not None:
            kwargs["username"] = cache.user
        if cache.password is not None:
            kwargs["password"] = cache.password.get_secret_value()

        if cache.uses_tls:
            tls = cache.tls
            kwargs["connection_class"] = redis.SSLConnection
            kwargs["ssl_cert_reqs"] = "required"
            if tls is not None:
                kwargs["ssl_certfile"] = tls.local_cert
                kwargs["ssl_keyfile"] = tls.local_pk
                kwargs["ssl_ca_certs"] = tls.cafile
                kwargs["ssl_check_hostname"] = tls.verify_peer_name
        return kwargs

    def _init_pool(self) -> ConnectionPool:
        """Initialize Redis connection pool"""
        pool = redis.ConnectionPool(
            max_connections=self.app_settings.REDIS_MAX_CONNECTIONS,
            **self.connection_kwargs()
        )
        transport = "tls" if self.cache_settings.uses_tls else "tcp"
        logger.info(f"Redis connection pool initialized: {transport}://{self.cache_settings.hostname}:{self.cache_settings.port}")
        return pool

    @property
    def pool(self) -> ConnectionPool:
        return self._pool

    def get_client(self) -> redis.Redis:
        """Get Redis client from pool"""
        return redis.Redis(connection_pool=self._pool)

    def health_check(self) -> bool:
        """Check Redis connection health"""
        try:
            client = self.get_client()
            return bool(client.ping())
        except redis.RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    def get_pool_stats(self) -> Dict[str, Any]:
        """Get connection pool statistics"""
        return {
            "created_connections": self._pool._created_connections,
            "available_connections": len(self._pool._available_connections),
            "in_use_connections": len(self._pool._in_use_connections),
            "max_connections": self._pool.max_connections
        }

    def close(self):
        self._pool.disconnect()
