"""Redis client factory following Dependency Inversion Principle."""
import logging
import time
from typing import Optional
import redis
from redis.connection import ConnectionPool

from autocheckin.config.settings import Config


class RedisClientFactory:
    """Factory for creating Redis clients with connection pooling."""
    
    _pool: Optional[ConnectionPool] = None
    _client: Optional[redis.Redis] = None
    
    @classmethod
    def create_pool(cls, url: str, max_connections: int = 50) -> ConnectionPool:
        """
        Create Redis connection pool.
        
        Args:
            url: Redis connection URL
            max_connections: Maximum number of connections in pool
            
        Returns:
            ConnectionPool instance
        """
        if cls._pool is None:
            logging.debug(f"Creating Redis connection pool: {cls._mask_url(url)}")
            cls._pool = ConnectionPool.from_url(
                url,
                max_connections=max_connections,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30,
            )
        return cls._pool
    
    @staticmethod
    def _mask_url(url: str) -> str:
        """Mask the password of a Redis URL for logging."""
        if '@' in url:
            auth_part, host_part = url.split('@', 1)
            if ':' in auth_part.split('://', 1)[-1]:
                return f"{auth_part.rsplit(':', 1)[0]}:***@{host_part}"
        return url
    
    @classmethod
    def get_client(cls, url: Optional[str] = None) -> Optional[redis.Redis]:
        """
        Get Redis client instance (singleton pattern).
        
        Args:
            url: Optional Redis URL (uses Config if not provided)
            
        Returns:
            Redis client instance or None if connection fails
        """
        if cls._client is None:
            redis_url = url or Config.REDIS_URL
            if not redis_url.startswith(('redis://', 'rediss://', 'unix://')):
                logging.warning("Invalid Redis URL scheme. URL must start with redis://, rediss://, or unix://")
                return None
            
            try:
                client = redis.Redis(connection_pool=cls.create_pool(redis_url))
                max_retries = 3
                for attempt in range(max_retries):
                    try:
                        client.ping()
                        break
                    except redis.ConnectionError:
                        if attempt == max_retries - 1:
                            raise
                        logging.debug(f"Redis ping failed (attempt {attempt + 1}/{max_retries}), retrying...")
                        time.sleep(1)
                cls._client = client
                logging.info("Redis connection established successfully")
            except redis.AuthenticationError as e:
                logging.error(f"Redis authentication failed: {e}")
            except redis.RedisError as e:
                logging.warning(f"Failed to connect to Redis: {e}")
        
        return cls._client
    
    @classmethod
    def close(cls) -> None:
        """Close Redis connections."""
        if cls._client:
            cls._client.close()
            cls._client = None
        if cls._pool:
            cls._pool.disconnect()
            cls._pool = None
