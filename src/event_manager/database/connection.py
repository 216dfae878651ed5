from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from mysql.connector import errors, pooling

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    pool_timeout: float = DEFAULT_POOL_TIMEOUT


class DatabaseConnection:
    """Singleton-like factory handing out pooled MySQL connections.

    Note: The pool is created lazily on first use, so building the app does
    not require a reachable database. ``conn.close()`` on a pooled connection
    returns it to the pool. When every pooled connection is borrowed,
    ``connect()`` waits up to ``pool_timeout`` seconds for one to come back.
    """

    retry_interval = 0.05

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is None:
            self._pool = pooling.MySQLConnectionPool(
                pool_name="event_manager",
                pool_size=int(self._config.pool_size),
                pool_reset_session=True,
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        return self._pool

    def connect(self):
        pool = self._get_pool()
        deadline = time.monotonic() + float(self._config.pool_timeout)
        while True:
            try:
                return pool.get_connection()
            except errors.PoolError:
                if time.monotonic() >= deadline:
                    raise
                time.sleep(self.retry_interval)
