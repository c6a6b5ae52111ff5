import logging
import mysql.connector
import mysql.connector.pooling
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional
from src.common.constants.database import DB_POOL_NAME, DB_POOL_SIZE
from src.common.jdbc_url import connection_kwargs

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────
# Пул соединений MySQL
# ─────────────────────────────────────────────────────────────
# Стартовая процедура (src.shipping_service.bootstrap) передаёт сюда дескриптор
# подключения, а сам пул создаётся лениво при первом обращении: БД может
# подняться позже сервиса. Размер переопределяется через DB_POOL_SIZE.

_connection_pool: Optional[mysql.connector.pooling.MySQLConnectionPool] = None
_pool_kwargs: Optional[Dict[str, Any]] = None
_pool_size: int = DB_POOL_SIZE


def init_pool(config, pool_size: int = DB_POOL_SIZE) -> None:
    """
    Запомнить параметры пула соединений MySQL из дескриптора подключения.

    Соединения здесь не открываются, пул создаётся в _get_pool().

    Args:
        config: ConnectionConfig, полученный от провайдера источника данных.
        pool_size: Число соединений в пуле.

    Raises:
        ConfigurationError: URL дескриптора не удаётся разобрать.
    """
    global _connection_pool, _pool_kwargs, _pool_size
    _pool_kwargs = connection_kwargs(config)
    _pool_size = pool_size
    _connection_pool = None
    logger.info(
        "Параметры пула MySQL-соединений: pool_size=%d, host=%s, database=%s",
        pool_size, _pool_kwargs.get("host"), _pool_kwargs.get("database"),
    )


def _get_pool() -> mysql.connector.pooling.MySQLConnectionPool:
    """
    Получить (или создать) глобальный пул соединений MySQL.

    Raises:
        RuntimeError: init_pool() ещё не вызывался.
        mysql.connector.Error: БД недоступна при создании пула.
    """
    global _connection_pool
    if _connection_pool is None:
        if _pool_kwargs is None:
            raise RuntimeError("MySQL connection pool is not initialized, call init_pool() at startup")
        logger.info("Инициализация пула MySQL-соединений (pool_size=%d)", _pool_size)
        _connection_pool = mysql.connector.pooling.MySQLConnectionPool(
            pool_name=DB_POOL_NAME,
            pool_size=_pool_size,
            pool_reset_session=True,
            **_pool_kwargs,
        )
    return _connection_pool


def reset_pool() -> None:
    """
    Сбросить глобальный пул и его параметры (для тестов и повторной инициализации).
    """
    global _connection_pool, _pool_kwargs
    _connection_pool = None
    _pool_kwargs = None


@contextmanager
def get_db_connection() -> Generator[mysql.connector.MySQLConnection, None, None]:
    """
    Контекстный менеджер для подключения к MySQL из пула.

    Автоматически выполняет commit/rollback и возврат соединения в пул.
    """
    conn = None
    try:
        conn = _get_pool().get_connection()
        yield conn
        conn.commit()  # фиксируем транзакцию, если нет исключения
    except Exception:
        if conn:
            conn.rollback()
        raise
    finally:
        if conn and conn.is_connected():
            conn.close()


@contextmanager
def get_cursor(conn, dictionary=True):
    """Контекстный менеджер для курсора MySQL."""
    cursor = conn.cursor(dictionary=dictionary)
    try:
        yield cursor
    finally:
        cursor.close()


def check_connection() -> bool:
    """Проверить доступность БД запросом SELECT 1 через пул."""
    try:
        with get_db_connection() as conn:
            with get_cursor(conn, dictionary=False) as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
    except mysql.connector.Error as exc:
        logger.exception("MySQL connection check failed: %s", exc)
        return False
    return True
