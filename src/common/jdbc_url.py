"""
Перевод JDBC URL в параметры mysql.connector.

Дескриптор подключения хранит URL в формате jdbc:mysql://, а пул
соединений принимает host/port/database/user/password по отдельности.
"""

from typing import Any, Dict, Optional
from urllib.parse import parse_qs, unquote, urlsplit

from src.common.constants.database import JDBC_MYSQL_PREFIX, MYSQL_PORT
from src.common.constants.errorcodes import ERR_UNSUPPORTED_URL, ConfigurationError


def _first(query: Dict[str, list], key: str) -> Optional[str]:
    values = query.get(key)
    return values[0] if values else None


def parse_jdbc_url(url: str) -> Dict[str, Any]:
    """
    Разобрать jdbc:mysql:// URL.

    Учётные данные берутся из userinfo (user:password@host) или из
    параметров user= / password=. useSSL=false превращается в ssl_disabled.
    autoReconnect относится к драйверу и здесь игнорируется.

    Raises:
        ConfigurationError: URL не в формате jdbc:mysql:// или порт не число.
    """
    if not url or not url.lower().startswith(JDBC_MYSQL_PREFIX):
        raise ConfigurationError(ERR_UNSUPPORTED_URL, detail=(url or "").split("://", 1)[0])

    parts = urlsplit(url[len("jdbc:"):])
    query = parse_qs(parts.query)
    try:
        port = parts.port
    except ValueError:
        raise ConfigurationError(ERR_UNSUPPORTED_URL, detail="jdbc:mysql, invalid port") from None

    kwargs: Dict[str, Any] = {
        "host": parts.hostname,
        "port": port or MYSQL_PORT,
    }
    database = parts.path.lstrip("/")
    if database:
        kwargs["database"] = unquote(database)

    user = unquote(parts.username) if parts.username else _first(query, "user")
    password = unquote(parts.password) if parts.password else _first(query, "password")
    if user is not None:
        kwargs["user"] = user
    if password is not None:
        kwargs["password"] = password

    use_ssl = _first(query, "useSSL")
    if use_ssl is not None and use_ssl.lower() == "false":
        kwargs["ssl_disabled"] = True

    return kwargs


def connection_kwargs(config) -> Dict[str, Any]:
    """Параметры подключения из дескриптора; явные username/password важнее URL."""
    kwargs = parse_jdbc_url(config.url)
    if config.username is not None:
        kwargs["user"] = config.username
    if config.password is not None:
        kwargs["password"] = config.password
    return kwargs
