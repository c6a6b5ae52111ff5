"""
Источник данных сервиса доставки.

Собирает дескриптор подключения к MySQL из переменных окружения.
"""

from src.shipping_service.datasource.provider import (
    ConfigurationError,
    ConnectionConfig,
    DataSourceProvider,
    build_jdbc_url,
    get_data_source,
    load_environment,
)

__all__ = [
    "ConfigurationError",
    "ConnectionConfig",
    "DataSourceProvider",
    "build_jdbc_url",
    "get_data_source",
    "load_environment",
]
