"""
provider.py

Построение дескриптора подключения к MySQL из переменных окружения.

Две стратегии:
- url: готовый URL из SPRING_DATASOURCE_URL (пустое значение запрещено);
- fields: URL собирается из MYSQL_HOST / MYSQL_DATABASE, логин и пароль
  берутся из MYSQL_USER / MYSQL_PASSWORD (проверяется только наличие).

Стратегия auto пробует url и откатывается на fields, если переменная
SPRING_DATASOURCE_URL не задана.

Функции:
- load_environment(environ) -> Mapping: Снимок окружения только для чтения.
- build_jdbc_url(host, database) -> str: URL по фиксированному шаблону.
- get_data_source(environ, strategy) -> ConnectionConfig: Фабрика для старта сервиса.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from config.settings import DATASOURCE_STRATEGY
from src.common.constants.database import (
    ENV_DATASOURCE_URL,
    ENV_MYSQL_DATABASE,
    ENV_MYSQL_HOST,
    ENV_MYSQL_PASSWORD,
    ENV_MYSQL_USER,
    JDBC_URL_TEMPLATE,
    MYSQL_DRIVER,
    MYSQL_FIELD_VARIABLES,
    MYSQL_PORT,
)
from src.common.constants.errorcodes import (
    ERR_MISSING_DATASOURCE_URL,
    ERR_MISSING_MYSQL_VARIABLES,
    ERR_UNKNOWN_STRATEGY,
    ConfigurationError,
    DataSourceStrategy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionConfig:
    driver: str
    url: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    host: Optional[str] = None
    port: int = MYSQL_PORT
    database: Optional[str] = None
    strategy: DataSourceStrategy = DataSourceStrategy.URL


def load_environment(environ: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """
    Снять копию окружения, доступную только для чтения.

    Единственное место, где провайдер обращается к os.environ.
    Тесты передают сюда собственный словарь.
    """
    source = os.environ if environ is None else environ
    return MappingProxyType(dict(source))


def build_jdbc_url(host: str, database: str) -> str:
    return JDBC_URL_TEMPLATE.format(host=host, database=database)


def _parse_strategy(value: str | DataSourceStrategy) -> DataSourceStrategy:
    try:
        return DataSourceStrategy(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(ERR_UNKNOWN_STRATEGY, detail=str(value)) from None


class DataSourceProvider:
    """
    Провайдер дескриптора подключения.

    Не хранит изменяемого состояния: повторный вызов provide() с тем же
    окружением возвращает равный дескриптор.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        strategy: Optional[str | DataSourceStrategy] = None,
    ):
        self._environ = load_environment(environ)
        self._strategy = _parse_strategy(DATASOURCE_STRATEGY if strategy is None else strategy)

    @property
    def strategy(self) -> DataSourceStrategy:
        return self._strategy

    def provide(self) -> ConnectionConfig:
        """
        Построить дескриптор по настроенной стратегии.

        Raises:
            ConfigurationError: обязательные переменные не заданы.
        """
        if self._strategy == DataSourceStrategy.URL:
            return self.from_url()
        if self._strategy == DataSourceStrategy.FIELDS:
            return self.from_fields()

        if self._environ.get(ENV_DATASOURCE_URL):
            return self.from_url()
        logger.debug("%s is not set, falling back to MySQL variables", ENV_DATASOURCE_URL)
        return self.from_fields()

    def from_url(self) -> ConnectionConfig:
        """Дескриптор из готового URL (SPRING_DATASOURCE_URL)."""
        jdbc_url = self._environ.get(ENV_DATASOURCE_URL)
        if not jdbc_url:
            raise ConfigurationError(ERR_MISSING_DATASOURCE_URL, missing=(ENV_DATASOURCE_URL,))

        # URL пишется в лог как есть, вместе с учётными данными, если они в нём есть
        logger.info("jdbc url %s", jdbc_url)

        return ConnectionConfig(
            driver=MYSQL_DRIVER,
            url=jdbc_url,
            strategy=DataSourceStrategy.URL,
        )

    def from_fields(self) -> ConnectionConfig:
        """Дескриптор из MYSQL_HOST, MYSQL_USER, MYSQL_PASSWORD, MYSQL_DATABASE."""
        missing = tuple(name for name in MYSQL_FIELD_VARIABLES if self._environ.get(name) is None)
        if missing:
            raise ConfigurationError(ERR_MISSING_MYSQL_VARIABLES, missing=missing)

        host = self._environ[ENV_MYSQL_HOST]
        database = self._environ[ENV_MYSQL_DATABASE]
        jdbc_url = build_jdbc_url(host, database)

        logger.info("jdbc url %s", jdbc_url)

        return ConnectionConfig(
            driver=MYSQL_DRIVER,
            url=jdbc_url,
            username=self._environ[ENV_MYSQL_USER],
            password=self._environ[ENV_MYSQL_PASSWORD],
            host=host,
            port=MYSQL_PORT,
            database=database,
            strategy=DataSourceStrategy.FIELDS,
        )


def get_data_source(
    environ: Optional[Mapping[str, str]] = None,
    strategy: Optional[str | DataSourceStrategy] = None,
) -> ConnectionConfig:
    """
    Фабрика дескриптора для стартовой процедуры сервиса.

    Вызывается один раз при старте; результат передаётся дальше явно
    (см. src.shipping_service.bootstrap).
    """
    return DataSourceProvider(environ, strategy).provide()
