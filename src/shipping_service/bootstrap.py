"""
Стартовая процедура сервиса доставки.

Порядок:
1. Настроить логирование.
2. Один раз построить дескриптор подключения из окружения.
3. Передать дескриптор в слой хранения (пул соединений MySQL).

Если обязательные переменные окружения не заданы, старт прерывается
с ненулевым кодом выхода; деградированного режима нет.
"""

import logging
from typing import Mapping, Optional

import src.common.database as database
from src.common.constants.errorcodes import (
    EXIT_CODE_CONFIGURATION_ERROR,
    ConfigurationError,
    DataSourceStrategy,
)
from src.shipping_service.datasource.provider import get_data_source

from config.settings import DB_CHECK_ON_STARTUP, DEBUG

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=[logging.StreamHandler()]   # console
    )
    # драйвер MySQL слишком разговорчив на DEBUG
    logging.getLogger("mysql.connector").setLevel(logging.WARNING)


def main(
    environ: Optional[Mapping[str, str]] = None,
    strategy: Optional[str | DataSourceStrategy] = None,
) -> int:
    """
    Запустить сервис: дескриптор подключения -> пул соединений.

    Недоступная БД на старте не фатальна: пул создаётся при первом обращении.

    Returns:
        0 при успешном старте, EXIT_CODE_CONFIGURATION_ERROR при ошибке конфигурации.
    """
    configure_logging()

    try:
        config = get_data_source(environ, strategy)
        logger.info("Data source resolved (strategy=%s, driver=%s)", config.strategy, config.driver)
        database.init_pool(config)
    except ConfigurationError as exc:
        logger.error("Startup aborted: %s", exc)
        return EXIT_CODE_CONFIGURATION_ERROR

    if DB_CHECK_ON_STARTUP and not database.check_connection():
        logger.warning("Database is not reachable yet, continuing startup")

    return 0
