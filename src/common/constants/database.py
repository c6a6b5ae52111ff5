"""
Database-related constants.
Never hardcode real credentials in source code!
Credentials are only read from the environment at startup
(see src.shipping_service.datasource.provider).
"""

from typing import Final
import os

# ─────────────────────────────────────────────────────────────
# Environment variable names
# ─────────────────────────────────────────────────────────────

# Pre-built URL mode
ENV_DATASOURCE_URL: Final[str] = "SPRING_DATASOURCE_URL"

# Decomposed fields mode
ENV_MYSQL_HOST: Final[str] = "MYSQL_HOST"
ENV_MYSQL_USER: Final[str] = "MYSQL_USER"
ENV_MYSQL_PASSWORD: Final[str] = "MYSQL_PASSWORD"
ENV_MYSQL_DATABASE: Final[str] = "MYSQL_DATABASE"

MYSQL_FIELD_VARIABLES: Final[tuple[str, ...]] = (
    ENV_MYSQL_HOST,
    ENV_MYSQL_USER,
    ENV_MYSQL_PASSWORD,
    ENV_MYSQL_DATABASE,
)

# ─────────────────────────────────────────────────────────────
# Connection descriptor
# ─────────────────────────────────────────────────────────────

MYSQL_DRIVER: Final[str] = "com.mysql.jdbc.Driver"
MYSQL_PORT: Final[int] = 3306
JDBC_URL_TEMPLATE: Final[str] = (
    "jdbc:mysql://{host}:3306/{database}?useSSL=false&autoReconnect=true"
)
JDBC_MYSQL_PREFIX: Final[str] = "jdbc:mysql://"

# Pool size for the persistence layer, see src.common.database
DB_POOL_SIZE: Final[int] = int(os.getenv("DB_POOL_SIZE", "5"))
DB_POOL_NAME: Final[str] = "shipping_pool"
