from enum import StrEnum

ERR_MISSING_DATASOURCE_URL = 100
ERR_MISSING_MYSQL_VARIABLES = 101
ERR_UNKNOWN_STRATEGY = 102
ERR_UNSUPPORTED_URL = 103


ERROR_MESSAGES = {
    ERR_MISSING_DATASOURCE_URL: "missing required connection URL",
    ERR_MISSING_MYSQL_VARIABLES: "missing required MySQL environment variables",
    ERR_UNKNOWN_STRATEGY: "unknown data source strategy",
    ERR_UNSUPPORTED_URL: "unsupported connection URL",
}

# Код выхода процесса при срыве старта
EXIT_CODE_CONFIGURATION_ERROR = 1


class DataSourceStrategy(StrEnum):
    AUTO = "auto"
    URL = "url"
    FIELDS = "fields"


class ConfigurationError(RuntimeError):
    """
    Обязательные параметры подключения отсутствуют или некорректны.

    Фатальна на старте: не перехватывается и не повторяется,
    точка входа превращает её в ненулевой код выхода.
    """

    def __init__(self, code: int, missing: tuple[str, ...] = (), detail: str = ""):
        self.code = code
        self.missing = tuple(missing)
        self.message = ERROR_MESSAGES[code]
        text = self.message
        if self.missing:
            text = f"{text}: {', '.join(self.missing)}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)
