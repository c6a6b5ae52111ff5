"""
Тесты стартовой процедуры сервиса.

Проверяется:
- успешный старт передаёт дескриптор в пул соединений
- отсутствие переменных окружения прерывает старт с кодом 1
- опциональная проверка доступности БД
"""

import unittest
from unittest.mock import MagicMock, patch

import mysql.connector
import pytest

import src.common.database as database
from src.shipping_service import bootstrap

from env_samples import FIELDS_ENV, URL_ENV


@pytest.mark.startup
class TestBootstrapMain(unittest.TestCase):
    """Tests for bootstrap.main."""

    @patch('src.shipping_service.bootstrap.database')
    def test_successful_startup_initializes_pool(self, mock_database):
        """Test that the resolved descriptor is handed to the pool."""
        result = bootstrap.main(dict(FIELDS_ENV), "fields")

        self.assertEqual(result, 0)
        mock_database.init_pool.assert_called_once()
        config = mock_database.init_pool.call_args.args[0]
        self.assertEqual(config.url, "jdbc:mysql://h:3306/d?useSSL=false&autoReconnect=true")
        self.assertEqual(config.username, "u")

    @patch('src.shipping_service.bootstrap.database')
    def test_missing_configuration_aborts_startup(self, mock_database):
        """Test that missing variables give exit code 1 and no pool."""
        with self.assertLogs('src.shipping_service.bootstrap', level='ERROR') as logs:
            result = bootstrap.main({}, "url")

        self.assertEqual(result, 1)
        self.assertIn("missing required connection URL", logs.output[0])
        mock_database.init_pool.assert_not_called()

    @patch('src.shipping_service.bootstrap.database')
    def test_missing_mysql_variable_aborts_startup(self, mock_database):
        """Test that one missing MYSQL_* variable aborts startup."""
        env = dict(FIELDS_ENV)
        del env["MYSQL_PASSWORD"]

        result = bootstrap.main(env, "fields")

        self.assertEqual(result, 1)
        mock_database.init_pool.assert_not_called()

    @patch('src.shipping_service.bootstrap.DB_CHECK_ON_STARTUP', True)
    @patch('src.shipping_service.bootstrap.database')
    def test_connection_check_on_startup(self, mock_database):
        """Test that an unreachable database is reported but does not abort."""
        mock_database.check_connection.return_value = False

        with self.assertLogs('src.shipping_service.bootstrap', level='WARNING'):
            result = bootstrap.main(dict(FIELDS_ENV), "fields")

        self.assertEqual(result, 0)
        mock_database.check_connection.assert_called_once()

    @patch('src.shipping_service.bootstrap.database')
    def test_connection_check_disabled_by_default(self, mock_database):
        """Test that no connectivity check runs unless enabled."""
        with patch('src.shipping_service.bootstrap.DB_CHECK_ON_STARTUP', False):
            bootstrap.main(dict(FIELDS_ENV), "fields")

        mock_database.check_connection.assert_not_called()


@pytest.mark.startup
class TestBootstrapWithPool(unittest.TestCase):
    """Tests for bootstrap.main with the real pool module and a mocked driver pool."""

    def setUp(self):
        database.reset_pool()
        patcher = patch('src.common.database.mysql.connector.pooling.MySQLConnectionPool')
        self.mock_pool_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(database.reset_pool)

    def test_url_startup_hands_descriptor_to_pool(self):
        """Test that a URL startup succeeds and the pool uses the URL parts."""
        result = bootstrap.main(dict(URL_ENV), "url")

        self.assertEqual(result, 0)
        self.mock_pool_cls.assert_not_called()

        database._get_pool()

        kwargs = self.mock_pool_cls.call_args.kwargs
        self.assertEqual(kwargs["host"], "h")
        self.assertEqual(kwargs["port"], 3306)
        self.assertEqual(kwargs["database"], "d")
        self.assertNotIn("user", kwargs)

    def test_fields_startup_hands_descriptor_to_pool(self):
        """Test that a MYSQL_* startup passes credentials to the pool."""
        result = bootstrap.main(dict(FIELDS_ENV), "fields")

        self.assertEqual(result, 0)

        database._get_pool()

        kwargs = self.mock_pool_cls.call_args.kwargs
        self.assertEqual(kwargs["user"], "u")
        self.assertEqual(kwargs["password"], "p")
        self.assertTrue(kwargs["ssl_disabled"])

    def test_unreachable_database_does_not_abort_startup(self):
        """Test that a refused connection is not raised out of main."""
        self.mock_pool_cls.side_effect = mysql.connector.InterfaceError("2003: Can't connect to MySQL server")

        result = bootstrap.main({"SPRING_DATASOURCE_URL": "jdbc:mysql://127.0.0.1:1/d"}, "url")

        self.assertEqual(result, 0)

    @patch('src.shipping_service.bootstrap.DB_CHECK_ON_STARTUP', True)
    def test_unreachable_database_with_check_logs_warning(self):
        """Test that the startup check reports an unreachable database and continues."""
        self.mock_pool_cls.side_effect = mysql.connector.InterfaceError("2003: Can't connect to MySQL server")

        with self.assertLogs('src.shipping_service.bootstrap', level='WARNING') as logs:
            result = bootstrap.main({"SPRING_DATASOURCE_URL": "jdbc:mysql://127.0.0.1:1/d"}, "url")

        self.assertEqual(result, 0)
        self.assertIn("Database is not reachable yet", logs.output[0])

    @patch('src.shipping_service.bootstrap.DB_CHECK_ON_STARTUP', True)
    def test_reachable_database_with_check(self):
        """Test that a working pool passes the startup check."""
        self.mock_pool_cls.return_value.get_connection.return_value = MagicMock()

        result = bootstrap.main(dict(FIELDS_ENV), "fields")

        self.assertEqual(result, 0)
        self.mock_pool_cls.assert_called_once()

    def test_unsupported_url_aborts_startup(self):
        """Test that a non-MySQL URL gives exit code 1 instead of a traceback."""
        with self.assertLogs('src.shipping_service.bootstrap', level='ERROR') as logs:
            result = bootstrap.main({"SPRING_DATASOURCE_URL": "jdbc:mariadb://h:3306/d"}, "url")

        self.assertEqual(result, 1)
        self.assertIn("unsupported connection URL", logs.output[0])
        self.mock_pool_cls.assert_not_called()

    def test_invalid_port_aborts_startup(self):
        """Test that a non-numeric port gives exit code 1."""
        result = bootstrap.main({"SPRING_DATASOURCE_URL": "jdbc:mysql://h:abc/d"}, "url")

        self.assertEqual(result, 1)


if __name__ == "__main__":
    unittest.main()
