import pytest

from env_samples import FIELDS_ENV, URL_ENV


@pytest.fixture
def fields_env():
    return dict(FIELDS_ENV)


@pytest.fixture
def url_env():
    return dict(URL_ENV)


def pytest_configure(config):
    config.addinivalue_line("markers", "startup: tests of the service startup routine")
