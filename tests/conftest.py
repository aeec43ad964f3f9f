"""Automatically run by pytest to set up test infrastructure."""

import pytest
import requests_mock

import deco_value_oracle
from deco_value_oracle.config import OracleSettings

from . import settings as test_settings
from .fake_github import FakeGitHub
from .fake_ledger import FakeLedger


def _test_config():
    return {name: value for name, value in vars(test_settings).items() if name.isupper()}


@pytest.fixture
def requests_mocker():
    """Make requests_mock available as a fixture."""
    mocker = requests_mock.Mocker(real_http=False, case_sensitive=True)
    mocker.start()
    try:
        yield mocker
    finally:
        mocker.stop()


@pytest.fixture
def settings():
    """The OracleSettings that the test app would build."""
    return OracleSettings.from_config(_test_config())


@pytest.fixture
def app():
    app = deco_value_oracle.create_app(config="testing")
    app.config.update(_test_config())
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_github(requests_mocker):
    the_fake_github = FakeGitHub()
    the_fake_github.install_mocks(requests_mocker)
    return the_fake_github


@pytest.fixture
def fake_ledger(requests_mocker):
    the_fake_ledger = FakeLedger()
    the_fake_ledger.install_mocks(requests_mocker)
    return the_fake_ledger
