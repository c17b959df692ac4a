"""
Shared fixtures.

By default every test gets its own in-process mock backend driven through
FastAPI's TestClient. Set PAYMENTS_HARNESS_LIVE=1 to point the contract
scenarios at a running server (PAYMENTS_API_BASE_URL) instead.
"""

import pytest
from fastapi.testclient import TestClient

from payments_harness.client import PaymentsClient, RefundsClient, build_transport
from payments_harness.config import (
    ClientConfig,
    MockServerConfig,
    live_mode,
    load_client_config,
    log_level,
)
from payments_harness.log import configure_logging
from payments_harness.mock_server import create_app

TEST_BASE_URL = "http://testserver"

configure_logging(log_level())


@pytest.fixture
def mock_app():
    app = create_app(MockServerConfig(database_url="sqlite://"))
    yield app
    app.state.engine.dispose()


@pytest.fixture
def strict_app():
    app = create_app(MockServerConfig(database_url="sqlite://", strict=True))
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client_config():
    if live_mode():
        return load_client_config()
    return ClientConfig(base_url=TEST_BASE_URL)


@pytest.fixture
def transport(request, client_config):
    if live_mode():
        with build_transport(client_config) as c:
            yield c
    else:
        app = request.getfixturevalue("mock_app")
        with TestClient(app) as c:
            yield c


@pytest.fixture
def payments(transport, client_config):
    return PaymentsClient(transport, client_config)


@pytest.fixture
def refunds(transport, client_config):
    return RefundsClient(transport, client_config)


@pytest.fixture
def strict_clients(strict_app):
    config = ClientConfig(base_url=TEST_BASE_URL)
    with TestClient(strict_app) as c:
        yield PaymentsClient(c, config), RefundsClient(c, config)
