import pytest
from typer.testing import CliRunner

from stowage.services.storage.client import StorageClient


@pytest.fixture(scope="function")
def storage_env(monkeypatch):
    """Service key available through the environment, default URL."""
    monkeypatch.setenv("STORAGE_SERVICE_KEY", "service-role-key")
    monkeypatch.delenv("STORAGE_URL", raising=False)


@pytest.fixture
def client_factory(mocker, storage_env):
    client = mocker.create_autospec(StorageClient, instance=True)
    return mocker.patch("stowage.core.runner.get_storage_client", return_value=client)


@pytest.fixture
def mock_client(client_factory):
    return client_factory.return_value


@pytest.fixture
def cli_runner():
    return CliRunner()
