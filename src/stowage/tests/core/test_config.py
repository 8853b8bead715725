import pytest

from stowage.core.config import DEFAULT_STORAGE_URL, StorageConfig, resolve_config
from stowage.core.models import ConfigurationError


def test_flags_take_precedence_over_environment():
    environ = {"STORAGE_URL": "http://env:5000", "STORAGE_SERVICE_KEY": "env-key"}

    config = resolve_config(url="http://flag:9000", key="flag-key", environ=environ)

    assert config.url == "http://flag:9000/"
    assert config.key == "flag-key"


def test_environment_used_when_flags_absent():
    environ = {
        "STORAGE_URL": "http://env:5000/storage/v1",
        "STORAGE_SERVICE_KEY": "env-key",
    }

    config = resolve_config(environ=environ)

    assert config.url == "http://env:5000/storage/v1/"
    assert config.key == "env-key"


@pytest.mark.parametrize(
    "url",
    [
        "http://env:5000/storage/v1",
        "http://env:5000/storage/v1/",
        "http://env:5000/storage/v1//",
    ],
)
def test_url_ends_with_single_slash(url):
    config = resolve_config(url=url, key="k", environ={})

    assert config.url == "http://env:5000/storage/v1/"


def test_default_url_when_nothing_set():
    config = resolve_config(key="k", environ={})
    assert config.url == DEFAULT_STORAGE_URL


@pytest.mark.parametrize("key", [None, "", "   "])
def test_missing_key_fails_fast(key):
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_config(key=key, environ={})

    assert exc_info.value.message == "Storage key not set"
    assert "STORAGE_SERVICE_KEY" in exc_info.value.hint


def test_output_flags_carried_through():
    config = resolve_config(key="k", json_output=True, verbose=True, environ={})

    assert config.json_output is True
    assert config.verbose is True


def test_headers_send_key_twice():
    config = StorageConfig(url="http://x", key="secret")

    assert config.headers == {"apikey": "secret", "Authorization": "Bearer secret"}
