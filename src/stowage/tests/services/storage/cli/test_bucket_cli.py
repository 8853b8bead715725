import json

import pytest

from stowage.core.models import StorageServiceError
from stowage.main import app

BUCKETS = [
    {
        "id": "avatars",
        "name": "avatars",
        "owner": "",
        "public": True,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
        "file_size_limit": 1048576,
        "allowed_mime_types": None,
    },
    {
        "id": "invoices",
        "name": "invoices",
        "owner": "",
        "public": False,
        "created_at": "2024-02-01T00:00:00+00:00",
        "updated_at": "2024-02-01T00:00:00+00:00",
        "file_size_limit": None,
        "allowed_mime_types": ["application/pdf"],
    },
]


def test_list_json_output_is_exact_serialization(cli_runner, mock_client):
    mock_client.list_buckets.return_value = BUCKETS

    result = cli_runner.invoke(app, ["bucket", "list", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == BUCKETS
    assert result.stdout == json.dumps(BUCKETS, indent=2) + "\n"


def test_list_text_output_one_line_per_bucket(cli_runner, mock_client):
    mock_client.list_buckets.return_value = BUCKETS

    result = cli_runner.invoke(app, ["bucket", "list"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "📦 Buckets (2)" in lines
    assert any("🌐 Public" in line and "avatars" in line for line in lines)
    assert any("🔒 Private" in line and "invoices" in line for line in lines)
    assert "    └─ Size Limit: 1 MB" in lines


def test_create_defaults_to_private(cli_runner, mock_client):
    mock_client.create_bucket.return_value = {"name": "docs"}

    result = cli_runner.invoke(app, ["bucket", "create", "docs"])

    assert result.exit_code == 0
    mock_client.create_bucket.assert_called_once_with(
        "docs", public=False, file_size_limit=None, allowed_mime_types=[]
    )
    assert "Bucket created: docs" in result.stderr


def test_create_public_with_constraints(cli_runner, mock_client):
    mock_client.create_bucket.return_value = {"name": "media"}

    result = cli_runner.invoke(
        app,
        [
            "bucket",
            "create",
            "media",
            "--public",
            "--size-limit",
            "5242880",
            "--mime-type",
            "image/png",
            "--mime-type",
            "image/jpeg",
            "--json",
        ],
    )

    assert result.exit_code == 0
    mock_client.create_bucket.assert_called_once_with(
        "media",
        public=True,
        file_size_limit=5242880,
        allowed_mime_types=["image/png", "image/jpeg"],
    )
    assert json.loads(result.stdout) == {"name": "media"}


def test_update_requires_visibility_flag(cli_runner, client_factory):
    result = cli_runner.invoke(app, ["bucket", "update", "docs"])

    assert result.exit_code == 1
    assert "--public flag required for update" in result.stderr
    client_factory.assert_not_called()


def test_update_private(cli_runner, mock_client):
    mock_client.update_bucket.return_value = {"message": "Successfully updated"}

    result = cli_runner.invoke(app, ["bucket", "update", "docs", "--private"])

    assert result.exit_code == 0
    mock_client.update_bucket.assert_called_once_with(
        "docs", public=False, file_size_limit=None, allowed_mime_types=[]
    )
    assert "Bucket updated: docs" in result.stderr


def test_get_renders_details(cli_runner, mock_client):
    mock_client.get_bucket.return_value = BUCKETS[1]

    result = cli_runner.invoke(app, ["bucket", "get", "invoices"])

    assert result.exit_code == 0
    assert "📦 Bucket: invoices" in result.stdout
    assert "Public:      🔒 No" in result.stdout
    assert "MIME Types:  application/pdf" in result.stdout
    mock_client.get_bucket.assert_called_once_with("invoices")


@pytest.mark.parametrize(
    "action,method,message",
    [
        ("empty", "empty_bucket", "Bucket emptied: logs"),
        ("delete", "delete_bucket", "Bucket deleted: logs"),
    ],
)
def test_empty_and_delete(cli_runner, mock_client, action, method, message):
    getattr(mock_client, method).return_value = {"message": "Successfully " + action}

    result = cli_runner.invoke(app, ["bucket", action, "logs"])

    assert result.exit_code == 0
    getattr(mock_client, method).assert_called_once_with("logs")
    assert message in result.stderr


@pytest.mark.parametrize("action", ["create", "get", "update", "empty", "delete"])
def test_name_required(cli_runner, client_factory, action):
    result = cli_runner.invoke(app, ["bucket", action, "--public"])

    assert result.exit_code == 1
    assert "Bucket name required" in result.stderr
    client_factory.assert_not_called()


def test_unknown_action(cli_runner, client_factory):
    result = cli_runner.invoke(app, ["bucket", "rename", "docs"])

    assert result.exit_code == 1
    assert "Unknown action: rename" in result.stderr
    client_factory.assert_not_called()


def test_missing_key(cli_runner, client_factory, monkeypatch):
    monkeypatch.delenv("STORAGE_SERVICE_KEY")

    result = cli_runner.invoke(app, ["bucket", "list"])

    assert result.exit_code == 1
    assert "Storage key not set" in result.stderr
    client_factory.assert_not_called()


def test_key_flag_overrides_missing_env(
    cli_runner, client_factory, mock_client, monkeypatch
):
    monkeypatch.delenv("STORAGE_SERVICE_KEY")
    mock_client.list_buckets.return_value = []

    result = cli_runner.invoke(
        app, ["bucket", "list", "--key", "cli-key", "--url", "http://remote/storage/v1"]
    )

    assert result.exit_code == 0
    config = client_factory.call_args[0][0]
    assert config.key == "cli-key"
    assert config.url == "http://remote/storage/v1/"


def test_service_error_printed_even_in_json_mode(cli_runner, mock_client):
    mock_client.get_bucket.side_effect = StorageServiceError("Bucket not found")

    result = cli_runner.invoke(app, ["bucket", "get", "nope", "--json"])

    assert result.exit_code == 1
    assert "Error: Bucket not found" in result.stderr
    assert result.stdout == ""
