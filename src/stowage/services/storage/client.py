import logging
from collections.abc import Callable
from dataclasses import fields, is_dataclass
from datetime import datetime
from functools import wraps
from typing import Any, TypeVar

import httpx
from storage3 import SyncStorageClient
from storage3.utils import StorageException

from stowage.core.config import StorageConfig
from stowage.core.models import StorageServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def describe_storage_error(error: Exception) -> str:
    """
    Extract the human-readable message from a storage3 exception.

    Depending on the storage3 release the message is either an attribute or
    the ``message`` key of the JSON payload passed as the first argument.
    """
    message = getattr(error, "message", None)
    if message:
        return str(message)

    if error.args and isinstance(error.args[0], dict):
        payload = error.args[0]
        return str(payload.get("message") or payload.get("error") or payload)

    return str(error) or error.__class__.__name__


def storage_call(operation: str) -> Callable:
    """
    Decorator to standardize storage3 and transport error handling.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            targets = [arg for arg in args[1:] if isinstance(arg, str)]
            logger.debug("Storage call %s on %s", operation, targets)
            try:
                return func(*args, **kwargs)
            except StorageException as e:
                message = describe_storage_error(e)
                logger.warning("Storage error in %s: %s", operation, message)
                raise StorageServiceError(message) from e
            except httpx.HTTPError as e:
                logger.warning("Transport error in %s: %s", operation, e)
                raise StorageServiceError(f"Request failed: {e}") from e

        return wrapper

    return decorator


def to_plain(value: Any) -> Any:
    """
    Convert storage3 return values into JSON-ready builtins.

    Dataclass fields starting with an underscore (the bound HTTP session on
    bucket objects) are dropped.
    """
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_plain(item) for item in value]
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_plain(getattr(value, f.name))
            for f in fields(value)
            if not f.name.startswith("_")
        }
    if hasattr(value, "model_dump"):
        return to_plain(value.model_dump())
    return value


def _signed_url(item: dict[str, Any]) -> str | None:
    return item.get("signedUrl") or item.get("signedURL") or item.get("signed_url")


class StorageClient:
    """
    Wrapper for storage3 interactions.

    Every method performs a single request and returns plain dictionaries
    and lists, so results can be serialized as they are.
    """

    BUCKET_FIELDS = (
        "id",
        "name",
        "owner",
        "public",
        "created_at",
        "updated_at",
        "file_size_limit",
        "allowed_mime_types",
    )

    def __init__(self, config: StorageConfig, client: SyncStorageClient | None = None):
        self.config = config
        self._client = client or SyncStorageClient(config.url, config.headers)

    def _bucket_to_dict(self, bucket: Any) -> dict[str, Any]:
        if isinstance(bucket, dict):
            return to_plain(bucket)
        return {
            name: to_plain(getattr(bucket, name, None)) for name in self.BUCKET_FIELDS
        }

    @staticmethod
    def _bucket_options(
        public: bool,
        file_size_limit: int | None = None,
        allowed_mime_types: list[str] | None = None,
    ) -> dict[str, Any]:
        options: dict[str, Any] = {"public": public}
        if file_size_limit is not None:
            options["file_size_limit"] = file_size_limit
        if allowed_mime_types:
            options["allowed_mime_types"] = list(allowed_mime_types)
        return options

    @staticmethod
    def _file_options(content_type: str, upsert: bool) -> dict[str, str]:
        return {"content-type": content_type, "upsert": "true" if upsert else "false"}

    @staticmethod
    def _download_options(download: bool | str | None) -> dict[str, Any] | None:
        if download is None:
            return None
        return {"download": download}

    @storage_call("list_buckets")
    def list_buckets(self) -> list[dict[str, Any]]:
        return [self._bucket_to_dict(bucket) for bucket in self._client.list_buckets()]

    @storage_call("get_bucket")
    def get_bucket(self, name: str) -> dict[str, Any]:
        return self._bucket_to_dict(self._client.get_bucket(name))

    @storage_call("create_bucket")
    def create_bucket(
        self,
        name: str,
        public: bool = False,
        file_size_limit: int | None = None,
        allowed_mime_types: list[str] | None = None,
    ) -> dict[str, Any]:
        options = self._bucket_options(public, file_size_limit, allowed_mime_types)
        return to_plain(self._client.create_bucket(name, options=options))

    @storage_call("update_bucket")
    def update_bucket(
        self,
        name: str,
        public: bool,
        file_size_limit: int | None = None,
        allowed_mime_types: list[str] | None = None,
    ) -> dict[str, Any]:
        options = self._bucket_options(public, file_size_limit, allowed_mime_types)
        return to_plain(self._client.update_bucket(name, options))

    @storage_call("empty_bucket")
    def empty_bucket(self, name: str) -> dict[str, Any]:
        return to_plain(self._client.empty_bucket(name))

    @storage_call("delete_bucket")
    def delete_bucket(self, name: str) -> dict[str, Any]:
        return to_plain(self._client.delete_bucket(name))

    @storage_call("upload")
    def upload_file(
        self,
        bucket: str,
        remote_path: str,
        content: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> dict[str, Any]:
        response = self._client.from_(bucket).upload(
            remote_path, content, self._file_options(content_type, upsert)
        )
        return to_plain(response)

    @storage_call("update")
    def update_file(
        self,
        bucket: str,
        remote_path: str,
        content: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> dict[str, Any]:
        response = self._client.from_(bucket).update(
            remote_path, content, self._file_options(content_type, upsert)
        )
        return to_plain(response)

    @storage_call("download")
    def download_file(self, bucket: str, remote_path: str) -> bytes:
        return self._client.from_(bucket).download(remote_path)

    @storage_call("list")
    def list_files(
        self,
        bucket: str,
        prefix: str | None = None,
        limit: int = 100,
        search: str | None = None,
    ) -> list[dict[str, Any]]:
        options: dict[str, Any] = {"limit": limit}
        if search:
            options["search"] = search
        return to_plain(self._client.from_(bucket).list(prefix or "", options))

    @storage_call("remove")
    def remove_files(self, bucket: str, paths: list[str]) -> list[dict[str, Any]]:
        return to_plain(self._client.from_(bucket).remove(list(paths)))

    @storage_call("move")
    def move_file(self, bucket: str, from_path: str, to_path: str) -> dict[str, Any]:
        return to_plain(self._client.from_(bucket).move(from_path, to_path))

    @storage_call("copy")
    def copy_file(self, bucket: str, from_path: str, to_path: str) -> dict[str, Any]:
        return to_plain(self._client.from_(bucket).copy(from_path, to_path))

    @storage_call("info")
    def get_file_info(self, bucket: str, remote_path: str) -> dict[str, Any]:
        return to_plain(self._client.from_(bucket).info(remote_path))

    @storage_call("exists")
    def _exists(self, bucket: str, remote_path: str) -> bool:
        return bool(self._client.from_(bucket).exists(remote_path))

    def file_exists(self, bucket: str, remote_path: str) -> tuple[bool, str | None]:
        """
        Returns whether the object exists, plus the client's error message
        when the check itself failed. Never raises for service errors.
        """
        try:
            return self._exists(bucket, remote_path), None
        except StorageServiceError as e:
            return False, e.message

    @storage_call("get_public_url")
    def get_public_url(
        self, bucket: str, remote_path: str, download: bool | str | None = None
    ) -> str:
        options = self._download_options(download)
        if options is None:
            return self._client.from_(bucket).get_public_url(remote_path)
        return self._client.from_(bucket).get_public_url(remote_path, options)

    @storage_call("create_signed_url")
    def create_signed_url(
        self,
        bucket: str,
        remote_path: str,
        expires_in: int,
        download: bool | str | None = None,
    ) -> str | None:
        options = self._download_options(download)
        proxy = self._client.from_(bucket)
        if options is None:
            response = proxy.create_signed_url(remote_path, expires_in)
        else:
            response = proxy.create_signed_url(remote_path, expires_in, options)
        return _signed_url(to_plain(response))

    @storage_call("create_signed_urls")
    def create_signed_urls(
        self,
        bucket: str,
        paths: list[str],
        expires_in: int,
        download: bool | str | None = None,
    ) -> list[dict[str, Any]]:
        options = self._download_options(download)
        proxy = self._client.from_(bucket)
        if options is None:
            response = proxy.create_signed_urls(list(paths), expires_in)
        else:
            response = proxy.create_signed_urls(list(paths), expires_in, options)

        return [
            {
                "path": item.get("path"),
                "signedUrl": _signed_url(item),
                "error": item.get("error"),
            }
            for item in to_plain(response)
        ]

    @storage_call("create_signed_upload_url")
    def create_signed_upload_url(self, bucket: str, remote_path: str) -> dict[str, Any]:
        proxy = self._client.from_(bucket)
        response = to_plain(proxy.create_signed_upload_url(remote_path))
        return {
            "path": response.get("path", remote_path),
            "token": response.get("token"),
            "signedUrl": _signed_url(response),
        }


def get_storage_client(config: StorageConfig) -> StorageClient:
    return StorageClient(config)
