from dataclasses import dataclass, field
from enum import StrEnum, auto
from pathlib import Path

from stowage.core.models import ArgumentError, CommandGroup, CommandResult
from stowage.core.presenter import info
from stowage.services.storage.client import StorageClient
from stowage.services.storage.domains.file.views import FileView
from stowage.services.storage.utils import (
    format_bytes,
    get_content_type,
    remote_basename,
)

DEFAULT_LIST_LIMIT = 100


class FileAction(StrEnum):
    UPLOAD = auto()
    DOWNLOAD = auto()
    LIST = auto()
    DELETE = auto()
    MOVE = auto()
    COPY = auto()
    INFO = auto()
    EXISTS = auto()
    UPDATE = auto()


@dataclass
class FileRequest:
    action: FileAction
    bucket: str | None = None
    args: list[str] = field(default_factory=list)
    file: str | None = None
    path: str | None = None
    output: str | None = None
    from_path: str | None = None
    to_path: str | None = None
    prefix: str | None = None
    limit: int = DEFAULT_LIST_LIMIT
    search: str | None = None
    upsert: bool = False

    @property
    def remote_path(self) -> str | None:
        """--path, falling back to the first positional argument."""
        if self.path:
            return self.path
        return self.args[0] if self.args else None

    @property
    def destination(self) -> str:
        return self.path or Path(self.file).name

    def validate(self) -> None:
        if not self.bucket:
            raise ArgumentError("Bucket name required")

        if self.action in (FileAction.UPLOAD, FileAction.UPDATE):
            if not self.file:
                raise ArgumentError("File path required (use --file)")
            if not Path(self.file).is_file():
                raise ArgumentError(f"File not found: {self.file}")

        elif self.action is FileAction.DOWNLOAD:
            if not self.remote_path:
                raise ArgumentError(
                    "Remote path required (use --path or provide as argument)"
                )

        elif self.action in (FileAction.INFO, FileAction.EXISTS):
            if not self.remote_path:
                raise ArgumentError(
                    "File path required (use --path or provide as argument)"
                )

        elif self.action is FileAction.DELETE:
            if not self.args:
                raise ArgumentError("At least one path required")

        elif self.action in (FileAction.MOVE, FileAction.COPY):
            if not self.from_path or not self.to_path:
                raise ArgumentError("Both --from and --to required")

        elif self.action is FileAction.LIST:
            if self.limit < 1:
                raise ArgumentError("--limit must be a positive number")


def upload_file(client: StorageClient, request: FileRequest) -> CommandResult:
    content = Path(request.file).read_bytes()
    info(f"Uploading {format_bytes(len(content))}...")

    data = client.upload_file(
        request.bucket,
        request.destination,
        content,
        content_type=get_content_type(request.file),
        upsert=request.upsert,
    )
    stored_path = data.get("path") or request.destination
    return CommandResult(data=data, message=f"Uploaded: {request.bucket}/{stored_path}")


def update_file(client: StorageClient, request: FileRequest) -> CommandResult:
    content = Path(request.file).read_bytes()
    info(f"Updating {format_bytes(len(content))}...")

    data = client.update_file(
        request.bucket,
        request.destination,
        content,
        content_type=get_content_type(request.file),
        upsert=request.upsert,
    )
    stored_path = data.get("path") or request.destination
    return CommandResult(data=data, message=f"Updated: {request.bucket}/{stored_path}")


def download_file(client: StorageClient, request: FileRequest) -> CommandResult:
    remote_path = request.remote_path
    info("Downloading...")

    content = client.download_file(request.bucket, remote_path)

    output = request.output or remote_basename(remote_path)
    Path(output).write_bytes(content)

    return CommandResult(
        data={"path": output, "size": len(content)},
        message=f"Downloaded: {output} ({format_bytes(len(content))})",
    )


def list_files(client: StorageClient, request: FileRequest) -> CommandResult:
    data = client.list_files(
        request.bucket,
        prefix=request.prefix,
        limit=request.limit,
        search=request.search,
    )
    return CommandResult(
        data=data,
        renderer=FileView.render_list,
        context={"bucket": request.bucket, "prefix": request.prefix},
    )


def delete_files(client: StorageClient, request: FileRequest) -> CommandResult:
    info(f"Deleting {len(request.args)} file(s)...")

    data = client.remove_files(request.bucket, request.args)
    return CommandResult(
        data=data,
        renderer=FileView.render_removed,
        message=f"Deleted {len(data)} file(s)",
    )


def move_file(client: StorageClient, request: FileRequest) -> CommandResult:
    data = client.move_file(request.bucket, request.from_path, request.to_path)
    return CommandResult(
        data=data, message=f"Moved: {request.from_path} → {request.to_path}"
    )


def copy_file(client: StorageClient, request: FileRequest) -> CommandResult:
    data = client.copy_file(request.bucket, request.from_path, request.to_path)
    return CommandResult(
        data=data, message=f"Copied: {request.from_path} → {request.to_path}"
    )


def get_file_info(client: StorageClient, request: FileRequest) -> CommandResult:
    info("Getting file info...")

    data = client.get_file_info(request.bucket, request.remote_path)
    return CommandResult(
        data=data,
        renderer=FileView.render_info,
        context={"bucket": request.bucket, "path": request.remote_path},
    )


def check_file_exists(client: StorageClient, request: FileRequest) -> CommandResult:
    exists, error = client.file_exists(request.bucket, request.remote_path)
    return CommandResult(
        data={"exists": exists, "error": error},
        renderer=FileView.render_exists,
        context={"path": request.remote_path},
    )


FILE_COMMANDS = CommandGroup(
    name="file",
    actions=FileAction,
    handlers={
        FileAction.UPLOAD: upload_file,
        FileAction.DOWNLOAD: download_file,
        FileAction.LIST: list_files,
        FileAction.DELETE: delete_files,
        FileAction.MOVE: move_file,
        FileAction.COPY: copy_file,
        FileAction.INFO: get_file_info,
        FileAction.EXISTS: check_file_exists,
        FileAction.UPDATE: update_file,
    },
)
