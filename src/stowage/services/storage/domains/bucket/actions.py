from dataclasses import dataclass, field
from enum import StrEnum, auto

from stowage.core.models import ArgumentError, CommandGroup, CommandResult
from stowage.services.storage.client import StorageClient
from stowage.services.storage.domains.bucket.views import BucketView


class BucketAction(StrEnum):
    LIST = auto()
    CREATE = auto()
    GET = auto()
    UPDATE = auto()
    EMPTY = auto()
    DELETE = auto()


@dataclass
class BucketRequest:
    action: BucketAction
    name: str | None = None
    public: bool | None = None
    file_size_limit: int | None = None
    allowed_mime_types: list[str] = field(default_factory=list)

    def validate(self) -> None:
        if self.action is not BucketAction.LIST and not self.name:
            raise ArgumentError("Bucket name required")

        # update never falls back to private, unlike create
        if self.action is BucketAction.UPDATE and self.public is None:
            raise ArgumentError("--public flag required for update")

        if self.file_size_limit is not None and self.file_size_limit < 0:
            raise ArgumentError("--size-limit must not be negative")


def list_buckets(client: StorageClient, request: BucketRequest) -> CommandResult:
    return CommandResult(data=client.list_buckets(), renderer=BucketView.render_list)


def create_bucket(client: StorageClient, request: BucketRequest) -> CommandResult:
    data = client.create_bucket(
        request.name,
        public=bool(request.public),
        file_size_limit=request.file_size_limit,
        allowed_mime_types=request.allowed_mime_types,
    )
    return CommandResult(data=data, message=f"Bucket created: {request.name}")


def get_bucket(client: StorageClient, request: BucketRequest) -> CommandResult:
    return CommandResult(
        data=client.get_bucket(request.name), renderer=BucketView.render_detail
    )


def update_bucket(client: StorageClient, request: BucketRequest) -> CommandResult:
    data = client.update_bucket(
        request.name,
        public=request.public,
        file_size_limit=request.file_size_limit,
        allowed_mime_types=request.allowed_mime_types,
    )
    return CommandResult(data=data, message=f"Bucket updated: {request.name}")


def empty_bucket(client: StorageClient, request: BucketRequest) -> CommandResult:
    data = client.empty_bucket(request.name)
    return CommandResult(data=data, message=f"Bucket emptied: {request.name}")


def delete_bucket(client: StorageClient, request: BucketRequest) -> CommandResult:
    data = client.delete_bucket(request.name)
    return CommandResult(data=data, message=f"Bucket deleted: {request.name}")


BUCKET_COMMANDS = CommandGroup(
    name="bucket",
    actions=BucketAction,
    handlers={
        BucketAction.LIST: list_buckets,
        BucketAction.CREATE: create_bucket,
        BucketAction.GET: get_bucket,
        BucketAction.UPDATE: update_bucket,
        BucketAction.EMPTY: empty_bucket,
        BucketAction.DELETE: delete_bucket,
    },
)
