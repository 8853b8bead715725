from dataclasses import dataclass, field
from enum import StrEnum

from stowage.core.models import ArgumentError, CommandGroup, CommandResult
from stowage.core.presenter import info
from stowage.services.storage.client import StorageClient
from stowage.services.storage.domains.url.views import UrlView

DEFAULT_EXPIRES_IN = 3600

TRUTHY_DOWNLOAD_VALUES = {"true", "1", "yes"}


class UrlAction(StrEnum):
    PUBLIC = "public"
    SIGNED = "signed"
    SIGNED_UPLOAD = "signed-upload"
    SIGNED_URLS = "signed-urls"


def parse_download(value: str | None) -> bool | str | None:
    """
    '--download true' requests a download under the original name; any
    other value is used as the downloaded file name.
    """
    if value is None:
        return None
    if value.strip().lower() in TRUTHY_DOWNLOAD_VALUES:
        return True
    return value


@dataclass
class UrlRequest:
    action: UrlAction
    bucket: str | None = None
    path: str | None = None
    args: list[str] = field(default_factory=list)
    expires_in: int = DEFAULT_EXPIRES_IN
    download: bool | str | None = None

    @property
    def paths(self) -> list[str]:
        if self.path:
            return [self.path, *self.args]
        return list(self.args)

    def validate(self) -> None:
        if not self.bucket:
            raise ArgumentError("Bucket name required")

        if self.action is UrlAction.SIGNED_URLS:
            if not self.paths:
                raise ArgumentError("At least one path required for signed URLs")
        elif not self.path:
            messages = {
                UrlAction.PUBLIC: "Path required for public URL",
                UrlAction.SIGNED: "Path required for signed URL",
                UrlAction.SIGNED_UPLOAD: "Path required for signed upload URL",
            }
            raise ArgumentError(messages[self.action])

        if self.action in (UrlAction.SIGNED, UrlAction.SIGNED_URLS):
            if self.expires_in < 1:
                raise ArgumentError("--expires must be a positive number of seconds")


def get_public_url(client: StorageClient, request: UrlRequest) -> CommandResult:
    public_url = client.get_public_url(
        request.bucket, request.path, download=request.download
    )
    return CommandResult(
        data={"publicUrl": public_url},
        renderer=UrlView.render_public,
        context={"download": request.download},
    )


def get_signed_url(client: StorageClient, request: UrlRequest) -> CommandResult:
    signed_url = client.create_signed_url(
        request.bucket,
        request.path,
        request.expires_in,
        download=request.download,
    )
    return CommandResult(
        data={"signedUrl": signed_url},
        renderer=UrlView.render_signed,
        context={"expires_in": request.expires_in},
    )


def get_signed_upload_url(client: StorageClient, request: UrlRequest) -> CommandResult:
    return CommandResult(
        data=client.create_signed_upload_url(request.bucket, request.path),
        renderer=UrlView.render_signed_upload,
    )


def get_signed_urls(client: StorageClient, request: UrlRequest) -> CommandResult:
    paths = request.paths
    info(f"Creating signed URLs for {len(paths)} file(s)...")

    items = client.create_signed_urls(
        request.bucket, paths, request.expires_in, download=request.download
    )
    generated = sum(1 for item in items if not item.get("error"))

    return CommandResult(
        data=items,
        renderer=UrlView.render_signed_batch,
        context={"expires_in": request.expires_in},
        summary=f"{generated}/{len(items)} URLs generated successfully",
    )


URL_COMMANDS = CommandGroup(
    name="url",
    actions=UrlAction,
    handlers={
        UrlAction.PUBLIC: get_public_url,
        UrlAction.SIGNED: get_signed_url,
        UrlAction.SIGNED_UPLOAD: get_signed_upload_url,
        UrlAction.SIGNED_URLS: get_signed_urls,
    },
)
