from functools import partial

import typer

from stowage.core.runner import run_command
from stowage.services.storage.cli import (
    action_argument,
    json_option,
    key_option,
    url_option,
    verbose_option,
)
from stowage.services.storage.domains.bucket.actions import (
    BUCKET_COMMANDS,
    BucketRequest,
)


def bucket_command(
    action: str = action_argument(BUCKET_COMMANDS.choices),
    name: str = typer.Argument(None, help="Bucket name", show_default=False),
    public: bool | None = typer.Option(
        None,
        "--public/--private",
        help="Bucket visibility (create defaults to private, update requires it)",
        show_default=False,
    ),
    size_limit: int = typer.Option(
        None, "--size-limit", help="Maximum object size in bytes"
    ),
    mime_types: list[str] = typer.Option(
        None, "--mime-type", help="Allowed MIME type, repeatable"
    ),
    url: str = url_option(),
    key: str = key_option(),
    json_output: bool = json_option(),
    verbose: bool = verbose_option(),
):
    """
    Manage storage buckets.
    """
    exit_code = run_command(
        BUCKET_COMMANDS,
        action,
        partial(
            BucketRequest,
            name=name,
            public=public,
            file_size_limit=size_limit,
            allowed_mime_types=list(mime_types or []),
        ),
        url=url,
        key=key,
        json_output=json_output,
        verbose=verbose,
    )

    if exit_code != 0:
        raise typer.Exit(exit_code)
