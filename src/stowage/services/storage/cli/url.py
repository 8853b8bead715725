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
from stowage.services.storage.domains.url.actions import (
    DEFAULT_EXPIRES_IN,
    URL_COMMANDS,
    UrlRequest,
    parse_download,
)


def url_command(
    action: str = action_argument(URL_COMMANDS.choices),
    bucket: str = typer.Argument(None, help="Bucket name", show_default=False),
    path: str = typer.Argument(
        None,
        help="File path in bucket (first of several for signed-urls)",
        show_default=False,
    ),
    args: list[str] = typer.Argument(
        None, help="Additional paths for signed-urls", show_default=False
    ),
    expires: int = typer.Option(
        DEFAULT_EXPIRES_IN, "--expires", help="Expiry time in seconds (signed URLs)"
    ),
    download: str = typer.Option(
        None,
        "--download",
        help="Trigger download: 'true' keeps the original name, anything else renames",
    ),
    url: str = url_option(),
    key: str = key_option(),
    json_output: bool = json_option(),
    verbose: bool = verbose_option(),
):
    """
    Generate URLs for files.
    """
    exit_code = run_command(
        URL_COMMANDS,
        action,
        partial(
            UrlRequest,
            bucket=bucket,
            path=path,
            args=list(args or []),
            expires_in=expires,
            download=parse_download(download),
        ),
        url=url,
        key=key,
        json_output=json_output,
        verbose=verbose,
    )

    if exit_code != 0:
        raise typer.Exit(exit_code)
