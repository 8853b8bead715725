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
from stowage.services.storage.domains.file.actions import (
    DEFAULT_LIST_LIMIT,
    FILE_COMMANDS,
    FileRequest,
)


def file_command(
    action: str = action_argument(FILE_COMMANDS.choices),
    bucket: str = typer.Argument(None, help="Bucket name", show_default=False),
    args: list[str] = typer.Argument(
        None, help="Remote paths (delete) or a single path", show_default=False
    ),
    file: str = typer.Option(None, "--file", help="Local file path to upload"),
    path: str = typer.Option(None, "--path", help="Remote path in bucket"),
    output: str = typer.Option(
        None, "--output", help="Output path for downloaded file"
    ),
    from_path: str = typer.Option(None, "--from", help="Source path"),
    to_path: str = typer.Option(None, "--to", help="Destination path"),
    prefix: str = typer.Option(None, "--prefix", help="Path prefix to list"),
    limit: int = typer.Option(DEFAULT_LIST_LIMIT, "--limit", help="Limit results"),
    search: str = typer.Option(None, "--search", help="Search term"),
    upsert: bool = typer.Option(False, "--upsert", help="Overwrite if exists"),
    url: str = url_option(),
    key: str = key_option(),
    json_output: bool = json_option(),
    verbose: bool = verbose_option(),
):
    """
    Manage files in storage.
    """
    exit_code = run_command(
        FILE_COMMANDS,
        action,
        partial(
            FileRequest,
            bucket=bucket,
            args=list(args or []),
            file=file,
            path=path,
            output=output,
            from_path=from_path,
            to_path=to_path,
            prefix=prefix,
            limit=limit,
            search=search,
            upsert=upsert,
        ),
        url=url,
        key=key,
        json_output=json_output,
        verbose=verbose,
    )

    if exit_code != 0:
        raise typer.Exit(exit_code)
