"""
Entry Point.
This is the root of the CLI command tree. It should not contain business logic.
It registers the bucket, file and url commands on the main Typer app.
"""

import typer

from stowage.services.storage.cli.bucket import bucket_command
from stowage.services.storage.cli.file import file_command
from stowage.services.storage.cli.url import url_command

app = typer.Typer(
    help="Stowage: object storage from the command line", no_args_is_help=True
)
app.command("bucket")(bucket_command)
app.command("file")(file_command)
app.command("f", hidden=True)(file_command)
app.command("url")(url_command)
app.command("u", hidden=True)(url_command)

if __name__ == "__main__":
    app()
